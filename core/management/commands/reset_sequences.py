from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from django.core.management.color import no_style
from django.db import connection, transaction

PROJECT_APPS = ('accounts', 'core', 'menu', 'pos', 'inventory', 'labels', 'raffle')


class Command(BaseCommand):
    help = "Realign PostgreSQL id sequences for the project apps after a bulk import"

    def add_arguments(self, parser):
        parser.add_argument('--dry-run', action='store_true', help="Print the SQL without executing it")

    def handle(self, *args, **options):
        if connection.vendor != 'postgresql':
            raise CommandError(f"reset_sequences only supports PostgreSQL (current backend: {connection.vendor}).")

        models = [
            model
            for config in apps.get_app_configs() if config.label in PROJECT_APPS
            for model in config.get_models()
        ]
        statements = connection.ops.sequence_reset_sql(no_style(), models)
        if not statements:
            self.stdout.write(self.style.WARNING("No sequences to reset."))
            return

        for statement in statements:
            self.stdout.write(statement)
        if options['dry_run']:
            return

        with transaction.atomic(), connection.cursor() as cursor:
            for statement in statements:
                cursor.execute(statement)
        self.stdout.write(self.style.SUCCESS(f"Reset {len(statements)} sequence(s)."))
