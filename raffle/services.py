"""
Giveaway draws weighted by how many orders each participant has placed
"""
import logging
import random

from django.db import transaction

from core.exceptions import NoEligibleParticipants
from pos.models import Order
from .models import RaffleParticipant

logger = logging.getLogger(__name__)


class RaffleService:

    @staticmethod
    def join(customer_name, phone_number):
        """Enter or refresh a participant; entries always equal their current order count."""
        entries = Order.objects.filter(customer_name=customer_name).count()
        participant, created = RaffleParticipant.objects.update_or_create(
            customer_name=customer_name,
            phone_number=phone_number,
            defaults={'entries': entries},
        )
        logger.info(
            "%s raffle participant %s with %d entries",
            'Added' if created else 'Updated', customer_name, entries,
        )
        return participant, created

    @staticmethod
    def draw_winner():
        """
        Pick a winner among participants who have not won yet, weighted by entries.

        Returns:
            The winning RaffleParticipant, already marked as has_won

        Raises:
            NoEligibleParticipants: nobody eligible, or nobody eligible has any entries
        """
        with transaction.atomic():
            eligible = list(RaffleParticipant.objects.select_for_update().filter(has_won=False))
            if not eligible:
                raise NoEligibleParticipants()
            if sum(participant.entries for participant in eligible) == 0:
                raise NoEligibleParticipants('No entries found for eligible participants.')

            winner = random.choices(eligible, weights=[participant.entries for participant in eligible], k=1)[0]
            winner.has_won = True
            winner.save(update_fields=['has_won', 'updated_at'])

        logger.info("Raffle winner drawn: %s", winner.customer_name)
        return winner

    @staticmethod
    def reset_winners():
        return RaffleParticipant.objects.filter(has_won=True).update(has_won=False)
