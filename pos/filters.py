import django_filters
from django.db.models import Case, IntegerField, Value, When

from .models import Order

STATUS_FILTERS = {
    'active': [Order.STATUS_PENDING, Order.STATUS_IN_PROGRESS],
    'pending': [Order.STATUS_PENDING],
    'in_progress': [Order.STATUS_IN_PROGRESS],
    'completed': [Order.STATUS_COMPLETED],
}


def with_status_rank(queryset):
    """Annotate and order by lifecycle position, oldest first within a status."""
    return queryset.annotate(
        status_rank=Case(
            When(status=Order.STATUS_PENDING, then=Value(0)),
            When(status=Order.STATUS_IN_PROGRESS, then=Value(1)),
            When(status=Order.STATUS_COMPLETED, then=Value(2)),
            default=Value(3),
            output_field=IntegerField(),
        )
    ).order_by('status_rank', 'created_at')


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(
        choices=[(key, key) for key in STATUS_FILTERS],
        method='filter_status',
    )
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = Order
        fields = ['status', 'search']

    def filter_status(self, queryset, name, value):
        return queryset.filter(status__in=STATUS_FILTERS[value])

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(customer_name__icontains=value)
