import django_filters
from django.db.models import Q

from modules.tailoring.models import (
    BlouseMeasurement,
    CustomOrder,
    LehengaMeasurement,
    SalwarMeasurement,
)


def _search_user(queryset, name, value):
    return queryset.filter(
        Q(user__name__icontains=value) | Q(user__email__icontains=value)
    )


class CustomOrderFilter(django_filters.FilterSet):
    status = django_filters.CharFilter(field_name="status", lookup_expr="iexact")
    garment_type = django_filters.CharFilter(field_name="garment_type", lookup_expr="iexact")
    user_id = django_filters.UUIDFilter(field_name="user_id")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = CustomOrder
        fields = ["status", "garment_type", "user_id", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(user__name__icontains=value)
            | Q(user__email__icontains=value)
            | Q(model_name__icontains=value)
            | Q(fabric__icontains=value)
        )


class MeasurementFilter(django_filters.FilterSet):
    """``user_id`` wins over ``search`` when both are given."""

    user_id = django_filters.UUIDFilter(field_name="user_id")
    custom_order_id = django_filters.UUIDFilter(field_name="custom_order_id")
    search = django_filters.CharFilter(method="filter_search")

    def filter_search(self, queryset, name, value):
        if self.data.get("user_id"):
            return queryset
        return _search_user(queryset, name, value)


class BlouseMeasurementFilter(MeasurementFilter):
    class Meta:
        model = BlouseMeasurement
        fields = ["user_id", "custom_order_id", "search"]


class SalwarMeasurementFilter(MeasurementFilter):
    class Meta:
        model = SalwarMeasurement
        fields = ["user_id", "custom_order_id", "search"]


class LehengaMeasurementFilter(MeasurementFilter):
    class Meta:
        model = LehengaMeasurement
        fields = ["user_id", "custom_order_id", "search"]
