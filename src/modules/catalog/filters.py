import django_filters

from modules.catalog.models import (
    BlouseDesign,
    BlouseModel,
    Fabric,
    LehengaModel,
    SalwarKameezModel,
)


class GarmentModelFilter(django_filters.FilterSet):
    min_price = django_filters.NumberFilter(field_name="final_price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="final_price", lookup_expr="lte")
    is_active = django_filters.BooleanFilter(field_name="is_active")


class BlouseModelFilter(GarmentModelFilter):
    class Meta:
        model = BlouseModel
        fields = ["min_price", "max_price", "is_active"]


class LehengaModelFilter(GarmentModelFilter):
    class Meta:
        model = LehengaModel
        fields = ["min_price", "max_price", "is_active"]


class SalwarKameezModelFilter(GarmentModelFilter):
    class Meta:
        model = SalwarKameezModel
        fields = ["min_price", "max_price", "is_active"]


class BlouseDesignFilter(django_filters.FilterSet):
    # designs carry no price of their own; the stitching charge stands in
    min_price = django_filters.NumberFilter(field_name="stitch_cost", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="stitch_cost", lookup_expr="lte")
    category = django_filters.UUIDFilter(field_name="category_id")

    class Meta:
        model = BlouseDesign
        fields = ["type", "category", "min_price", "max_price", "is_active"]


class FabricFilter(django_filters.FilterSet):
    type = django_filters.CharFilter(field_name="type", lookup_expr="iexact")
    color = django_filters.CharFilter(field_name="color", lookup_expr="iexact")
    min_price = django_filters.NumberFilter(field_name="price_per_meter", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price_per_meter", lookup_expr="lte")

    class Meta:
        model = Fabric
        fields = ["type", "color", "min_price", "max_price", "is_active"]
