"""
Query filters for medicine listing and search.

``MedicineFilter`` is a typed record of optional constraints parsed from the
query string and translated into ORM lookups. Text constraints are
case-insensitive substring matches; price bounds are inclusive.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.db.models import Q
from rest_framework.exceptions import ValidationError

from apps.pharmacies.models import Pharmacy

TRUE_VALUES = {"true", "1", "yes", "on"}


def _text(params, key):
    value = (params.get(key) or "").strip()
    return value or None


def _decimal(params, key):
    raw = _text(params, key)
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError({key: f"{key} must be a number."})
    if not value.is_finite():
        raise ValidationError({key: f"{key} must be a number."})
    return value


def _integer(params, key):
    raw = _text(params, key)
    if raw is None:
        return None
    # isdigit() alone also accepts digits int() rejects, such as "²"
    if not (raw.isascii() and raw.isdigit()):
        raise ValidationError({key: f"{key} must be a valid id."})
    return int(raw)


@dataclass(frozen=True)
class MedicineFilter:
    pharmacy_id: Optional[int] = None
    name: Optional[str] = None
    category: Optional[str] = None
    in_stock: bool = False
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    location: Optional[str] = None
    pharmacy_name: Optional[str] = None

    @classmethod
    def from_query_params(cls, params):
        return cls(
            pharmacy_id=_integer(params, "pharmacyId"),
            name=_text(params, "name"),
            category=_text(params, "category"),
            in_stock=(params.get("inStock") or "").strip().lower() in TRUE_VALUES,
            min_price=_decimal(params, "minPrice"),
            max_price=_decimal(params, "maxPrice"),
            location=_text(params, "location"),
            pharmacy_name=_text(params, "pharmacyName"),
        )

    @property
    def restricts_pharmacies(self):
        return bool(self.location or self.pharmacy_name)

    def matching_pharmacy_ids(self):
        """Ids of pharmacies whose address/location or name match."""
        queryset = Pharmacy.objects.all()
        if self.location:
            queryset = queryset.filter(
                Q(address__icontains=self.location) | Q(location__icontains=self.location)
            )
        if self.pharmacy_name:
            queryset = queryset.filter(name__icontains=self.pharmacy_name)
        return list(queryset.values_list("id", flat=True))

    def apply(self, queryset):
        if self.pharmacy_id is not None:
            queryset = queryset.filter(pharmacy_id=self.pharmacy_id)
        if self.name:
            queryset = queryset.filter(name__icontains=self.name)
        if self.category:
            queryset = queryset.filter(category__icontains=self.category)
        if self.in_stock:
            queryset = queryset.filter(stock__gt=0)
        if self.min_price is not None:
            queryset = queryset.filter(price__gte=self.min_price)
        if self.max_price is not None:
            queryset = queryset.filter(price__lte=self.max_price)
        if self.restricts_pharmacies:
            queryset = queryset.filter(pharmacy_id__in=self.matching_pharmacy_ids())
        return queryset
