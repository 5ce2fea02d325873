"""
Reusable property filters

Each filter exists twice: as a SQLAlchemy condition for DbStorage and as a
plain predicate for MemStorage. Both must agree on every edge case.
"""
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import or_

LOCATION_FIELDS = ("location", "village", "neighborhood")


def build_range_filter(column, minimum=None, maximum=None) -> List[Any]:
    """Inclusive range conditions on a column"""
    conditions = []
    if minimum is not None:
        conditions.append(column >= minimum)
    if maximum is not None:
        conditions.append(column <= maximum)
    return conditions


def build_location_filter(Property, location: Optional[str]):
    """Case-insensitive substring match on any location field"""
    if not location:
        return None
    term = location.strip()
    return or_(*[getattr(Property, name).icontains(term, autoescape=True) for name in LOCATION_FIELDS])


def build_search_conditions(Property, filters) -> List[Any]:
    """Conditions for a SearchFilters object, to be joined with AND"""
    conditions = []

    conditions.extend(build_range_filter(Property.price, filters.min_price, filters.max_price))
    conditions.extend(build_range_filter(Property.size, filters.min_size, filters.max_size))

    if filters.property_type:
        conditions.append(Property.property_type == filters.property_type)

    if filters.bedrooms is not None:
        conditions.append(Property.bedrooms >= filters.bedrooms)

    if filters.bathrooms is not None:
        conditions.append(Property.bathrooms >= filters.bathrooms)

    location_filter = build_location_filter(Property, filters.location)
    if location_filter is not None:
        conditions.append(location_filter)

    if filters.governorate_id is not None:
        conditions.append(Property.governorate_id == filters.governorate_id)

    if filters.directorate_id is not None:
        conditions.append(Property.directorate_id == filters.directorate_id)

    return conditions


def in_range(value, minimum=None, maximum=None) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def matches_location(prop, location: Optional[str]) -> bool:
    if not location:
        return True
    term = location.strip().casefold()
    return any(
        term in (getattr(prop, name) or "").casefold()
        for name in LOCATION_FIELDS
    )


def matches_filters(prop, filters) -> bool:
    """In-memory equivalent of build_search_conditions"""
    if not in_range(Decimal(prop.price), filters.min_price, filters.max_price):
        return False
    if not in_range(prop.size, filters.min_size, filters.max_size):
        return False
    if filters.property_type and prop.property_type != filters.property_type:
        return False
    if filters.bedrooms is not None and prop.bedrooms < filters.bedrooms:
        return False
    if filters.bathrooms is not None and prop.bathrooms < filters.bathrooms:
        return False
    if not matches_location(prop, filters.location):
        return False
    if filters.governorate_id is not None and prop.governorate_id != filters.governorate_id:
        return False
    if filters.directorate_id is not None and prop.directorate_id != filters.directorate_id:
        return False
    return True
