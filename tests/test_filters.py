"""Tests for the in-memory filter predicates and SQL condition builder."""

from decimal import Decimal

from sqlalchemy.dialects import sqlite

from conftest import make_property
from models import Property, SearchFilters
from services.property_filters import (
    build_range_filter,
    build_search_conditions,
    in_range,
    matches_filters,
    matches_location,
)


def as_row(**overrides) -> Property:
    return Property(**make_property(**overrides).model_dump())


class TestInRange:

    def test_open_bounds(self):
        assert in_range(5)
        assert in_range(5, minimum=None, maximum=None)

    def test_inclusive(self):
        assert in_range(5, 5, 5)
        assert not in_range(4, 5, None)
        assert not in_range(6, None, 5)


class TestMatchesLocation:

    def test_blank_matches_everything(self):
        assert matches_location(as_row(), None)
        assert matches_location(as_row(), "")

    def test_checks_village_and_neighborhood(self):
        prop = as_row(location="Amman", village="Naur", neighborhood="Um Al Basatin")
        assert matches_location(prop, "naur")
        assert matches_location(prop, "basatin")
        assert not matches_location(prop, "zarqa")

    def test_missing_optional_fields(self):
        prop = as_row(location="Amman", village=None, neighborhood=None)
        assert matches_location(prop, "amm")


class TestMatchesFilters:

    def test_empty_filters_match(self):
        assert matches_filters(as_row(), SearchFilters())

    def test_each_filter_can_exclude(self):
        prop = as_row(price=Decimal("100000"), size=500, bedrooms=2, bathrooms=1, property_type="land")

        assert not matches_filters(prop, SearchFilters(min_price=100001))
        assert not matches_filters(prop, SearchFilters(max_size=499))
        assert not matches_filters(prop, SearchFilters(property_type="farm"))
        assert not matches_filters(prop, SearchFilters(bedrooms=3))
        assert not matches_filters(prop, SearchFilters(bathrooms=2))
        assert not matches_filters(prop, SearchFilters(governorate_id=1))

    def test_combined_filters(self):
        prop = as_row(price=Decimal("100000"), size=500, bedrooms=2, location="Abdoun")
        filters = SearchFilters(min_price=90000, max_price=100000, min_size=500, bedrooms=2, location="abd")
        assert matches_filters(prop, filters)


class TestSqlConditions:

    def test_no_filters_no_conditions(self):
        assert build_search_conditions(Property, SearchFilters()) == []

    def test_range_filter_count(self):
        assert len(build_range_filter(Property.price, 1, None)) == 1
        assert len(build_range_filter(Property.price, 1, 2)) == 2

    def test_location_condition_escapes_wildcards(self):
        conditions = build_search_conditions(Property, SearchFilters(location="50%"))

        assert len(conditions) == 1
        sql = str(conditions[0].compile(dialect=sqlite.dialect()))
        assert "ESCAPE" in sql
        assert "lower" in sql.lower()

    def test_one_condition_per_filter(self):
        filters = SearchFilters(
            min_price=1, max_price=2, min_size=3, max_size=4, property_type="land",
            bedrooms=1, bathrooms=1, location="x", governorate_id=1, directorate_id=2,
        )
        assert len(build_search_conditions(Property, filters)) == 10
