"""Tests for request schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from models import (
    EntrustmentCreate,
    NewsletterCreate,
    PLACEHOLDER_IMAGE,
    PropertyCreate,
    PropertyUpdate,
    SearchFilters,
    ServiceType,
    SiteSettingsUpdate,
)


class TestPropertyCreate:

    def test_empty_images_fall_back_to_placeholder(self, property_payload):
        prop = PropertyCreate(**{**property_payload, "images": []})
        assert prop.images == [PLACEHOLDER_IMAGE]

    def test_missing_images_fall_back_to_placeholder(self, property_payload):
        assert PropertyCreate(**property_payload).images == [PLACEHOLDER_IMAGE]

    def test_price_parsed_as_decimal(self, property_payload):
        assert PropertyCreate(**property_payload).price == Decimal("250000")

    @pytest.mark.parametrize("field,value", [
        ("price", "-1"),
        ("size", -5),
        ("title", ""),
        ("price", "abc"),
    ])
    def test_invalid_values_rejected(self, property_payload, field, value):
        with pytest.raises(ValidationError):
            PropertyCreate(**{**property_payload, field: value})

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            PropertyCreate(title="only a title")


class TestPropertyUpdate:

    def test_changes_only_contains_sent_fields(self):
        assert PropertyUpdate(price="5").changes() == {"price": Decimal("5")}

    def test_nullable_field_can_be_cleared(self):
        assert PropertyUpdate(basin=None).changes() == {"basin": None}

    def test_null_required_field_dropped(self):
        assert PropertyUpdate(title=None, featured=True).changes() == {"featured": True}

    def test_empty_images_become_placeholder(self):
        assert PropertyUpdate(images=[]).changes() == {"images": [PLACEHOLDER_IMAGE]}


class TestLeadSchemas:

    def test_newsletter_email_normalized(self):
        assert NewsletterCreate(email="Sara@Rand.jo").email == "sara@rand.jo"

    def test_newsletter_invalid_email(self):
        with pytest.raises(ValidationError):
            NewsletterCreate(email="not-an-email")

    def test_entrustment_service_type(self):
        data = EntrustmentCreate(
            first_name="Omar", last_name="Nasser", email="omar@rand.jo", phone="0790000000",
            property_type="land", location="Naur", description="Corner plot", service_type="sell",
        )
        assert data.service_type == ServiceType.sell

        with pytest.raises(ValidationError):
            EntrustmentCreate(**{**data.model_dump(), "service_type": "lease"})


class TestSearchFilters:

    def test_blank_strings_become_none(self):
        filters = SearchFilters(min_price="", location="  ", governorate_id="")
        assert filters.min_price is None
        assert filters.location is None
        assert filters.governorate_id is None

    def test_numeric_strings_parsed(self):
        assert SearchFilters(min_price="1000").min_price == Decimal("1000")


def test_site_settings_values_must_be_strings():
    with pytest.raises(ValidationError):
        SiteSettingsUpdate(settings={"footer_phone": 123})
