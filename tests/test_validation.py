"""Tests for form validation helpers."""

from decimal import Decimal

import pytest

from realty_store.exceptions import ValidationError
from realty_store.models import Contact, Operation, PropertyType
from realty_store.validation import (
    parse_listing_form,
    split_csv,
    validate_password_change,
    validate_registration,
)


@pytest.fixture
def form() -> dict[str, str]:
    return {
        "title": " Sunny House ",
        "description": "Near the beach",
        "price": "250000",
        "type": "house",
        "operation": "sale",
        "bedrooms": "3",
        "bathrooms": "",
        "area": "180.5",
        "location": "Blue Coast",
        "images": "a.jpg, b.jpg,, ",
        "features": "Pool,Garden",
        "whatsapp": "+1234567890",
        "telegram": "@agent",
    }


class TestSplitCsv:
    """Tests for split_csv."""

    def test_split(self) -> None:
        assert split_csv(" a, b ,,c ") == ["a", "b", "c"]

    def test_empty(self) -> None:
        assert split_csv("") == []
        assert split_csv(None) == []


class TestParseListingForm:
    """Tests for parse_listing_form."""

    def test_parse(self, form: dict[str, str]) -> None:
        data = parse_listing_form(form)

        assert data["title"] == "Sunny House"
        assert data["price"] == Decimal("250000")
        assert data["property_type"] is PropertyType.HOUSE
        assert data["operation"] is Operation.SALE
        assert data["bedrooms"] == 3
        assert data["bathrooms"] == 0
        assert data["area"] == 180.5
        assert data["images"] == ["a.jpg", "b.jpg"]
        assert data["features"] == ["Pool", "Garden"]
        assert data["contact"] == Contact(whatsapp="+1234567890", telegram="@agent")

    def test_missing_required_fields(self) -> None:
        with pytest.raises(ValidationError, match="title, price, type, operation"):
            parse_listing_form({"description": "x"})

    def test_invalid_values_reported_together(self, form: dict[str, str]) -> None:
        form.update(price="-5", type="castle", bedrooms="two")

        with pytest.raises(ValidationError) as exc_info:
            parse_listing_form(form)

        message = str(exc_info.value)
        assert "price" in message
        assert "type must be one of" in message
        assert "bedrooms" in message

    def test_non_numeric_price(self, form: dict[str, str]) -> None:
        form["price"] = "a lot"
        with pytest.raises(ValidationError, match="price must be a number"):
            parse_listing_form(form)

    def test_negative_area(self, form: dict[str, str]) -> None:
        form["area"] = "-1"
        with pytest.raises(ValidationError, match="area"):
            parse_listing_form(form)


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_valid(self) -> None:
        validate_registration("ana@example.com", "secret1", "secret1", "Ana")

    def test_mismatch(self) -> None:
        with pytest.raises(ValidationError, match="do not match"):
            validate_registration("ana@example.com", "secret1", "secret2", "Ana")

    def test_too_short(self) -> None:
        with pytest.raises(ValidationError, match="at least 6"):
            validate_registration("ana@example.com", "abc", "abc", "Ana")

    def test_custom_min_length(self) -> None:
        validate_registration("ana@example.com", "abc", "abc", "Ana", min_length=3)

    def test_missing_fields(self) -> None:
        with pytest.raises(ValidationError, match="required"):
            validate_registration("", "secret1", "secret1", "Ana")

    def test_email_without_at(self) -> None:
        with pytest.raises(ValidationError, match="Invalid email"):
            validate_registration("ana.example.com", "secret1", "secret1", "Ana")


class TestValidatePasswordChange:
    """Tests for validate_password_change."""

    def test_valid(self) -> None:
        validate_password_change("old", "secret2", "secret2")

    def test_missing(self) -> None:
        with pytest.raises(ValidationError, match="required"):
            validate_password_change("", "secret2", "secret2")

    def test_mismatch(self) -> None:
        with pytest.raises(ValidationError, match="do not match"):
            validate_password_change("old", "secret2", "secret3")
