"""Tests for the JSON codec."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

import pytest

from realty_store.exceptions import CorruptStateError, ValidationError
from realty_store.models import Contact, Operation, Property, PropertyType, User, UserRole
from realty_store.storage.serialization import (
    coerce_property_fields,
    decode_record,
    decode_records,
    encode_records,
    property_from_dict,
    serialize_value,
    to_decimal,
    to_dict,
    user_from_dict,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


def _stored_property(**overrides) -> dict:
    data = {
        "id": "prop-001",
        "title": "Furnished Apartment",
        "description": "Close to transport.",
        "price": "800",
        "property_type": "apartment",
        "operation": "rental",
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 80.0,
        "location": "Downtown",
        "images": ["cover.jpg"],
        "features": ["Elevator"],
        "contact": {"whatsapp": "+1", "telegram": "@a"},
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-02T00:00:00+00:00",
    }
    data.update(overrides)
    return data


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_nested_contact(self) -> None:
        prop = property_from_dict(_stored_property())
        result = to_dict(prop)
        assert result["contact"] == {"whatsapp": "+1", "telegram": "@a"}
        assert result["property_type"] == "apartment"


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_enum(self) -> None:
        assert serialize_value(_SampleEnum.VALUE_A) == "VALUE_A"

    def test_list_and_tuple(self) -> None:
        assert serialize_value((Decimal("1"), Operation.SALE)) == ["1", "sale"]


class TestCoercePropertyFields:
    """Tests for coerce_property_fields."""

    def test_strings_become_model_types(self) -> None:
        result = coerce_property_fields(
            {"price": 1500, "property_type": "house", "operation": "sale", "contact": {"whatsapp": "+9"}}
        )
        assert result["price"] == Decimal("1500")
        assert result["property_type"] is PropertyType.HOUSE
        assert result["operation"] is Operation.SALE
        assert result["contact"] == Contact(whatsapp="+9", telegram="")

    def test_float_price_keeps_its_decimal_text(self) -> None:
        assert coerce_property_fields({"price": 0.1})["price"] == Decimal("0.1")

    def test_only_present_keys_returned(self) -> None:
        assert coerce_property_fields({"title": "New"}) == {"title": "New"}

    def test_unknown_enum_value(self) -> None:
        with pytest.raises(ValidationError, match="property_type"):
            coerce_property_fields({"property_type": "castle"})

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError, match="Unknown listing fields: colour"):
            coerce_property_fields({"colour": "blue"})

    def test_images_must_be_a_list(self) -> None:
        with pytest.raises(ValidationError, match="images"):
            coerce_property_fields({"images": "a.jpg"})

    def test_boolean_is_not_a_number(self) -> None:
        with pytest.raises(ValidationError, match="bedrooms"):
            coerce_property_fields({"bedrooms": True})

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-inf", float("nan"), Decimal("Infinity")])
    def test_non_finite_price_rejected(self, price) -> None:
        with pytest.raises(ValidationError, match="finite"):
            coerce_property_fields({"price": price})

    @pytest.mark.parametrize("bedrooms", [2.9, "2.9", Decimal("2.5"), float("inf")])
    def test_fractional_count_rejected(self, bedrooms) -> None:
        with pytest.raises(ValidationError, match="whole number"):
            coerce_property_fields({"bedrooms": bedrooms})

    def test_integral_float_count_accepted(self) -> None:
        assert coerce_property_fields({"bathrooms": 3.0, "bedrooms": "4"}) == {"bathrooms": 3, "bedrooms": 4}

    def test_non_finite_area_rejected(self) -> None:
        with pytest.raises(ValidationError, match="area"):
            coerce_property_fields({"area": "nan"})

    def test_to_decimal(self) -> None:
        assert to_decimal(12.5, "price") == Decimal("12.5")
        with pytest.raises(ValidationError, match="min_price"):
            to_decimal("cheap", "min_price")


class TestDecoding:
    """Tests for decoding stored text."""

    def test_property_from_dict(self) -> None:
        prop = property_from_dict(_stored_property())

        assert isinstance(prop, Property)
        assert prop.price == Decimal("800")
        assert prop.created_at == NOW
        assert prop.images == ["cover.jpg"]

    def test_property_from_dict_accepts_zulu_timestamps(self) -> None:
        prop = property_from_dict(_stored_property(created_at="2024-01-01T00:00:00.000Z"))
        assert prop.created_at == NOW

    def test_property_missing_id_is_corrupt(self) -> None:
        data = _stored_property()
        del data["id"]
        with pytest.raises(CorruptStateError):
            property_from_dict(data)

    def test_property_bad_enum_is_corrupt(self) -> None:
        with pytest.raises(CorruptStateError):
            property_from_dict(_stored_property(operation="lease"))

    def test_property_non_finite_price_is_corrupt(self) -> None:
        with pytest.raises(CorruptStateError):
            property_from_dict(_stored_property(price="NaN"))

    def test_user_from_dict(self) -> None:
        user = user_from_dict(
            {"id": "u1", "email": "a@b.c", "name": "A", "role": "admin",
             "created_at": "2024-01-01T00:00:00+00:00"}
        )
        assert user == User(id="u1", email="a@b.c", name="A", role=UserRole.ADMIN, created_at=NOW)

    def test_user_bad_role_is_corrupt(self) -> None:
        with pytest.raises(CorruptStateError):
            user_from_dict({"id": "u1", "email": "a", "name": "A", "role": "owner",
                            "created_at": "2024-01-01T00:00:00"})

    def test_decode_records_rejects_invalid_json(self) -> None:
        with pytest.raises(CorruptStateError, match="not valid JSON"):
            decode_records("[{", property_from_dict)

    def test_decode_records_rejects_non_list(self) -> None:
        with pytest.raises(CorruptStateError, match="JSON array"):
            decode_records('{"a": 1}', property_from_dict)

    def test_decode_record_rejects_non_object(self) -> None:
        with pytest.raises(CorruptStateError, match="JSON object"):
            decode_record("[]", user_from_dict)

    def test_encoded_records_are_a_json_array(self) -> None:
        prop = property_from_dict(_stored_property())
        data = json.loads(encode_records([prop]))

        assert data == [_stored_property()]
