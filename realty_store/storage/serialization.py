"""JSON codec between stored text and domain records."""

import json
import math
from dataclasses import asdict
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from realty_store.exceptions import CorruptStateError, ValidationError
from realty_store.models import Contact, Operation, Property, PropertyType, User, UserRole

T = TypeVar("T")


def to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


# Field coercion

def _enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {name} {value!r}, expected one of: {allowed}") from None


def to_decimal(value: Any, name: str) -> Decimal:
    """Convert a price-like value to a finite ``Decimal``."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name} {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid {name} {value!r}") from None
    if not result.is_finite():
        raise ValidationError(f"Invalid {name} {value!r}, expected a finite number")
    return result


def _integer(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name} {value!r}")
    try:
        if isinstance(value, (float, Decimal)) and (
            not math.isfinite(value) or value != int(value)
        ):
            raise ValidationError(f"Invalid {name} {value!r}, expected a whole number")
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"Invalid {name} {value!r}, expected a whole number") from None


def _real(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name} {value!r}")
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name} {value!r}") from None
    if not math.isfinite(result):
        raise ValidationError(f"Invalid {name} {value!r}, expected a finite number")
    return result


def _contact(value: Any) -> Contact:
    if isinstance(value, Contact):
        return value
    if isinstance(value, Mapping):
        return Contact(
            whatsapp=str(value.get("whatsapp", "")),
            telegram=str(value.get("telegram", "")),
        )
    raise ValidationError(f"Invalid contact {value!r}")


def _str_list(value: Any, name: str) -> list[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(f"Invalid {name} {value!r}, expected a list of strings")
    return [str(v) for v in value]


_COERCERS: dict[str, Callable[[Any], Any]] = {
    "title": str,
    "description": str,
    "location": str,
    "price": lambda v: to_decimal(v, "price"),
    "property_type": lambda v: _enum(PropertyType, v, "property_type"),
    "operation": lambda v: _enum(Operation, v, "operation"),
    "bedrooms": lambda v: _integer(v, "bedrooms"),
    "bathrooms": lambda v: _integer(v, "bathrooms"),
    "area": lambda v: _real(v, "area"),
    "images": lambda v: _str_list(v, "images"),
    "features": lambda v: _str_list(v, "features"),
    "contact": _contact,
}


def coerce_property_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce listing content fields to their model types.

    Unknown field names and values that cannot hold their declared type
    raise ``ValidationError``. Only the keys present in ``data`` are
    returned, so the result can serve as a partial update.
    """
    unknown = sorted(set(data) - set(_COERCERS))
    if unknown:
        raise ValidationError(f"Unknown listing fields: {', '.join(unknown)}")
    return {key: _COERCERS[key](value) for key, value in data.items()}


# Decoding

def property_from_dict(data: Mapping[str, Any]) -> Property:
    """Rebuild a ``Property`` from its stored dict."""
    try:
        content = coerce_property_fields(
            {k: v for k, v in data.items() if k not in ("id", "created_at", "updated_at")}
        )
        return Property(
            id=str(data["id"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            **content,
        )
    except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as exc:
        raise CorruptStateError(f"Malformed listing record: {exc}") from exc


def user_from_dict(data: Mapping[str, Any]) -> User:
    """Rebuild a ``User`` from its stored dict."""
    try:
        return User(
            id=str(data["id"]),
            email=str(data["email"]),
            name=str(data["name"]),
            role=UserRole(data["role"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise CorruptStateError(f"Malformed account record: {exc}") from exc


def encode_record(record: Any) -> str:
    """Serialize one dataclass record to JSON text."""
    return json.dumps(to_dict(record), ensure_ascii=False)


def encode_records(records: list[Any]) -> str:
    """Serialize a sequence of dataclass records to JSON text."""
    return json.dumps([to_dict(r) for r in records], ensure_ascii=False)


def decode_record(text: str, decoder: Callable[[Mapping[str, Any]], T]) -> T:
    """Parse JSON text holding one record."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptStateError(f"Stored record is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise CorruptStateError(f"Expected a JSON object, got {type(data).__name__}")
    return decoder(data)


def decode_records(text: str, decoder: Callable[[Mapping[str, Any]], T]) -> list[T]:
    """Parse JSON text holding an ordered sequence of records."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptStateError(f"Stored collection is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CorruptStateError(f"Expected a JSON array, got {type(data).__name__}")
    records = []
    for item in data:
        if not isinstance(item, dict):
            raise CorruptStateError(f"Expected a JSON object, got {type(item).__name__}")
        records.append(decoder(item))
    return records
