"""Input checks for forms submitted to the stores."""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from realty_store.exceptions import ValidationError
from realty_store.models import Contact, Operation, PropertyType

REQUIRED_LISTING_FIELDS = ("title", "price", "type", "operation")


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated form value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _optional_int(form: Mapping[str, Any], name: str, errors: list[str]) -> int:
    raw = str(form.get(name) or "").strip()
    if not raw:
        return 0
    try:
        value = int(raw)
    except ValueError:
        errors.append(f"{name} must be a whole number")
        return 0
    if value < 0:
        errors.append(f"{name} must not be negative")
    return value


def parse_listing_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """Turn raw listing form values into data for ``create_property``.

    ``title``, ``price``, ``type`` and ``operation`` are required.
    Bedrooms, bathrooms and area default to zero. ``images`` and
    ``features`` are comma-separated lists.

    Raises
    ------
    ValidationError
        Listing every problem found.
    """
    errors: list[str] = []
    missing = [name for name in REQUIRED_LISTING_FIELDS if not str(form.get(name) or "").strip()]
    if missing:
        errors.append(f"missing required fields: {', '.join(missing)}")

    price = Decimal("0")
    if "price" not in missing:
        try:
            price = Decimal(str(form["price"]).strip())
        except InvalidOperation:
            errors.append("price must be a number")
        else:
            if not price.is_finite() or price < 0:
                errors.append("price must be a non-negative number")

    property_type = None
    if "type" not in missing:
        try:
            property_type = PropertyType(str(form["type"]).strip())
        except ValueError:
            errors.append(f"type must be one of: {', '.join(t.value for t in PropertyType)}")

    operation = None
    if "operation" not in missing:
        try:
            operation = Operation(str(form["operation"]).strip())
        except ValueError:
            errors.append(f"operation must be one of: {', '.join(o.value for o in Operation)}")

    bedrooms = _optional_int(form, "bedrooms", errors)
    bathrooms = _optional_int(form, "bathrooms", errors)

    area = 0.0
    raw_area = str(form.get("area") or "").strip()
    if raw_area:
        try:
            area = float(raw_area)
        except ValueError:
            errors.append("area must be a number")
        else:
            if area < 0:
                errors.append("area must not be negative")

    if errors:
        raise ValidationError("; ".join(errors))

    return {
        "title": str(form["title"]).strip(),
        "description": str(form.get("description") or "").strip(),
        "price": price,
        "property_type": property_type,
        "operation": operation,
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "area": area,
        "location": str(form.get("location") or "").strip(),
        "images": split_csv(form.get("images")),
        "features": split_csv(form.get("features")),
        "contact": Contact(
            whatsapp=str(form.get("whatsapp") or "").strip(),
            telegram=str(form.get("telegram") or "").strip(),
        ),
    }


def validate_registration(
    email: str,
    password: str,
    confirm_password: str,
    name: str,
    min_length: int = 6,
) -> None:
    """Check a sign-up form before ``AccountStore.create_user``."""
    if not email.strip() or not name.strip() or not password:
        raise ValidationError("Email, name and password are required")
    if "@" not in email:
        raise ValidationError(f"Invalid email {email!r}")
    if password != confirm_password:
        raise ValidationError("Passwords do not match")
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")


def validate_password_change(
    current_password: str,
    new_password: str,
    confirm_password: str,
    min_length: int = 6,
) -> None:
    """Check a password change form before ``AccountStore.change_password``."""
    if not current_password or not new_password or not confirm_password:
        raise ValidationError("All password fields are required")
    if new_password != confirm_password:
        raise ValidationError("New passwords do not match")
    if len(new_password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")
