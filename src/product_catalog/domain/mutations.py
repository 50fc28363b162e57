"""Field-level validation for product create and partial-update requests.

Raw input arrives loosely typed (straight from a JSON body). A field that
was not sent at all is represented by MISSING, which is distinct from a
field sent as null, "" or 0.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from product_catalog.domain.errors import ValidationError
from product_catalog.domain.product import (
    CATEGORY_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_MAX,
    PRICE_SCALE,
)


class _Missing(enum.Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING

FIELDS = ("name", "price", "category")


@dataclass(frozen=True, slots=True)
class ProductInput:
    """Raw, unvalidated product fields as received from the caller."""

    name: Any = MISSING
    price: Any = MISSING
    category: Any = MISSING

    def provided(self) -> list[str]:
        return [name for name in FIELDS if getattr(self, name) is not MISSING]


@dataclass(frozen=True, slots=True)
class ProductFields:
    """Validated, normalized fields ready to be written. None means "leave unchanged"."""

    name: str | None = None
    price: Decimal | None = None
    category: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            name: getattr(self, name) for name in FIELDS if getattr(self, name) is not None
        }


def _error(field: str, message: str, code: str) -> dict[str, str]:
    return {"field": field, "message": message, "code": code}


def _check_text(
    field: str, value: Any, max_length: int, errors: list[dict[str, str]]
) -> str | None:
    label = field.capitalize()
    if not isinstance(value, str) or not value.strip():
        errors.append(_error(field, f"{label} must be a non-empty string", "INVALID_TEXT"))
        return None

    value = value.strip()
    if len(value) > max_length:
        errors.append(
            _error(field, f"{label} cannot exceed {max_length} characters", "TOO_LONG")
        )
        return None
    return value


def _check_price(value: Any, errors: list[dict[str, str]]) -> Decimal | None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        errors.append(_error("price", "Price must be a valid number", "INVALID_NUMBER"))
        return None
    if isinstance(value, float) and not math.isfinite(value):
        errors.append(_error("price", "Price must be a valid number", "INVALID_NUMBER"))
        return None

    price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    if not price.is_finite():
        errors.append(_error("price", "Price must be a valid number", "INVALID_NUMBER"))
        return None
    if price <= 0:
        errors.append(_error("price", "Price must be greater than 0", "NOT_POSITIVE"))
        return None
    if price > PRICE_MAX:
        errors.append(_error("price", f"Price cannot exceed {PRICE_MAX}", "TOO_LARGE"))
        return None
    if price != price.quantize(Decimal(1).scaleb(-PRICE_SCALE)):
        errors.append(
            _error(
                "price",
                f"Price cannot have more than {PRICE_SCALE} decimal places",
                "TOO_PRECISE",
            )
        )
        return None
    return price


def _validate_present(data: ProductInput, errors: list[dict[str, str]]) -> ProductFields:
    name = price = category = None
    if data.name is not MISSING:
        name = _check_text("name", data.name, NAME_MAX_LENGTH, errors)
    if data.price is not MISSING:
        price = _check_price(data.price, errors)
    if data.category is not MISSING:
        category = _check_text("category", data.category, CATEGORY_MAX_LENGTH, errors)
    return ProductFields(name=name, price=price, category=category)


def _raise_if_any(errors: list[dict[str, str]]) -> None:
    if errors:
        raise ValidationError(
            message=", ".join(error["message"] for error in errors),
            errors=errors,
        )


def validate_create(data: ProductInput) -> ProductFields:
    """
    Validate a create request.

    All three fields are required. Every violation is collected and
    reported in a single ValidationError.

    Raises:
        ValidationError: If any field is missing or invalid
    """
    errors: list[dict[str, str]] = []
    for name in FIELDS:
        if getattr(data, name) is MISSING:
            errors.append(_error(name, f"{name.capitalize()} is required", "REQUIRED"))

    fields = _validate_present(data, errors)
    _raise_if_any(errors)
    return fields


def drop_blank_fields(data: ProductInput) -> ProductInput:
    """Treat "" for name/category and 0 for price as not provided."""
    changes: dict[str, Any] = {}
    if data.name == "":
        changes["name"] = MISSING
    if data.category == "":
        changes["category"] = MISSING
    if (
        not isinstance(data.price, bool)
        and isinstance(data.price, (int, float, Decimal))
        and data.price == 0
    ):
        changes["price"] = MISSING
    return replace(data, **changes)


def validate_update(data: ProductInput) -> ProductFields:
    """
    Validate a partial-update request.

    Blank values are dropped first (see drop_blank_fields). Each remaining
    field must be valid on its own, and at least one must remain.

    Raises:
        ValidationError: If a present field is invalid or no field remains
    """
    data = drop_blank_fields(data)

    errors: list[dict[str, str]] = []
    if not data.provided():
        errors.append(
            _error(
                "body",
                "At least one field (name, price, or category) must be provided with a valid value",
                "NO_FIELDS",
            )
        )

    fields = _validate_present(data, errors)
    _raise_if_any(errors)
    return fields
