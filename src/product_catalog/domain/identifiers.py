from __future__ import annotations

from uuid import UUID

from product_catalog.domain.errors import ValidationError


def parse_product_id(raw: str) -> str:
    """
    Structural check of a product identifier.

    Runs before any storage lookup. A malformed identifier is a client input
    error; a well-formed one that matches nothing is reported later as not found.

    Args:
        raw: Identifier token from the request path

    Returns:
        Canonical (lowercase, hyphenated) UUID string

    Raises:
        ValidationError: If the token is not a valid UUID
    """
    try:
        return str(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(
            message="Invalid product ID format",
            errors=[
                {
                    "field": "id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_ID",
                }
            ],
        )
