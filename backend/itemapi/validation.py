from __future__ import annotations

from typing import Any, Iterable

from itemapi.schemas import ItemCreate

REQUIRED_TEXT_FIELDS = {
    "name": "Name is required",
    "description": "Description is required",
}
PRICE_REQUIRED = "Price is required"


def validate_item_payload(payload: ItemCreate) -> dict[str, str]:
    """Return field -> message for every invalid field; empty when the payload is valid."""
    errors: dict[str, str] = {}
    for field, message in REQUIRED_TEXT_FIELDS.items():
        value = getattr(payload, field)
        if value is None or not value.strip():
            errors[field] = message
    if payload.price is None:
        errors["price"] = PRICE_REQUIRED
    return errors


def field_from_location(loc: Iterable[Any]) -> str:
    """
    Map a request validation location to a field name.

    ("body", "price") -> "price", ("path", "item_id") -> "item_id".
    Locations with no named field (malformed JSON, non-object body) map to "body".
    """
    parts = list(loc)
    names = [part for part in parts[1:] if isinstance(part, str)]
    if names:
        return names[-1]
    return "body"


def collect_request_errors(errors: Iterable[dict]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for error in errors:
        field = field_from_location(error.get("loc", ()))
        fields.setdefault(field, error.get("msg", "Invalid value"))
    return fields
