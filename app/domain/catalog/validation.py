"""
Field rules for product records.

Each field of a product is described once in ``PRODUCT_RULES``.
Validation evaluates every rule and collects every violation before
raising, so a client can fix all problems in one round-trip.
No framework imports allowed.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.domain.catalog.errors import ValidationError

CREATE_FAILED_MESSAGE = "Product validation failed"
UPDATE_FAILED_MESSAGE = "Product update validation failed"

_MISSING = object()


class FieldKind(Enum):
    """JSON type a field must hold."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldRule:
    """Declarative rule for one product field.

    Attributes:
        key: Name of the field in the request payload.
        attribute: Name of the matching Product attribute.
        label: Human-readable name used in violation messages.
        kind: Expected JSON type.
        expectation: Phrase describing a valid value.
        max_length: Maximum length for string fields.
        minimum: Lower bound (inclusive) for number fields.
    """

    key: str
    attribute: str
    label: str
    kind: FieldKind
    expectation: str
    max_length: Optional[int] = None
    minimum: Optional[float] = None

    def violation(self, value: Any, required: bool) -> Optional[str]:
        """Return the violation message for ``value``, or None if it is valid.

        Update mode reports a single message per field, whichever
        constraint failed.
        """
        if not self._has_kind(value):
            return self._message(required)
        if self.minimum is not None and value < self.minimum:
            return self._message(required)
        if self.max_length is not None and len(value) > self.max_length:
            if required:
                return f"{self.label} must be less than {self.max_length} characters"
            return self._message(required)
        return None

    def _has_kind(self, value: Any) -> bool:
        if self.kind is FieldKind.STRING:
            return isinstance(value, str) and value != ""
        if self.kind is FieldKind.NUMBER:
            # bool is an int subclass but never a valid number here
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            try:
                return math.isfinite(value)
            except OverflowError:
                # int too large for a float
                return False
        return isinstance(value, bool)

    def _message(self, required: bool) -> str:
        if required:
            return f"{self.label} is required and must be {self.expectation}"
        if self.max_length is not None:
            return (
                f"{self.label} must be {self.expectation} "
                f"and less than {self.max_length} characters"
            )
        return f"{self.label} must be {self.expectation}"


PRODUCT_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        key="name",
        attribute="name",
        label="Name",
        kind=FieldKind.STRING,
        expectation="a string",
        max_length=100,
    ),
    FieldRule(
        key="description",
        attribute="description",
        label="Description",
        kind=FieldKind.STRING,
        expectation="a string",
        max_length=500,
    ),
    FieldRule(
        key="price",
        attribute="price",
        label="Price",
        kind=FieldKind.NUMBER,
        expectation="a non-negative number",
        minimum=0,
    ),
    FieldRule(
        key="category",
        attribute="category",
        label="Category",
        kind=FieldKind.STRING,
        expectation="a string",
    ),
    FieldRule(
        key="inStock",
        attribute="in_stock",
        label="inStock",
        kind=FieldKind.BOOLEAN,
        expectation="a boolean",
    ),
)


def validate_create(payload: dict[str, Any]) -> None:
    """Check a full product record. Every field is required.

    Raises:
        ValidationError: listing every violated rule.
    """
    errors = []
    for rule in PRODUCT_RULES:
        message = rule.violation(payload.get(rule.key, _MISSING), required=True)
        if message:
            errors.append(message)
    if errors:
        raise ValidationError(CREATE_FAILED_MESSAGE, errors)


def validate_update(payload: dict[str, Any]) -> None:
    """Check a partial product record. Absent fields are not checked.

    Raises:
        ValidationError: listing every violated rule.
    """
    errors = []
    for rule in PRODUCT_RULES:
        if rule.key not in payload:
            continue
        message = rule.violation(payload[rule.key], required=False)
        if message:
            errors.append(message)
    if errors:
        raise ValidationError(UPDATE_FAILED_MESSAGE, errors)


def extract_fields(payload: dict[str, Any]) -> dict[str, Any]:
    """Map the known payload keys to Product attribute names.

    Unknown keys and server-owned fields (id, timestamps) are dropped.
    """
    return {
        rule.attribute: payload[rule.key]
        for rule in PRODUCT_RULES
        if rule.key in payload
    }
