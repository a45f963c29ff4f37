"""Validation result types.

This module defines structured result types for field validation,
replacing the primitive (ok, value, message) triple with type-safe,
testable value objects.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Immutable outcome of a single parse or validate stage.

    On success ``message`` is empty. On failure it is a lower-case fragment
    meant to follow the field name, e.g. "is an invalid email".

    Still unpacks like the triple it replaces::

        ok, value, message = parse_number("42 items")
    """

    success: bool
    value: T
    message: str = ""

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success

    def __iter__(self) -> Iterator[Any]:
        return iter((self.success, self.value, self.message))


@dataclass(frozen=True)
class ValidationError:
    """A failed check tied to a named form section."""

    section: str
    value: str
    message: str

    def __str__(self) -> str:
        return f"{self.section}: {self.message}"

    def format_error(self) -> str:
        """Format error line for error reports."""
        return str(self)
