"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import FragmentKind


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder misuse
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector fragment could not be appended."""


class DuplicateSelectorPartError(SelectorError):
    """Element, id or pseudo-element appended twice to the same selector."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {kind.label})"
        )
        self.kind = kind


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment that must follow it."""

    def __init__(self, kind: FragmentKind, existing: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element "
            f"({kind.label} after {existing.label})"
        )
        self.kind = kind
        self.existing = existing


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------


class ParseError(SelectorKitError):
    """Raised when JSON text cannot be parsed into a field-bag."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class NotAnObjectError(ParseError):
    """Raised when well-formed JSON has a non-object top-level value."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Expected a JSON object, got {type_name}")
        self.type_name = type_name
