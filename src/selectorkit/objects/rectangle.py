"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A width/height pair. Inputs are stored as given, without validation."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> Rectangle:
        """Build a rectangle from a parsed JSON field-bag."""
        return cls(width=fields["width"], height=fields["height"])
