"""JSON helpers: canonical encoding and factory-driven decoding.

Decoding never guesses the target type. Callers pass a factory that maps the
parsed field-bag to a typed value, e.g. ``Rectangle.from_fields`` or
``field_factory(SomeDataclass)``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any, Callable, TypeVar

from selectorkit.config import DEFAULT_CODEC_CONFIG, CodecConfig
from selectorkit.errors import NotAnObjectError, ParseError

__all__ = ["to_json", "from_json", "field_factory"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Factory = Callable[[dict[str, Any]], T]


def _null_non_finite(value: Any) -> Any:
    """Replace NaN and infinities with None inside plain containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _null_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_null_non_finite(item) for item in value]
    return value


def _object_fields(obj: Any) -> dict[str, Any]:
    """An object's own fields, in declaration/insertion order."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # Shallow; nested objects come back through the encoder hook.
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> str:
    """Return the canonical JSON text of *value*.

    NaN and infinities are written as ``null``. With
    ``CodecConfig(nan_as_null=False)`` they raise ``ValueError`` instead.

    >>> to_json([1, 2, 3])
    '[1,2,3]'
    >>> to_json({"width": 10, "height": 20})
    '{"width":10,"height":20}'
    """
    if config.nan_as_null:
        value = _null_non_finite(value)

        def default(obj: Any) -> Any:
            return _null_non_finite(_object_fields(obj))

    else:
        default = _object_fields

    return json.dumps(
        value,
        default=default,
        separators=config.separators,
        ensure_ascii=config.ensure_ascii,
        indent=config.indent,
        allow_nan=False,
    )


def from_json(factory: Factory[T], text: str) -> T:
    """Parse *text* into a field-bag and build a value with *factory*.

    Raises:
        ParseError: *text* is not well-formed JSON.
        NotAnObjectError: *text* is well-formed but not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Failed to parse JSON: %s", exc)
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc

    if not isinstance(data, dict):
        raise NotAnObjectError(type(data).__name__)

    return factory(dict(data))


def field_factory(cls: Callable[..., T]) -> Factory[T]:
    """Return a factory that passes every parsed field as a keyword argument."""

    def build(fields: dict[str, Any]) -> T:
        return cls(**fields)

    return build
