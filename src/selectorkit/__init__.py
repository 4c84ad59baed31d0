"""selectorkit: an immutable CSS selector builder plus small object helpers."""

from selectorkit.errors import (
    DuplicateSelectorPartError,
    NotAnObjectError,
    OrderViolationError,
    ParseError,
    SelectorError,
    SelectorKitError,
)
from selectorkit.objects import Rectangle, field_factory, from_json, to_json
from selectorkit.selector import (
    Combinator,
    CompoundSelector,
    Fragment,
    FragmentKind,
    Selector,
    SelectorBuilder,
    SimpleSelector,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    # selector
    "SelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "CompoundSelector",
    "Fragment",
    "FragmentKind",
    "Selector",
    "SimpleSelector",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
    "field_factory",
    # errors
    "SelectorKitError",
    "SelectorError",
    "DuplicateSelectorPartError",
    "OrderViolationError",
    "ParseError",
    "NotAnObjectError",
    "__version__",
]
