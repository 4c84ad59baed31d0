from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.model import (
    Combinator,
    CompoundSelector,
    Fragment,
    FragmentKind,
    Selector,
    SimpleSelector,
)

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "CompoundSelector",
    "Fragment",
    "FragmentKind",
    "Selector",
    "SimpleSelector",
]
