"""Fluent facade for building CSS selectors.

Example:
    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    -> a[href$=".png"]:focus
"""

from __future__ import annotations

import logging

from selectorkit.selector.model import (
    Combinator,
    CompoundSelector,
    Selector,
    SimpleSelector,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)

_STANDARD_COMBINATORS = frozenset(c.value for c in Combinator)


class SelectorBuilder:
    """Stateless entry point: every call starts from an empty selector.

    The returned SimpleSelector carries the same append methods, so chains
    continue on the value itself.
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> CompoundSelector:
        """Join two complete selectors; operands are wrapped as given."""
        token = str(combinator)
        if token not in _STANDARD_COMBINATORS:
            logger.warning("Combining selectors with non-standard combinator %r", token)
        return CompoundSelector(left=left, combinator=token, right=right)

    def stringify(self, selector: Selector) -> str:
        return selector.stringify()


css_selector_builder = SelectorBuilder()
