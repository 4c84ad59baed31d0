"""Selector model: fragments, simple selectors, and combinator trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, StrEnum

from selectorkit.errors import DuplicateSelectorPartError, OrderViolationError

logger = logging.getLogger(__name__)


class FragmentKind(Enum):
    """The kind of a selector fragment, valued by its canonical rank.

    Canonical order:
        0 = element (div)
        1 = id (#main)
        2 = class (.container)
        3 = attribute ([href])
        4 = pseudo-class (:focus)
        5 = pseudo-element (::before)
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def unique(self) -> bool:
        """True if at most one fragment of this kind may appear in a selector."""
        return self in _UNIQUE_KINDS

    @property
    def label(self) -> str:
        return _LABELS[self]

    def render(self, text: str) -> str:
        """Render *text* with this kind's CSS punctuation."""
        return _TEMPLATES[self].format(text)


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_LABELS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class",
    FragmentKind.ATTRIBUTE: "attribute",
    FragmentKind.PSEUDO_CLASS: "pseudo-class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo-element",
}

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


class Combinator(StrEnum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Fragment:
    """One syntactic piece of a simple selector."""

    kind: FragmentKind
    text: str

    def __str__(self) -> str:
        return self.kind.render(self.text)


@dataclass(frozen=True)
class SimpleSelector:
    """An immutable sequence of fragments with no combinator.

    Fragments are kept in insertion order. Every append returns a new
    selector; a rejected append raises and leaves the receiver as it was.
    """

    fragments: tuple[Fragment, ...] = ()

    # --- fragment appends -----------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Return a copy of this selector extended with a *kind* fragment.

        Raises:
            DuplicateSelectorPartError: *kind* is unique and already present.
            OrderViolationError: a fragment ranked after *kind* is already present.
        """
        if kind.unique and kind in self.kinds:
            logger.debug("Rejected duplicate %s fragment %r", kind.label, value)
            raise DuplicateSelectorPartError(kind)

        for fragment in self.fragments:
            if fragment.kind.rank > kind.rank:
                logger.debug(
                    "Rejected %s fragment %r after %s",
                    kind.label,
                    value,
                    fragment.kind.label,
                )
                raise OrderViolationError(kind, fragment.kind)

        return SimpleSelector(fragments=(*self.fragments, Fragment(kind, value)))

    # --- inspection -----------------------------------------------------------

    @property
    def kinds(self) -> list[FragmentKind]:
        return [fragment.kind for fragment in self.fragments]

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render fragments in canonical order; equal kinds keep insertion order."""
        ordered = sorted(self.fragments, key=lambda f: f.kind.rank)
        return "".join(str(fragment) for fragment in ordered)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CompoundSelector:
    """Two selectors joined by a combinator, forming a binary tree."""

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        # One space either side, even for the descendant combinator itself.
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


Selector = SimpleSelector | CompoundSelector
