"""Tests for the SelectorBuilder facade."""

import logging

import pytest

from selectorkit.errors import DuplicateSelectorPartError, OrderViolationError
from selectorkit.selector import (
    Combinator,
    CompoundSelector,
    SelectorBuilder,
    SimpleSelector,
    css_selector_builder,
)

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("element", "x"),
            ("id", "#x"),
            ("class_", ".x"),
            ("attr", "[x]"),
            ("pseudo_class", ":x"),
            ("pseudo_element", "::x"),
        ],
    )
    def test_each_method_starts_fresh(self, method, expected):
        result = getattr(builder, method)("x")
        assert isinstance(result, SimpleSelector)
        assert builder.stringify(result) == expected

    def test_calls_do_not_share_state(self):
        builder.element("div")
        assert builder.element("span").stringify() == "span"

    def test_module_instance_is_builder(self):
        assert isinstance(css_selector_builder, SelectorBuilder)


# ---------------------------------------------------------------------------
# Known scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_id_with_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_element_with_pseudo_element(self):
        sel = builder.element("p").pseudo_class("first-of-type").pseudo_element("first-letter")
        assert sel.stringify() == "p:first-of-type::first-letter"

    def test_duplicate_id_after_element(self):
        sel = builder.element("div").id("main")
        with pytest.raises(DuplicateSelectorPartError):
            sel.id("x")

    def test_order_violation_from_facade(self):
        with pytest.raises(OrderViolationError):
            builder.class_("a").element("div")

    def test_immutability(self):
        b1 = builder.element("div")
        b2 = b1.id("x")
        assert b1.stringify() == "div"
        assert b2.stringify() == "div#x"


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        a = builder.element("h1").class_("title")
        b = builder.element("p")
        sel = builder.combine(a, "+", b)
        assert isinstance(sel, CompoundSelector)
        assert sel.stringify() == a.stringify() + " + " + b.stringify()

    def test_accepts_enum_member(self):
        sel = builder.combine(builder.element("ul"), Combinator.CHILD, builder.element("li"))
        assert sel.combinator == ">"
        assert type(sel.combinator) is str
        assert sel.stringify() == "ul > li"

    def test_nested_example(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_operands_are_not_validated(self):
        sel = builder.combine(SimpleSelector(), ">", SimpleSelector())
        assert sel.stringify() == " > "

    def test_reused_operand(self):
        item = builder.element("li")
        sel = builder.combine(item, "~", item)
        assert sel.stringify() == "li ~ li"
        assert item.stringify() == "li"

    def test_non_standard_combinator_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="selectorkit.selector.builder"):
            sel = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert sel.stringify() == "a || b"
        assert "non-standard combinator" in caplog.text

    def test_standard_combinator_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="selectorkit.selector.builder"):
            builder.combine(builder.element("a"), "~", builder.element("b"))
        assert caplog.records == []


class TestStringify:
    def test_stringify_delegates(self):
        sel = builder.id("x")
        assert builder.stringify(sel) == sel.stringify() == "#x"

    def test_stringify_compound(self):
        sel = builder.combine(builder.id("a"), ">", builder.class_("b"))
        assert builder.stringify(sel) == "#a > .b"
