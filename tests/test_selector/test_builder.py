"""Tests for the stateless selector builder facade."""

import pytest

import selectorkit
from selectorkit.errors import OrderingViolation, UniquenessViolation
from selectorkit.selector import CombinedSelector, SimpleSelector
from selectorkit.selector import builder


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    @pytest.mark.parametrize(
        "name, method",
        [
            ("element", "element"),
            ("id", "id"),
            ("class_", "class_"),
            ("attr", "attr"),
            ("pseudo_class", "pseudo_class"),
            ("pseudo_element", "pseudo_element"),
        ],
    )
    def test_matches_method_on_empty_selector(self, name, method):
        from_facade = getattr(builder, name)("v")
        from_empty = getattr(SimpleSelector(), method)("v")
        assert isinstance(from_facade, SimpleSelector)
        assert from_facade == from_empty

    def test_each_call_starts_fresh(self):
        builder.element("div")
        assert builder.element("span").stringify() == "span"

    def test_package_alias(self):
        assert selectorkit.css_selector_builder is builder


# ---------------------------------------------------------------------------
# Chains started from the facade
# ---------------------------------------------------------------------------


class TestChains:
    def test_id_and_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_pseudo_element_alone(self):
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_ordering_error_from_facade_chain(self):
        with pytest.raises(OrderingViolation):
            builder.class_("x").id("y")

    def test_uniqueness_error_from_facade_chain(self):
        with pytest.raises(UniquenessViolation):
            builder.id("x").id("y")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple(self):
        combined = builder.combine(builder.element("a"), "+", builder.id("b"))
        assert isinstance(combined, CombinedSelector)
        assert combined.stringify() == "a + #b"

    def test_nested(self):
        combined = builder.combine(
            builder.combine(builder.element("a"), ">", builder.element("b")),
            "~",
            builder.element("c"),
        )
        assert combined.stringify() == "a > b ~ c"

    def test_deep_right_nesting(self):
        combined = builder.combine(
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
        assert combined.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_symbol_is_not_validated(self):
        combined = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert combined.stringify() == "a || b"

    def test_children_are_kept_by_reference(self):
        left = builder.element("a")
        right = builder.class_("b")
        combined = builder.combine(left, ">", right)
        assert combined.left is left
        assert combined.right is right

    def test_children_not_affected_by_later_chains(self):
        left = builder.element("a")
        combined = builder.combine(left, ">", builder.element("b"))
        left.class_("late")
        assert combined.stringify() == "a > b"

    def test_very_deep_tree(self):
        sel = builder.element("e0")
        for i in range(1, 200):
            sel = builder.combine(sel, ">", builder.element(f"e{i}"))
        text = sel.stringify()
        assert text.startswith("e0 > e1 > e2")
        assert text.endswith("e198 > e199")
