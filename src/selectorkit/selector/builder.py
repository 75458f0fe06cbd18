"""Stateless builder facade for CSS selectors.

Each category function starts a fresh :class:`SimpleSelector`; further parts
are added by chaining methods on the returned value::

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.combine(builder.element("table"), "~", builder.element("tr")),
    ).stringify()
    # 'div#main + table ~ tr'
"""

from __future__ import annotations

import logging

from selectorkit.selector.model import CombinedSelector, Selector, SimpleSelector

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

logger = logging.getLogger(__name__)


def element(value: str) -> SimpleSelector:
    """Start a selector with a type (element) part."""
    return SimpleSelector().element(value)


def id(value: str) -> SimpleSelector:  # noqa: A001
    """Start a selector with an ``#id`` part."""
    return SimpleSelector().id(value)


def class_(value: str) -> SimpleSelector:
    """Start a selector with a ``.class`` part."""
    return SimpleSelector().class_(value)


def attr(value: str) -> SimpleSelector:
    """Start a selector with an ``[attribute]`` part."""
    return SimpleSelector().attr(value)


def pseudo_class(value: str) -> SimpleSelector:
    """Start a selector with a ``:pseudo-class`` part."""
    return SimpleSelector().pseudo_class(value)


def pseudo_element(value: str) -> SimpleSelector:
    """Start a selector with a ``::pseudo-element`` part."""
    return SimpleSelector().pseudo_element(value)


def combine(left: Selector, combinator: str, right: Selector) -> CombinedSelector:
    """Join *left* and *right* with *combinator* (``" "``, ``">"``, ``"+"``, ``"~"``).

    The combinator is passed through as given; it is not validated.
    """
    logger.debug("Combining selectors with %r", combinator)
    return CombinedSelector(left=left, combinator=combinator, right=right)
