"""Selector model: SimpleSelector and CombinedSelector dataclasses.

A ``SimpleSelector`` accumulates the parts of one compound selector::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              can occur several times

Every builder call returns a new frozen instance, so a previously captured
selector never changes when a chain built on top of it grows.
``CombinedSelector`` joins two selectors with a combinator and may nest to
any depth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum

from selectorkit.errors import OrderingViolation, UniquenessViolation

logger = logging.getLogger(__name__)


class Category(IntEnum):
    """Kind of a selector part; the value is its position in CSS order."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def single(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _SINGLE_CATEGORIES

    def decorate(self, value: str) -> str:
        """Return *value* wrapped in this category's CSS syntax."""
        return _DECORATIONS[self].format(value)


_SINGLE_CATEGORIES = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_DECORATIONS: dict[Category, str] = {
    Category.ELEMENT: "{}",
    Category.ID: "#{}",
    Category.CLASS: ".{}",
    Category.ATTRIBUTE: "[{}]",
    Category.PSEUDO_CLASS: ":{}",
    Category.PSEUDO_ELEMENT: "::{}",
}

# SimpleSelector field holding each category's stored text.
_FIELDS: dict[Category, str] = {
    Category.ELEMENT: "element_part",
    Category.ID: "id_part",
    Category.CLASS: "class_parts",
    Category.ATTRIBUTE: "attribute_parts",
    Category.PSEUDO_CLASS: "pseudo_class_parts",
    Category.PSEUDO_ELEMENT: "pseudo_element_part",
}


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT = "+"
    SIBLING = "~"


@dataclass(frozen=True)
class SimpleSelector:
    """One non-combined selector built from typed parts.

    Single-occurrence parts are stored as decorated text (empty when unset);
    repeatable parts are tuples of decorated tokens in call order.
    ``last_rank`` is the rank of the most recent part, 0 when empty.
    """

    element_part: str = ""
    id_part: str = ""
    class_parts: tuple[str, ...] = ()
    attribute_parts: tuple[str, ...] = ()
    pseudo_class_parts: tuple[str, ...] = ()
    pseudo_element_part: str = ""
    last_rank: int = 0

    # --- builder operations ---------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self._extend(Category.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._extend(Category.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._extend(Category.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self._extend(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._extend(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._extend(Category.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the canonical CSS text for this selector."""
        return (
            self.element_part
            + self.id_part
            + "".join(self.class_parts)
            + "".join(self.attribute_parts)
            + "".join(self.pseudo_class_parts)
            + self.pseudo_element_part
        )

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _check(self, category: Category) -> None:
        """Raise if *category* cannot be appended to this selector."""
        if category < self.last_rank:
            logger.debug(
                "Rejected %s after rank %d in %s",
                category.name, self.last_rank, self,
            )
            raise OrderingViolation(category=category, last_rank=self.last_rank)
        if category.single and getattr(self, _FIELDS[category]):
            logger.debug("Rejected repeated %s in %s", category.name, self)
            raise UniquenessViolation(category=category)

    def _extend(self, category: Category, value: str) -> SimpleSelector:
        """Return a copy with *value* stored under *category*."""
        self._check(category)
        name = _FIELDS[category]
        token = category.decorate(value)
        if not category.single:
            token = getattr(self, name) + (token,)
        return replace(self, **{name: token, "last_rank": int(category)})


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator symbol.

    The symbol is rendered with one space on each side, so the descendant
    combinator ``" "`` produces a run of three spaces.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


Selector = SimpleSelector | CombinedSelector
