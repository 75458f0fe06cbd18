"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Category


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector chain was built in a way CSS does not allow."""

    def __init__(self, message: str, *, category: Category, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.category = category


class OrderingViolation(SelectorError):
    """A selector part was appended after a part that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, *, category: Category, last_rank: int) -> None:
        super().__init__(self.MESSAGE, category=category)
        self.last_rank = last_rank


class UniquenessViolation(SelectorError):
    """Element, id or pseudo-element was set twice on the same chain."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, *, category: Category) -> None:
        super().__init__(self.MESSAGE, category=category)


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class DeserializationError(SelectorKitError):
    """Parsed JSON could not be attached to the requested class."""
