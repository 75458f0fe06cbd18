from selectorkit.selector import builder
from selectorkit.selector.model import (
    Category,
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
)

__all__ = [
    "builder",
    "Category",
    "Combinator",
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
]
