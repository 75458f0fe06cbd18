"""selectorkit: a fluent CSS selector builder and small object helpers."""
from __future__ import annotations

from selectorkit.config import CodecConfig, SelectorKitConfig
from selectorkit.errors import (
    DeserializationError,
    OrderingViolation,
    SelectorError,
    SelectorKitError,
    UniquenessViolation,
)
from selectorkit.objects import Rectangle, from_json, to_json
from selectorkit.selector import (
    Category,
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
    builder,
)

__version__ = "0.1.0"

css_selector_builder = builder

__all__ = [
    "__version__",
    # config
    "CodecConfig",
    "SelectorKitConfig",
    # errors
    "SelectorKitError",
    "SelectorError",
    "OrderingViolation",
    "UniquenessViolation",
    "DeserializationError",
    # selector
    "Category",
    "Combinator",
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "builder",
    "css_selector_builder",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
]
