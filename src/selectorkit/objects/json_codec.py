"""JSON helpers: serialise plain values and rebuild typed objects from JSON."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import CodecConfig
from selectorkit.errors import DeserializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and plain objects."""
    if isinstance(value, type):
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, config: CodecConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Dataclass instances are encoded as their field mapping and other objects
    as their instance attributes, so ``to_json(Rectangle(10, 20))`` gives
    ``'{"width": 10, "height": 20}'``.
    """
    cfg = config or CodecConfig()
    return json.dumps(
        value,
        default=_encode_default,
        indent=cfg.indent,
        sort_keys=cfg.sort_keys,
        ensure_ascii=cfg.ensure_ascii,
    )


def from_json(proto: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *proto*.

    The instance is created without calling ``proto.__init__``; the parsed
    JSON object becomes its attribute dict as-is, with no validation.
    ``json.JSONDecodeError`` propagates for malformed text.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Cannot attach {proto.__name__} to a JSON {type(data).__name__}; "
            "expected a JSON object"
        )

    obj = proto.__new__(proto)
    try:
        attrs = vars(obj)
    except TypeError as exc:
        raise DeserializationError(
            f"{proto.__name__} instances have no attribute dict", cause=exc
        ) from exc
    attrs.update(data)
    logger.debug("Loaded %s with keys %s", proto.__name__, sorted(data))
    return obj
