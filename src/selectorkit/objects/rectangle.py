from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width by height rectangle."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
