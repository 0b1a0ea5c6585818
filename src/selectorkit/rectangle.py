"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair whose area is computed on demand."""

    width: float
    height: float

    def area(self) -> float:
        """Return ``width * height`` using the current field values."""
        return self.width * self.height


def build_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)
