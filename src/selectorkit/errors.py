"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Category


DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for selector building rule violations."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.category = category


class DuplicateExclusiveError(SelectorError):
    """An element, id or pseudo-element was appended twice to one chain."""

    def __init__(self, category: Category, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message, category=category)


class OutOfOrderError(SelectorError):
    """A fragment was appended after a higher-ranked fragment."""

    def __init__(
        self,
        category: Category,
        current_rank: int,
        message: str = ORDER_MESSAGE,
    ) -> None:
        super().__init__(message, category=category)
        self.current_rank = current_rank


class ShapeError(TypeError):
    """Parsed data could not be given the requested shape."""

    def __init__(self, message: str, *, shape: type | None = None) -> None:
        super().__init__(message)
        self.shape = shape
