"""Selector model: fragment categories, fragments, and builder state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    """Kind of a simple-selector fragment.

    Members are declared in the order they must appear inside a compound
    selector; ``rank`` is that position:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def exclusive(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _EXCLUSIVE

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[Category, int] = {category: rank for rank, category in enumerate(Category)}

_EXCLUSIVE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """A single rendered piece of a selector, e.g. ``#main`` or ``[href]``."""

    category: Category
    text: str

    @classmethod
    def of(cls, category: Category, value: str) -> Fragment:
        return cls(category=category, text=category.render(value))


@dataclass
class SelectorState:
    """Mutable bookkeeping behind a selector chain.

    Attributes:
        parts: Rendered strings in render order. Combinator pieces spliced in
            by ``combine`` live here too, carrying their own spaces.
        seen: Exclusive categories already appended.
        max_rank: Highest category rank appended so far, -1 when empty.
    """

    parts: list[str] = field(default_factory=list)
    seen: set[Category] = field(default_factory=set)
    max_rank: int = -1

    @property
    def empty(self) -> bool:
        return not self.parts and not self.seen and self.max_rank < 0

    def push(self, fragment: Fragment) -> None:
        self.parts.append(fragment.text)
        if fragment.category.exclusive:
            self.seen.add(fragment.category)
        self.max_rank = max(self.max_rank, fragment.category.rank)

    def extend(self, parts: list[str]) -> None:
        self.parts.extend(parts)

    def render(self) -> str:
        return "".join(self.parts)

    def reset(self) -> None:
        self.parts = []
        self.seen = set()
        self.max_rank = -1
