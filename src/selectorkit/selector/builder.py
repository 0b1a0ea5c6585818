"""Fluent CSS selector builder and its stateless facade.

Example::

    >>> b = css_selector_builder
    >>> b.combine(
    ...     b.element("div").id("main"),
    ...     "~",
    ...     b.element("table").id("data"),
    ... ).stringify()
    'div#main ~ table#data'
"""

from __future__ import annotations

import logging
from typing import Callable

from selectorkit.errors import DuplicateExclusiveError, OutOfOrderError
from selectorkit.selector.model import Category, Fragment, SelectorState

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """A single selector chain.

    Every appending method mutates the chain and returns it, so calls can be
    chained. ``stringify`` renders the chain and leaves it empty.
    ``class_`` is also reachable as ``getattr(chain, "class")``.
    """

    def __init__(self) -> None:
        self.state = SelectorState()

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._append(Category.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._append(Category.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, name)

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        state = self.state
        if category.exclusive and category in state.seen:
            logger.debug("Rejected duplicate %s %r", category.value, value)
            raise DuplicateExclusiveError(category)
        if state.max_rank > category.rank:
            logger.debug(
                "Rejected %s %r after rank %d", category.value, value, state.max_rank
            )
            raise OutOfOrderError(category, state.max_rank)
        state.push(Fragment.of(category, value))
        return self

    # --- composition ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Append *left*'s parts, ``" <combinator> "``, then *right*'s parts.

        The combinator is not validated and the operands are left untouched.
        Rank and uniqueness tracking of this chain are not consulted.
        """
        self.state.extend(left.state.parts)
        self.state.extend([f" {combinator} "])
        self.state.extend(right.state.parts)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector and reset the chain to empty."""
        rendered = self.state.render()
        self.state.reset()
        logger.debug("Rendered selector %r", rendered)
        return rendered

    def __str__(self) -> str:
        return self.state.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.state.render()!r})"

    def __getattr__(self, name: str) -> Callable[[str], SelectorBuilder]:
        # ``class`` is a keyword; getattr(obj, "class") resolves to class_.
        if name == "class":
            return self.class_
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


class CssSelectorBuilder:
    """Stateless entry points; each call starts a fresh ``SelectorBuilder``."""

    def element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().element(name)

    def id(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().class_(name)

    def attr(self, spec: str) -> SelectorBuilder:
        return SelectorBuilder().attr(spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(name)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)

    def __getattr__(self, name: str) -> Callable[[str], SelectorBuilder]:
        # ``class`` is a keyword; getattr(obj, "class") resolves to class_.
        if name == "class":
            return self.class_
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


css_selector_builder = CssSelectorBuilder()
