from selectorkit.selector.builder import (
    CssSelectorBuilder,
    SelectorBuilder,
    css_selector_builder,
)
from selectorkit.selector.model import Category, Fragment, SelectorState

__all__ = [
    "Category",
    "Fragment",
    "SelectorState",
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
]
