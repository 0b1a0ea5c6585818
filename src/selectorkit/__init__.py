"""selectorkit: CSS selector builder, rectangle factory, and JSON helpers."""

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import (
    DuplicateExclusiveError,
    OutOfOrderError,
    SelectorError,
    ShapeError,
)
from selectorkit.rectangle import Rectangle, build_rectangle
from selectorkit.selector import (
    Category,
    CssSelectorBuilder,
    Fragment,
    SelectorBuilder,
    SelectorState,
    css_selector_builder,
)
from selectorkit.serialization import deserialize, serialize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "Category",
    "Fragment",
    "SelectorState",
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicateExclusiveError",
    "OutOfOrderError",
    "ShapeError",
    # rectangle
    "Rectangle",
    "build_rectangle",
    # serialization
    "serialize",
    "deserialize",
    # config
    "SelectorkitConfig",
]
