"""JSON helpers: compact serialisation and shape attachment on parse."""

from __future__ import annotations

import dataclasses
import json
import logging
import types
from typing import Any

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import ShapeError

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = SelectorkitConfig()


def _encode_default(obj: Any) -> Any:
    """Encode objects the json module does not know as their own fields."""
    if callable(obj) or isinstance(obj, types.ModuleType):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, config: SelectorkitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (no whitespace) and keeps key insertion order unless
    *config* says otherwise. Dataclass instances and plain objects are
    written as their instance attributes.
    """
    cfg = config or _DEFAULT_CONFIG
    if cfg.compact_json:
        layout: dict[str, Any] = {"separators": (",", ":")}
    else:
        layout = {"indent": 2}
    return json.dumps(
        value,
        default=_encode_default,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
        **layout,
    )


def deserialize(text: str, shape: type | None = None) -> Any:
    """Parse *text* and give the result the behaviour of *shape*.

    When *shape* is given the payload must be a JSON object. The returned
    value is an instance of *shape* built without calling ``__init__``, whose
    attributes are the parsed fields, so *shape*'s methods operate on the
    parsed data. Without *shape* the plain parsed value is returned.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        ShapeError: the payload is not an object, or *shape* instances
            cannot carry arbitrary attributes.
    """
    data = json.loads(text)
    if shape is None:
        return data
    if not isinstance(data, dict):
        raise ShapeError(
            f"Cannot attach {shape.__name__} to JSON {type(data).__name__}",
            shape=shape,
        )

    try:
        instance = shape.__new__(shape)
        attrs = vars(instance)
    except TypeError as exc:
        raise ShapeError(
            f"{shape.__name__} instances cannot hold parsed fields", shape=shape
        ) from exc
    attrs.update(data)
    logger.debug("Attached %s to %d parsed field(s)", shape.__name__, len(data))
    return instance
