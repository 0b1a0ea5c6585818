from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    compact_json: bool = True  # False switches serialize() to indent=2
    ensure_ascii: bool = False
    sort_keys: bool = False
