# SPDX-License-Identifier: MIT
"""Getter/setter builders for common host types.

Getters only read; setters return an updated whole and never touch the one
they were given, so the same accessor pair is safe for checking and mutating.
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], Any]


def get_attr(name: str) -> Getter:
    def getter(obj: Any) -> Any:
        return getattr(obj, name)

    return getter


def set_attr(name: str) -> Setter:
    def setter(obj: Any, value: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.replace(obj, **{name: value})
        if isinstance(obj, BaseModel):
            return obj.model_copy(update={name: value})
        updated = copy.copy(obj)
        setattr(updated, name, value)
        return updated

    return setter


def get_item(key: Any) -> Getter:
    def getter(obj: Any) -> Any:
        return obj[key]

    return getter


def set_item(key: Any) -> Setter:
    def setter(obj: Any, value: Any) -> Any:
        if isinstance(obj, tuple):
            items = list(obj)
            items[key] = value
            return rebuild_sequence(obj, items)
        updated = copy.copy(obj)
        updated[key] = value
        return updated

    return setter


def rebuild_sequence(original: Sequence[Any], items: list[Any]) -> Any:
    """Rebuild a list, tuple or namedtuple of the same type as ``original``."""
    if isinstance(original, tuple):
        make = getattr(type(original), "_make", None)
        if make is not None:
            return make(items)
        return tuple(items)
    if isinstance(original, list):
        return list(items)
    return type(original)(items)
