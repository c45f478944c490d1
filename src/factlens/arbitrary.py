# SPDX-License-Identifier: MIT
"""Draw arbitrary instances of a kind from a generator's entropy.

A *kind* is a runtime type description: a class or a ``typing`` form.
Supported out of the box:

- ``None``, ``bool``, ``int`` (signed 32-bit), ``float`` (finite), ``str``,
  ``bytes``
- ``Enum`` subclasses and ``Literal[...]``
- ``Optional[...]`` / ``Union[...]`` / ``X | Y`` (the alternative is chosen
  first, then drawn)
- ``list[X]``, ``tuple[X, Y]``, ``tuple[X, ...]``, ``dict[K, V]``,
  ``set[X]``, ``frozenset[X]``
- dataclasses (fields drawn from their type hints)
- pydantic models (fields drawn from ``model_fields``, built with
  ``model_construct``)
- any class defining ``__arbitrary__(cls, g)`` as a classmethod
- anything registered with :func:`register_arbitrary`

Classes are resolved with :func:`typing.get_type_hints`, so dataclasses used
as kinds should be defined at module level.
"""

from __future__ import annotations

import dataclasses
import enum
import string
import types
import typing
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal, Union

from pydantic import BaseModel

from .config import get_settings

if TYPE_CHECKING:
    from .generator import Generator

Drawer = Callable[["Generator"], Any]

_ALPHABET = string.ascii_letters + string.digits + string.punctuation + " "

_REGISTRY: dict[Any, Drawer] = {}


def register_arbitrary(kind: Any, drawer: Drawer) -> None:
    """Register ``drawer`` as the way to build arbitrary values of ``kind``."""
    _REGISTRY[kind] = drawer


def unregister_arbitrary(kind: Any) -> None:
    _REGISTRY.pop(kind, None)


def _registered(kind: Any) -> Drawer | None:
    try:
        return _REGISTRY.get(kind)
    except TypeError:
        # unhashable typing form
        return None


def draw(g: Generator, kind: Any, reason: str = "") -> Any:
    """Draw an arbitrary value of ``kind`` from ``g``.

    Raises:
        TypeError: If no drawing strategy is known for ``kind``.
        MutationError: If ``g`` is a checker.
        Exhausted: If ``g`` runs out of bytes.
    """
    drawer = _registered(kind)
    if drawer is not None:
        return drawer(g)

    if kind is None or kind is type(None):
        return None

    origin = typing.get_origin(kind)
    if origin is not None:
        return _draw_generic(g, kind, origin, reason)

    if isinstance(kind, type):
        return _draw_class(g, kind, reason)

    raise TypeError(f"Don't know how to draw an arbitrary {kind!r}")


def _length(g: Generator, limit: int, reason: str) -> int:
    return g.int_in_range(0, limit, reason)


def _item_kinds(kind: Any, args: tuple[Any, ...], count: int) -> tuple[Any, ...]:
    if len(args) != count:
        raise TypeError(f"Don't know how to draw an arbitrary {kind!r}: item types must be given")
    return args


def _draw_generic(g: Generator, kind: Any, origin: Any, reason: str) -> Any:
    args = typing.get_args(kind)
    max_len = get_settings().max_collection_len

    if origin is typing.Annotated:
        return draw(g, args[0], reason)
    if origin is Literal:
        return g.choose(args, reason)
    if origin is Union or origin is types.UnionType:
        return draw(g, g.choose(args, reason), reason)
    if origin is list:
        (item,) = _item_kinds(kind, args, 1)
        return [draw(g, item, reason) for _ in range(_length(g, max_len, reason))]
    if origin is tuple:
        if not args or args == ((),):
            return ()
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(draw(g, args[0], reason) for _ in range(_length(g, max_len, reason)))
        return tuple(draw(g, arg, reason) for arg in args)
    if origin is dict:
        key_kind, value_kind = _item_kinds(kind, args, 2)
        result = {}
        for _ in range(_length(g, max_len, reason)):
            key = draw(g, key_kind, reason)
            result[key] = draw(g, value_kind, reason)
        return result
    if origin in (set, frozenset):
        (item,) = _item_kinds(kind, args, 1)
        items = [draw(g, item, reason) for _ in range(_length(g, max_len, reason))]
        return origin(items)

    raise TypeError(f"Don't know how to draw an arbitrary {kind!r}")


def _draw_class(g: Generator, kind: type, reason: str) -> Any:
    hook = getattr(kind, "__arbitrary__", None)
    if hook is not None:
        return hook(g)

    settings = get_settings()

    # Enum and bool first: IntEnum and bool are both int subclasses.
    if issubclass(kind, enum.Enum):
        return g.choose(list(kind), reason)
    if issubclass(kind, bool):
        return bool(g.bytes(1, reason)[0] & 1)
    if issubclass(kind, int):
        return kind(int.from_bytes(g.bytes(4, reason), "big", signed=True))
    if issubclass(kind, float):
        unit = int.from_bytes(g.bytes(8, reason), "big") / float(2**64)
        return kind((unit * 2.0 - 1.0) * 1e6)
    if issubclass(kind, str):
        n = _length(g, settings.max_string_len, reason)
        return kind("".join(_ALPHABET[g.int_in_range(0, len(_ALPHABET) - 1, reason)] for _ in range(n)))
    if issubclass(kind, bytes):
        n = _length(g, settings.max_string_len, reason)
        return kind(g.bytes(n, reason))
    if dataclasses.is_dataclass(kind):
        hints = typing.get_type_hints(kind)
        values = {
            f.name: draw(g, hints[f.name], reason)
            for f in dataclasses.fields(kind)
            if f.init
        }
        return kind(**values)
    if issubclass(kind, BaseModel):
        values = {name: draw(g, field.annotation, reason) for name, field in kind.model_fields.items()}
        return kind.model_construct(**values)

    raise TypeError(f"Don't know how to draw an arbitrary {kind.__name__}")
