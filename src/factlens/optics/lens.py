# SPDX-License-Identifier: MIT
"""Lift a fact about a mandatory sub-part into a fact about the whole."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..check import Check
from ..fact import Fact
from ..generator import Generator
from .access import Getter, Setter, get_attr, get_item, set_attr, set_item

O = TypeVar("O")
T = TypeVar("T")


class LensFact(Fact[O], Generic[O, T]):
    """Applies ``inner`` to the part of the whole selected by ``getter``.

    If type ``O`` always contains a ``T``, and you have a ``Fact[T]``, this
    lifts it into a ``Fact[O]``. ``setter(whole, part)`` must return the whole
    with the part replaced.
    """

    def __init__(self, label: str, getter: Getter, setter: Setter, inner: Fact[T]) -> None:
        self.label = label
        self.getter = getter
        self.setter = setter
        self.inner = inner

    def check(self, obj: O) -> Check:
        return self.inner.check(self.getter(obj)).prefixed(f"lens({self.label}) > ")

    def mutate(self, obj: O, g: Generator) -> O:
        part = self.inner.mutate(self.getter(obj), g)
        return self.setter(obj, part)

    def advance(self, obj: O) -> None:
        self.inner.advance(self.getter(obj))


def lens(label: str, getter: Getter, setter: Setter, inner: Fact[Any]) -> LensFact[Any, Any]:
    return LensFact(label, getter, setter, inner)


def attr_lens(name: str, inner: Fact[Any], *, label: str | None = None) -> LensFact[Any, Any]:
    """Lens onto attribute ``name`` of a dataclass, pydantic model or plain object."""
    return LensFact(label or name, get_attr(name), set_attr(name), inner)


def item_lens(key: Any, inner: Fact[Any], *, label: str | None = None) -> LensFact[Any, Any]:
    """Lens onto ``whole[key]`` of a dict, list or tuple."""
    return LensFact(label or f"[{key!r}]", get_item(key), set_item(key), inner)
