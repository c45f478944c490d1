# SPDX-License-Identifier: MIT
"""Lift a fact about an optional sub-part into a fact about the whole.

A prism is like a lens, except that the target may be absent. It is typically
used for union variants, or any structure where data may or may not be
present. If the getter returns a value the inner fact is checked and mutation
is possible; if it returns ``None`` checks pass vacuously and mutation leaves
the whole untouched.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..check import Check
from ..fact import Fact
from ..generator import Generator
from .access import Getter, Setter, get_attr, set_attr

O = TypeVar("O")
T = TypeVar("T")


class PrismFact(Fact[O], Generic[O, T]):
    def __init__(self, label: str, getter: Getter, setter: Setter, inner: Fact[T]) -> None:
        self.label = label
        self.getter = getter
        self.setter = setter
        self.inner = inner

    def check(self, obj: O) -> Check:
        part = self.getter(obj)
        if part is None:
            return Check.ok()
        return self.inner.check(part).prefixed(f"prism({self.label}) > ")

    def mutate(self, obj: O, g: Generator) -> O:
        part = self.getter(obj)
        if part is None:
            return obj
        return self.setter(obj, self.inner.mutate(part, g))

    def advance(self, obj: O) -> None:
        part = self.getter(obj)
        if part is not None:
            self.inner.advance(part)


def prism(label: str, getter: Getter, setter: Setter, inner: Fact[Any]) -> PrismFact[Any, Any]:
    return PrismFact(label, getter, setter, inner)


def variant_prism(variant: type, name: str, inner: Fact[Any], *, label: str | None = None) -> PrismFact[Any, Any]:
    """Prism onto attribute ``name``, present only when the whole is a ``variant``.

    An attribute that is itself ``None`` also counts as absent.
    """
    read = get_attr(name)

    def getter(obj: Any) -> Any:
        if isinstance(obj, variant):
            return read(obj)
        return None

    return PrismFact(label or f"{variant.__name__}::{name}", getter, set_attr(name), inner)


def optional_prism(name: str, inner: Fact[Any], *, label: str | None = None) -> PrismFact[Any, Any]:
    """Prism onto an attribute that may hold ``None``."""
    return PrismFact(label or name, get_attr(name), set_attr(name), inner)
