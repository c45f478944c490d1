# SPDX-License-Identifier: MIT
"""Primitive facts: equality, membership, brute force, lambdas and logic."""

from .brute import BruteFact, brute, brute_labeled
from .equality import EqFact, eq, ne
from .lambdas import LambdaFact, consecutive_int, stateful, stateless
from .logic import AlwaysFact, MappedFact, NeverFact, OrFact, always, mapped, never, not_, or_
from .membership import InSliceFact, in_iter, in_slice

__all__ = [
    "AlwaysFact",
    "BruteFact",
    "EqFact",
    "InSliceFact",
    "LambdaFact",
    "MappedFact",
    "NeverFact",
    "OrFact",
    "always",
    "brute",
    "brute_labeled",
    "consecutive_int",
    "eq",
    "in_iter",
    "in_slice",
    "mapped",
    "ne",
    "never",
    "not_",
    "or_",
    "stateful",
    "stateless",
]
