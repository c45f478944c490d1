# SPDX-License-Identifier: MIT
"""factlens: composable constraints for checking and generating structured data.

A *fact* declares invariants over a data type once, and the same declaration
is used both to verify a value and to build or repair one from a buffer of
pseudo-random bytes.

Public API
----------
- :class:`Fact` / :func:`facts` - the abstraction and ordered composites
- :func:`eq`, :func:`ne`, :func:`in_slice`, :func:`brute` - primitives
- :func:`lens`, :func:`prism`, :func:`optical` - structural lifts
- :class:`Generator`, :func:`random_generator` - entropy source
- :func:`build_seq`, :func:`check_seq` - stateful sequences

Example
-------
>>> from factlens import eq, facts, in_slice, random_generator
>>> fact = facts(in_slice([1, 2, 3]), eq(2))
>>> fact.build(random_generator(seed=0), int)
2
>>> fact.check(5).result()
['in_slice: expected 5 to be contained in [1, 2, 3]', 'eq: expected 5 == 2']
"""

from __future__ import annotations

from .arbitrary import draw, register_arbitrary, unregister_arbitrary
from .check import Check
from .config import FactSettings, get_settings, load_settings, reset_settings
from .errors import (
    BruteForceExceeded,
    CheckError,
    EmptyCandidates,
    Exhausted,
    FactError,
    FactSettingsError,
    MutationError,
    UnsatisfiableError,
)
from .fact import Fact, Facts, build_seq, check_seq, facts
from .primitives import (
    always,
    brute,
    brute_labeled,
    consecutive_int,
    eq,
    in_iter,
    in_slice,
    mapped,
    ne,
    never,
    not_,
    or_,
    stateful,
    stateless,
)
from .generator import Generator, noise, random_generator
from .optics import attr_lens, each, item_lens, lens, optical, optional_prism, prism, variant_prism

__version__ = "0.1.0"

__all__ = [
    # Core
    "Check",
    "Fact",
    "Facts",
    "Generator",
    "build_seq",
    "check_seq",
    "facts",
    "noise",
    "random_generator",
    # Arbitrary values
    "draw",
    "register_arbitrary",
    "unregister_arbitrary",
    # Primitives
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
    # Structural lifts
    "attr_lens",
    "each",
    "item_lens",
    "lens",
    "optical",
    "optional_prism",
    "prism",
    "variant_prism",
    # Settings
    "FactSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
    # Errors
    "BruteForceExceeded",
    "CheckError",
    "EmptyCandidates",
    "Exhausted",
    "FactError",
    "FactSettingsError",
    "MutationError",
    "UnsatisfiableError",
]
