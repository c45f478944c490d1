# SPDX-License-Identifier: MIT
"""Structural lifts: lens (one part), prism (zero or one), optical (zero to many)."""

from .access import get_attr, get_item, rebuild_sequence, set_attr, set_item
from .lens import LensFact, attr_lens, item_lens, lens
from .optical import OpticalFact, each, optical
from .prism import PrismFact, optional_prism, prism, variant_prism

__all__ = [
    "LensFact",
    "OpticalFact",
    "PrismFact",
    "attr_lens",
    "each",
    "get_attr",
    "get_item",
    "item_lens",
    "lens",
    "optical",
    "optional_prism",
    "prism",
    "rebuild_sequence",
    "set_attr",
    "set_item",
    "variant_prism",
]
