"""Ordering of candidate gearboxes against a target reduction."""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

if TYPE_CHECKING:
    from .models.gearbox import Gearbox


def compare(a: "Gearbox", b: "Gearbox", target_reduction: float) -> float:
    """Compare two gearboxes; a negative result means ``a`` ranks better.

    Keys, in priority order (the first non-zero difference decides):
    1. distance of the overall ratio from ``target_reduction``
    2. number of stages
    3. largest tooth count
    4. smallest tooth count

    A NaN difference (e.g. an infinite target) counts as no preference.
    """
    differences = (
        abs(a.ratio() - target_reduction) - abs(b.ratio() - target_reduction),
        a.stage_count() - b.stage_count(),
        a.max_teeth() - b.max_teeth(),
        a.min_teeth() - b.min_teeth(),
    )
    for difference in differences:
        if difference != 0 and not math.isnan(difference):
            return difference
    return 0


def ranking_key(target_reduction: float) -> Callable[["Gearbox"], Any]:
    """Sort key for ``sorted``/``list.sort`` that orders best-first."""
    return cmp_to_key(lambda a, b: compare(a, b, target_reduction))


def rank_gearboxes(gearboxes: Iterable["Gearbox"], target_reduction: float) -> list["Gearbox"]:
    """Return the gearboxes sorted best-first (stable for equivalent ones)."""
    return sorted(gearboxes, key=ranking_key(target_reduction))


def select_best(gearboxes: Iterable["Gearbox"], target_reduction: float) -> Optional["Gearbox"]:
    ranked = rank_gearboxes(gearboxes, target_reduction)
    return ranked[0] if ranked else None
