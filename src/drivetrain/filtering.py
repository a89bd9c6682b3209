"""Compatibility passes over a gearbox's stage candidate lists.

Both passes are pure: they take stages and return new Stage objects holding
new candidate lists. The motion method objects are shared, never copied.

* The motion-method pass works inside a single stage and keeps only driving and
  driven parts that mesh with each other (same kind and same pitch, belt
  profile or chain type).
* The bore pass works across adjacent stages and keeps only parts whose bores
  match between stage i's driven side and stage i+1's driving side.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Sequence

from .models.parts import MotionMethod, is_type_equivalent

if TYPE_CHECKING:
    from .models.gearbox import Stage

logger = logging.getLogger(__name__)


def _append_unique(target: list[MotionMethod], items: Sequence[MotionMethod]) -> None:
    # Identity check: equal-valued catalog entries from different lookups stay distinct
    for item in items:
        if not any(existing is item for existing in target):
            target.append(item)


def _match_sides(
    left: Sequence[MotionMethod],
    right: Sequence[MotionMethod],
    matches: Callable[[MotionMethod, MotionMethod], bool],
) -> tuple[list[MotionMethod], list[MotionMethod]]:
    kept_left: list[MotionMethod] = []
    kept_right: list[MotionMethod] = []
    for candidate in left:
        partners = [other for other in right if matches(candidate, other)]
        if partners:
            kept_left.append(candidate)
            _append_unique(kept_right, partners)
    return kept_left, kept_right


def overlapping_motion_methods(
    stage: "Stage",
) -> tuple[list[MotionMethod], list[MotionMethod]]:
    """Return (driving, driven) candidates of a stage that can mesh together."""
    return _match_sides(stage.driving_methods, stage.driven_methods, is_type_equivalent)


def overlapping_bores(
    prev_driven: Sequence[MotionMethod],
    next_driving: Sequence[MotionMethod],
) -> tuple[list[MotionMethod], list[MotionMethod]]:
    """Return (prev_driven, next_driving) candidates that share a shaft bore."""
    return _match_sides(prev_driven, next_driving, lambda a, b: a.bore == b.bore)


def filter_overlapping_motion_methods(stages: Sequence["Stage"]) -> list["Stage"]:
    """Apply the in-stage meshing filter to every stage independently."""
    result = []
    for index, stage in enumerate(stages):
        driving, driven = overlapping_motion_methods(stage)
        logger.debug(
            "stage %d meshing: driving %d -> %d, driven %d -> %d",
            index,
            len(stage.driving_methods),
            len(driving),
            len(stage.driven_methods),
            len(driven),
        )
        if not driving:
            logger.debug("stage %d has no meshing part pairs", index)
        result.append(replace(stage, driving_methods=driving, driven_methods=driven))
    return result


def filter_overlapping_bores(stages: Sequence["Stage"]) -> list["Stage"]:
    """Apply the bore continuity filter to each adjacent pair, left to right.

    Pair (i, i+1) narrows stage i's driven list and stage i+1's driving list,
    and stage i+1 is rewritten before pair (i+1, i+2) is visited.
    """
    result = [stage.clone() for stage in stages]
    for index in range(len(result) - 1):
        prev_stage = result[index]
        next_stage = result[index + 1]
        driven, driving = overlapping_bores(
            prev_stage.driven_methods, next_stage.driving_methods
        )
        logger.debug(
            "stages %d->%d bores: driven %d -> %d, driving %d -> %d",
            index,
            index + 1,
            len(prev_stage.driven_methods),
            len(driven),
            len(next_stage.driving_methods),
            len(driving),
        )
        if not driven:
            logger.debug("no matching bores between stages %d and %d", index, index + 1)
        prev_stage.driven_methods = driven
        next_stage.driving_methods = driving
    return result
