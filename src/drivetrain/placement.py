"""Heuristics for where motor-bore parts (pinions) sit in a gearbox."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .models.parts import MotionMethod

if TYPE_CHECKING:
    from .models.gearbox import Stage


def _has_motor_bore(methods: Sequence[MotionMethod]) -> bool:
    return any(m.uses_motor_bore for m in methods)


def _has_non_motor_bore(methods: Sequence[MotionMethod]) -> bool:
    return any(not m.uses_motor_bore for m in methods)


def has_good_pinion_placement(stages: Sequence["Stage"]) -> bool:
    """Return True if the first stage can be driven straight off a motor shaft."""
    if not stages:
        return False
    return _has_motor_bore(stages[0].driving_methods)


def has_bad_pinion_placement(stages: Sequence["Stage"]) -> bool:
    """Return True if a motor-bore part ends up where a shaft-bore part belongs.

    A single-stage gearbox is bad when its output side offers nothing but
    motor-bore parts. With more stages, every stage after the first must
    offer at least one non-motor-bore part on both sides; the first stage
    that does not makes the gearbox bad.
    """
    if len(stages) == 1:
        return not _has_non_motor_bore(stages[0].driven_methods)

    for stage in stages[1:]:
        if not _has_non_motor_bore(stage.driving_methods) or not _has_non_motor_bore(
            stage.driven_methods
        ):
            return True

    return False
