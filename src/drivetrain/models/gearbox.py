"""Reduction stages and the gearboxes built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import prod
from typing import Any, Iterable

from .parts import MotionMethod
from .records import STAGE_RECORDS, StageRecord
from .. import filtering, placement, ranking

# Size fallbacks for a gearbox with no stages. The large max and small min keep
# a degenerate gearbox from winning the size tie-breaks in compare().
EMPTY_GEARBOX_MAX_TEETH = 1000
EMPTY_GEARBOX_MIN_TEETH = 0


@dataclass
class Stage:
    """One reduction step and its candidate parts on each side."""

    driving: int
    driven: int
    driving_methods: list[MotionMethod] = field(default_factory=list)
    driven_methods: list[MotionMethod] = field(default_factory=list)

    def ratio(self) -> float:
        return self.driven / max(1, self.driving)

    def max_teeth(self) -> int:
        return max(self.driving, self.driven)

    def min_teeth(self) -> int:
        return min(self.driving, self.driven)

    def clone(self) -> "Stage":
        """Copy with independent candidate lists (parts are shared)."""
        return Stage(
            driving=self.driving,
            driven=self.driven,
            driving_methods=list(self.driving_methods),
            driven_methods=list(self.driven_methods),
        )

    def to_record(self) -> StageRecord:
        return StageRecord(
            driving=self.driving,
            driven=self.driven,
            driving_methods=list(self.driving_methods),
            driven_methods=list(self.driven_methods),
        )

    @classmethod
    def from_record(cls, record: StageRecord) -> "Stage":
        return cls(
            driving=record.driving,
            driven=record.driven,
            driving_methods=list(record.driving_methods),
            driven_methods=list(record.driven_methods),
        )


@dataclass
class Gearbox:
    """Ordered stages, stage 0 nearest the motor."""

    stages: list[Stage] = field(default_factory=list)

    def add_stage(self, stage: Stage) -> None:
        self.stages.append(stage)

    def ratio(self) -> float:
        return prod((stage.ratio() for stage in self.stages), start=1.0)

    def stage_count(self) -> int:
        return len(self.stages)

    def max_teeth(self) -> int:
        return max((s.max_teeth() for s in self.stages), default=EMPTY_GEARBOX_MAX_TEETH)

    def min_teeth(self) -> int:
        return min((s.min_teeth() for s in self.stages), default=EMPTY_GEARBOX_MIN_TEETH)

    def has_good_pinion_placement(self) -> bool:
        return placement.has_good_pinion_placement(self.stages)

    def has_bad_pinion_placement(self) -> bool:
        return placement.has_bad_pinion_placement(self.stages)

    def filter_overlapping_motion_methods(self) -> None:
        """Keep only type-equivalent driving/driven pairs in every stage.

        Each stage's candidate lists are replaced with new lists; parts that
        are shared with other stages or gearboxes are not touched.
        """
        self._adopt(filtering.filter_overlapping_motion_methods(self.stages))

    def filter_overlapping_bores(self) -> None:
        """Keep only parts whose bores line up across adjacent stages.

        Adjacent pairs are processed left to right.
        """
        self._adopt(filtering.filter_overlapping_bores(self.stages))

    def has_motion_modes(self) -> bool:
        """Return True if every stage still has parts on both sides."""
        return all(s.driving_methods and s.driven_methods for s in self.stages)

    def compare(self, other: "Gearbox", target_reduction: float) -> float:
        return ranking.compare(self, other, target_reduction)

    def clone(self) -> "Gearbox":
        return Gearbox([stage.clone() for stage in self.stages])

    def to_obj(self) -> list[dict[str, Any]]:
        """Serialize to plain records (driving, driven, drivingMethods, drivenMethods)."""
        return [stage.to_record().to_obj() for stage in self.stages]

    @classmethod
    def from_obj(cls, obj: Iterable[Any]) -> "Gearbox":
        records = STAGE_RECORDS.validate_python(list(obj))
        return cls([Stage.from_record(record) for record in records])

    def _adopt(self, filtered: list[Stage]) -> None:
        # Rebind lists on the existing Stage objects so callers holding them see the result
        for stage, result in zip(self.stages, filtered):
            stage.driving_methods = result.driving_methods
            stage.driven_methods = result.driven_methods
