"""Pydantic models for gearbox search files and screening options."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .models.gearbox import Gearbox, Stage
from .models.records import StageRecord


class ScreeningOptions(BaseModel):
    """Which advisory checks reject a candidate before ranking."""

    require_good_pinion_placement: bool = Field(
        default=True, description="Reject gearboxes whose first stage cannot mount on a motor"
    )
    reject_bad_pinion_placement: bool = Field(
        default=True, description="Reject gearboxes with motor-bore parts mid-chain"
    )
    max_stages: Optional[int] = Field(default=None, ge=1, description="Largest allowed stage count")


class SearchSpec(BaseModel):
    """A target reduction plus the candidate gearboxes to rank against it."""

    target_reduction: float = Field(gt=0, allow_inf_nan=False, description="Desired overall reduction ratio")
    screening: ScreeningOptions = Field(default_factory=ScreeningOptions)
    gearboxes: list[list[StageRecord]] = Field(min_length=1, description="Candidate gearboxes")

    @field_validator("gearboxes")
    @classmethod
    def validate_candidates(cls, value: list[list[StageRecord]]) -> list[list[StageRecord]]:
        for index, stages in enumerate(value):
            if not stages:
                raise ValueError(f"gearbox {index} has no stages")
            for stage_index, stage in enumerate(stages):
                if not stage.driving_methods or not stage.driven_methods:
                    raise ValueError(
                        f"gearbox {index} stage {stage_index} needs driving and driven candidates"
                    )
        return value

    def build_gearboxes(self) -> list[Gearbox]:
        """Create fresh Gearbox objects (safe to filter) from the records."""
        return [
            Gearbox([Stage.from_record(record) for record in stages])
            for stages in self.gearboxes
        ]


def load_search_spec(path: Union[str, Path]) -> SearchSpec:
    """Read and validate a YAML search file."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return SearchSpec.model_validate(data)
