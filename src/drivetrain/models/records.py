"""Plain-data records used to serialize gearboxes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .parts import MotionMethod


class StageRecord(BaseModel):
    """Serialized form of one stage."""

    model_config = ConfigDict(populate_by_name=True)

    driving: int = Field(description="Driving tooth count")
    driven: int = Field(description="Driven tooth count")
    driving_methods: list[MotionMethod] = Field(alias="drivingMethods")
    driven_methods: list[MotionMethod] = Field(alias="drivenMethods")

    def to_obj(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


STAGE_RECORDS = TypeAdapter(list[StageRecord])
