"""Data models for gearbox stages and catalog parts."""

from .parts import (
    Bore,
    Vendor,
    ChainType,
    PulleyBeltType,
    MOTOR_BORES,
    Gear,
    Pulley,
    Sprocket,
    MotionMethod,
    is_type_equivalent,
)
from .records import StageRecord
from .gearbox import Stage, Gearbox, EMPTY_GEARBOX_MAX_TEETH, EMPTY_GEARBOX_MIN_TEETH

__all__ = [
    "Bore",
    "Vendor",
    "ChainType",
    "PulleyBeltType",
    "MOTOR_BORES",
    "Gear",
    "Pulley",
    "Sprocket",
    "MotionMethod",
    "is_type_equivalent",
    "StageRecord",
    "Stage",
    "Gearbox",
    "EMPTY_GEARBOX_MAX_TEETH",
    "EMPTY_GEARBOX_MIN_TEETH",
]
