"""Gearbox stage compatibility filtering, validation and ranking."""

from .models import (
    Bore,
    Vendor,
    ChainType,
    PulleyBeltType,
    MOTOR_BORES,
    Gear,
    Pulley,
    Sprocket,
    MotionMethod,
    Stage,
    Gearbox,
)
from .ranking import compare, rank_gearboxes, select_best
from .config import ScreeningOptions, SearchSpec, load_search_spec
from .screening import ScreeningResult, screen_gearbox, screen_and_rank

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
    "Stage",
    "Gearbox",
    "compare",
    "rank_gearboxes",
    "select_best",
    "ScreeningOptions",
    "SearchSpec",
    "load_search_spec",
    "ScreeningResult",
    "screen_gearbox",
    "screen_and_rank",
]
