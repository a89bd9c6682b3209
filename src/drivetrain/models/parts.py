"""Pydantic models for catalog motion methods (gears, pulleys, sprockets)."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Bore(str, Enum):
    """Mounting shaft sizes found in the parts catalog."""

    NEO = "NEO"
    FALCON = "Falcon"
    KRAKEN = "Kraken"
    CIM = "CIM"
    MM_8 = "8mm"
    BORE_550 = "550"
    BORE_775 = "775"
    HEX_3_8 = '3/8" Hex'
    HEX_1_2 = '1/2" Hex'
    ROUNDED_HEX_1_2 = '1/2" Rounded Hex'
    HEX_7_8 = '7/8" Hex'
    ROUND_1_2 = '1/2" Round'
    MAX_SPLINE = "MAXSpline"
    SPLINE_XS = "SplineXS"


class Vendor(str, Enum):
    """Catalog sources."""

    WCP = "WCP"
    REV = "REV"
    VEXPRO = "VEXpro"
    ANDYMARK = "AndyMark"
    THRIFTYBOT = "The Thrifty Bot"
    CTRE = "CTRE"
    SWYFT = "Swyft"


class ChainType(str, Enum):
    """Roller chain pitch designations."""

    CHAIN_25 = "#25"
    CHAIN_35 = "#35"


class PulleyBeltType(str, Enum):
    """Timing belt tooth profiles."""

    GT2_3MM = "GT2 3mm"
    HTD_5MM = "HTD 5mm"
    RT25 = "RT25"


# Bores that mount directly on a motor output shaft.
MOTOR_BORES: frozenset[Bore] = frozenset(
    {
        Bore.NEO,
        Bore.FALCON,
        Bore.KRAKEN,
        Bore.CIM,
        Bore.MM_8,
        Bore.BORE_550,
        Bore.BORE_775,
    }
)


class _MotionMethodBase(BaseModel):
    """Fields shared by every motion method kind."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    teeth: int = Field(gt=0, description="Tooth (or groove) count")
    bore: Bore = Field(description="Mounting shaft size")
    vendor: Vendor = Field(description="Catalog source")
    url: str = Field(default="", description="Product page")
    part_number: str = Field(alias="partNumber", description="Vendor part number")

    @property
    @abstractmethod
    def type_label(self) -> str:
        """Kind-specific meshing discriminator (pitch, belt or chain type)."""

    @property
    def meshing_key(self) -> tuple[str, str]:
        """Compatibility key: two parts mesh iff their keys are equal."""
        return (self.type, self.type_label)

    @property
    def uses_motor_bore(self) -> bool:
        return self.bore in MOTOR_BORES


class Gear(_MotionMethodBase):
    """Spur gear, meshes with gears of the same diametral pitch."""

    type: Literal["Gear"] = "Gear"
    dp: float = Field(gt=0, description="Diametral pitch")

    @property
    def type_label(self) -> str:
        dp = int(self.dp) if float(self.dp).is_integer() else self.dp
        return f"{dp} DP"


class Pulley(_MotionMethodBase):
    """Timing belt pulley, pairs with pulleys of the same belt profile."""

    type: Literal["Pulley"] = "Pulley"
    belt_type: PulleyBeltType = Field(alias="beltType")
    pitch: Optional[float] = Field(default=None, gt=0, description="Belt pitch in mm")

    @property
    def type_label(self) -> str:
        return self.belt_type.value


class Sprocket(_MotionMethodBase):
    """Chain sprocket, pairs with sprockets of the same chain type."""

    type: Literal["Sprocket"] = "Sprocket"
    chain_type: ChainType = Field(alias="chainType")

    @property
    def type_label(self) -> str:
        return self.chain_type.value


MotionMethod = Annotated[Union[Gear, Pulley, Sprocket], Field(discriminator="type")]


def is_type_equivalent(a: MotionMethod, b: MotionMethod) -> bool:
    """Return True if two parts can transfer motion within one stage."""
    return a.meshing_key == b.meshing_key
