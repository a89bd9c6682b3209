"""Tests for stage and gearbox math, validity checks and serialization."""

import pytest

from drivetrain.models.gearbox import (
    EMPTY_GEARBOX_MAX_TEETH,
    EMPTY_GEARBOX_MIN_TEETH,
    Gearbox,
    Stage,
)
from drivetrain.models.parts import Bore, ChainType, Gear, Sprocket, Vendor


def gear(teeth, bore=Bore.HEX_1_2, dp=20, part_number=None):
    return Gear(
        teeth=teeth,
        dp=dp,
        bore=bore,
        vendor=Vendor.REV,
        url="https://www.revrobotics.com/",
        part_number=part_number or f"G{teeth}-{dp}",
    )


def sprocket(teeth, bore=Bore.HEX_1_2, chain_type=ChainType.CHAIN_25):
    return Sprocket(
        teeth=teeth,
        chain_type=chain_type,
        bore=bore,
        vendor=Vendor.WCP,
        url="https://wcproducts.com/",
        part_number=f"S{teeth}",
    )


def two_stage_gearbox():
    return Gearbox(
        [
            Stage(12, 36, [gear(12, Bore.NEO)], [gear(36)]),
            Stage(14, 60, [sprocket(14)], [sprocket(60)]),
        ]
    )


class TestStage:
    """Tests for single stage ratio and size."""

    def test_ratio(self):
        assert Stage(12, 36).ratio() == pytest.approx(3.0)

    def test_overdrive_ratio(self):
        assert Stage(36, 12).ratio() == pytest.approx(1 / 3)

    def test_zero_driving_treated_as_one(self):
        assert Stage(0, 36).ratio() == 36

    def test_negative_driving_treated_as_one(self):
        assert Stage(-5, 36).ratio() == 36

    def test_max_and_min_teeth(self):
        stage = Stage(14, 60)
        assert stage.max_teeth() == 60
        assert stage.min_teeth() == 14

        reversed_stage = Stage(60, 14)
        assert reversed_stage.max_teeth() == 60
        assert reversed_stage.min_teeth() == 14

    def test_clone_has_independent_lists(self):
        pinion = gear(12, Bore.NEO)
        stage = Stage(12, 36, [pinion], [gear(36)])
        copy = stage.clone()

        copy.driving_methods.clear()
        assert stage.driving_methods == [pinion]
        assert stage.clone().driving_methods[0] is pinion


class TestGearboxMath:
    """Tests for aggregate ratio and size queries."""

    def test_ratio_is_product_of_stages(self):
        gearbox = two_stage_gearbox()
        assert gearbox.ratio() == pytest.approx((36 / 12) * (60 / 14))
        assert gearbox.ratio() == pytest.approx(12.857, abs=1e-3)

    def test_empty_ratio_is_one(self):
        assert Gearbox().ratio() == 1.0

    def test_add_stage_appends(self):
        gearbox = Gearbox()
        first = Stage(12, 36)
        second = Stage(14, 60)
        gearbox.add_stage(first)
        gearbox.add_stage(second)
        assert gearbox.stages == [first, second]
        assert gearbox.stage_count() == 2

    def test_size_queries(self):
        gearbox = two_stage_gearbox()
        assert gearbox.max_teeth() == 60
        assert gearbox.min_teeth() == 12

    def test_empty_size_sentinels(self):
        gearbox = Gearbox()
        assert gearbox.max_teeth() == EMPTY_GEARBOX_MAX_TEETH == 1000
        assert gearbox.min_teeth() == EMPTY_GEARBOX_MIN_TEETH == 0


class TestMotionModes:
    """Tests for the overall feasibility verdict."""

    def test_all_stages_populated(self):
        assert two_stage_gearbox().has_motion_modes()

    def test_empty_driving_side(self):
        gearbox = two_stage_gearbox()
        gearbox.stages[1].driving_methods = []
        assert not gearbox.has_motion_modes()

    def test_empty_driven_side(self):
        gearbox = two_stage_gearbox()
        gearbox.stages[0].driven_methods = []
        assert not gearbox.has_motion_modes()


class TestFilteringThroughGearbox:
    """Tests for the gearbox filter methods rebinding stage lists."""

    def test_filters_keep_compatible_scenario(self):
        gearbox = two_stage_gearbox()
        gearbox.filter_overlapping_motion_methods()
        gearbox.filter_overlapping_bores()

        assert gearbox.stages[0].driven_methods
        assert gearbox.stages[1].driving_methods
        assert gearbox.has_motion_modes()

    def test_filter_updates_existing_stage_objects(self):
        gearbox = Gearbox([Stage(12, 60, [gear(12, Bore.NEO)], [gear(60, dp=32)])])
        stage = gearbox.stages[0]
        gearbox.filter_overlapping_motion_methods()

        assert gearbox.stages[0] is stage
        assert stage.driving_methods == []
        assert stage.driven_methods == []
        assert not gearbox.has_motion_modes()

    def test_filter_does_not_touch_clone_source(self):
        original = Gearbox([Stage(12, 60, [gear(12, Bore.NEO)], [gear(60, dp=32)])])
        copy = original.clone()
        copy.filter_overlapping_motion_methods()

        assert not copy.has_motion_modes()
        assert original.has_motion_modes()

    def test_bore_mismatch_empties_pair(self):
        gearbox = Gearbox(
            [
                Stage(12, 36, [gear(12, Bore.NEO)], [gear(36, Bore.HEX_3_8)]),
                Stage(14, 60, [sprocket(14, Bore.HEX_1_2)], [sprocket(60)]),
            ]
        )
        gearbox.filter_overlapping_bores()

        assert gearbox.stages[0].driven_methods == []
        assert gearbox.stages[1].driving_methods == []
        assert not gearbox.has_motion_modes()


class TestPinionPlacementThroughGearbox:
    """Tests for the placement checks on the worked example."""

    def test_scenario_placement(self):
        gearbox = two_stage_gearbox()
        assert gearbox.has_good_pinion_placement()
        assert not gearbox.has_bad_pinion_placement()


class TestSerialization:
    """Tests for the plain-record round trip."""

    def test_record_shape(self):
        records = two_stage_gearbox().to_obj()
        assert len(records) == 2
        assert set(records[0]) == {"driving", "driven", "drivingMethods", "drivenMethods"}
        assert records[0]["driving"] == 12
        assert records[0]["driven"] == 36

        part = records[0]["drivingMethods"][0]
        assert part["type"] == "Gear"
        assert part["bore"] == "NEO"
        assert part["partNumber"] == "G12-20"
        assert records[1]["drivenMethods"][0]["chainType"] == "#25"

    def test_round_trip(self):
        gearbox = two_stage_gearbox()
        restored = Gearbox.from_obj(gearbox.to_obj())

        assert restored.stages == gearbox.stages
        assert restored.ratio() == gearbox.ratio()
        assert isinstance(restored.stages[1].driving_methods[0], Sprocket)

    def test_round_trip_after_filtering(self):
        gearbox = Gearbox([Stage(12, 60, [gear(12, Bore.NEO)], [gear(60, dp=32)])])
        gearbox.filter_overlapping_motion_methods()
        restored = Gearbox.from_obj(gearbox.to_obj())

        assert restored == gearbox
        assert not restored.has_motion_modes()

    def test_invalid_record_rejected(self):
        with pytest.raises(ValueError):
            Gearbox.from_obj([{"driving": 12, "driven": 36, "drivingMethods": []}])
