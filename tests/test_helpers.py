"""Tests for animatable attribute helpers."""

import numpy as np
import pytest

from keyframe_animator.core.helpers import (
    AnimatableAttributeHelper,
    ArrayAnimationHelper,
    MappingAnimationHelper,
    NumberAnimationHelper,
    Point,
    PointAnimationHelper,
    StepAnimationHelper,
)


class TestProtocol:
    """Every helper satisfies the helper protocol."""

    @pytest.mark.parametrize("helper", [
        NumberAnimationHelper(),
        PointAnimationHelper(),
        ArrayAnimationHelper(),
        MappingAnimationHelper({}),
        StepAnimationHelper(),
    ])
    def test_runtime_checkable(self, helper):
        assert isinstance(helper, AnimatableAttributeHelper)

    def test_plain_object_is_not_a_helper(self):
        assert not isinstance(object(), AnimatableAttributeHelper)


class TestNumberHelper:

    def test_lerp(self):
        assert NumberAnimationHelper().lerp(2.0, 4.0, 0.5) == 3.0

    def test_extrapolation_is_not_clamped(self):
        helper = NumberAnimationHelper()
        assert helper.lerp(0.0, 10.0, 1.5) == 15.0
        assert helper.lerp(0.0, 10.0, -0.5) == -5.0


class TestPointHelper:

    def test_lerp(self):
        result = PointAnimationHelper().lerp(Point(0, 0), Point(10, 20), 0.25)
        assert result == Point(2.5, 5.0)

    def test_extrapolation(self):
        result = PointAnimationHelper().lerp(Point(3, 3), Point(10, 10), 2.0)
        assert result == Point(17.0, 17.0)

    def test_point_dict(self):
        assert Point.from_dict(Point(1, 2).to_dict()) == Point(1, 2)


class TestArrayHelper:

    def test_lerp_vectors(self):
        result = ArrayAnimationHelper().lerp([0, 0, 0], [1, 2, 4], 0.5)
        np.testing.assert_array_almost_equal(result, [0.5, 1.0, 2.0])

    def test_lerp_extrapolates(self):
        result = ArrayAnimationHelper().lerp(np.zeros(2), np.ones(2), 1.5)
        np.testing.assert_array_almost_equal(result, [1.5, 1.5])


class TestMappingHelper:

    def test_per_key_helpers(self):
        helper = MappingAnimationHelper({
            "position": PointAnimationHelper(),
            "opacity": NumberAnimationHelper(),
        })
        start = {"position": Point(0, 0), "opacity": 0.0, "label": "a"}
        end = {"position": Point(4, 8), "opacity": 1.0, "label": "b"}
        result = helper.lerp(start, end, 0.5)
        assert result["position"] == Point(2, 4)
        assert result["opacity"] == 0.5
        assert result["label"] == "a"  # no helper registered

    def test_key_missing_from_end_holds(self):
        helper = MappingAnimationHelper({"x": NumberAnimationHelper()})
        assert helper.lerp({"x": 1.0}, {}, 0.5) == {"x": 1.0}


class TestStepHelper:

    def test_holds_until_complete(self):
        helper = StepAnimationHelper()
        assert helper.lerp("idle", "run", 0.0) == "idle"
        assert helper.lerp("idle", "run", 0.99) == "idle"
        assert helper.lerp("idle", "run", 1.0) == "run"
        assert helper.lerp("idle", "run", -0.5) == "idle"
