"""Tests for operation selection and dispatch."""

import pytest

from colour_ops.errors import InvalidControlPointsError
from colour_ops.hue_map import HueReflect, PiecewiseHue, TwoPointHue
from colour_ops.operations import (
    PHOS,
    ConjugateMax,
    ConjugateMin,
    NPoint,
    Reflection,
    TwoPoint,
    build_hue_map,
    build_pixel_op,
    describe_operation,
    operation_from_selector,
)
from colour_ops.pixel_ops import ConjugatePixelOp, HuePixelOp


class TestBuildHueMap:
    """Dispatch to hue functions."""

    def test_reflection(self):
        hue_map = build_hue_map(Reflection(30.0))
        assert isinstance(hue_map, HueReflect)
        assert hue_map(50.0) == pytest.approx(10.0)

    def test_phos_preset(self):
        hue_map = build_hue_map(PHOS)
        assert isinstance(hue_map, TwoPointHue)
        assert hue_map(120.0) == 165.0
        assert hue_map(300.0) == 285.0

    def test_n_point(self):
        hue_map = build_hue_map(NPoint(((10.0, 20.0), (100.0, 150.0))))
        assert isinstance(hue_map, PiecewiseHue)
        assert hue_map(10.0) == pytest.approx(20.0)

    def test_conjugates_have_no_hue_map(self):
        assert build_hue_map(ConjugateMax()) is None
        assert build_hue_map(ConjugateMin()) is None

    def test_unknown_operation(self):
        with pytest.raises(TypeError):
            build_hue_map("reflect")  # type: ignore[arg-type]


class TestBuildPixelOp:
    """Dispatch to pixel operations."""

    def test_hue_ops(self):
        assert isinstance(build_pixel_op(Reflection(0.0)), HuePixelOp)
        assert isinstance(build_pixel_op(PHOS), HuePixelOp)
        assert isinstance(build_pixel_op(NPoint()), HuePixelOp)

    def test_greater_conjugate_swaps_two_larger(self):
        op = build_pixel_op(ConjugateMax())
        assert isinstance(op, ConjugatePixelOp)
        assert op((10, 100, 200, 255)) == (10, 200, 100, 255)

    def test_lesser_conjugate_swaps_two_smaller(self):
        op = build_pixel_op(ConjugateMin())
        assert op((10, 100, 200, 255)) == (100, 10, 200, 255)

    def test_errors_surface_at_construction(self):
        with pytest.raises(InvalidControlPointsError):
            build_pixel_op(TwoPoint((50.0, 0.0), (50.0, 90.0)))
        with pytest.raises(InvalidControlPointsError):
            build_pixel_op(NPoint(((5.0, 0.0), (5.0, 1.0))))

    def test_unknown_operation(self):
        with pytest.raises(TypeError):
            build_pixel_op("conj-max")  # type: ignore[arg-type]


class TestOperationFromSelector:
    """Menu selector -> Operation."""

    def test_reflection(self):
        assert operation_from_selector(1, angle=42.0) == Reflection(42.0)

    def test_reflection_needs_angle(self):
        with pytest.raises(ValueError):
            operation_from_selector(1)

    def test_phos(self):
        assert operation_from_selector(2) == PHOS
        assert PHOS == TwoPoint((120.0, 165.0), (300.0, 285.0))

    def test_two_point(self):
        op = operation_from_selector(3, points=[(1, 2), (3, 4)])
        assert op == TwoPoint((1.0, 2.0), (3.0, 4.0))

    def test_two_point_needs_two(self):
        with pytest.raises(ValueError, match="exactly 2"):
            operation_from_selector(3, points=[(1.0, 2.0)])

    def test_n_point(self):
        op = operation_from_selector(4, points=[(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)])
        assert op == NPoint(((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)))
        assert operation_from_selector(4) == NPoint(())

    def test_conjugates(self):
        assert operation_from_selector(-1) == ConjugateMax()
        assert operation_from_selector(-2) == ConjugateMin()

    @pytest.mark.parametrize("selector", [0, 5, -3, 99])
    def test_unknown_selector(self, selector):
        with pytest.raises(ValueError, match="unknown operation selector"):
            operation_from_selector(selector)


class TestDescribeOperation:
    """Log descriptions."""

    def test_descriptions(self):
        assert "reflection" in describe_operation(Reflection(10.0))
        assert "Phos" in describe_operation(PHOS)
        assert "two point" in describe_operation(TwoPoint((1.0, 2.0), (3.0, 4.0)))
        assert "identity" in describe_operation(NPoint())
        assert "greater" in describe_operation(ConjugateMax())
        assert "lesser" in describe_operation(ConjugateMin())
