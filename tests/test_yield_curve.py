import math

import pytest

from curveforge.yield_curve import CurveNode, YieldCurve


def test_new_curve_has_unit_node_at_zero():
    curve = YieldCurve()
    assert curve.nodes == (CurveNode(0.0, 1.0),)
    assert curve.discount(0.0) == 1.0


def test_exact_node_is_returned():
    curve = YieldCurve()
    curve.add(1.0, 0.95)
    assert curve.discount(1.0) == 0.95


def test_nodes_are_kept_sorted():
    curve = YieldCurve()
    curve.add(2.0, 0.9)
    curve.add(1.0, 0.95)
    curve.add(0.5, 0.98)
    assert [node.t for node in curve.nodes] == [0.0, 0.5, 1.0, 2.0]
    assert [node.df for node in curve.nodes] == [1.0, 0.98, 0.95, 0.9]


def test_log_linear_midpoint_is_geometric_mean():
    curve = YieldCurve()
    curve.add(1.0, 0.95)
    curve.add(3.0, 0.85)
    mid = curve.discount(2.0)
    assert mid == pytest.approx(math.sqrt(0.95 * 0.85))


def test_interpolated_values_are_monotone_between_decreasing_nodes():
    curve = YieldCurve()
    curve.add(1.0, 0.95)
    curve.add(2.0, 0.9)
    values = [curve.discount(t) for t in (0.25, 0.5, 1.0, 1.5, 2.0)]
    assert values == sorted(values, reverse=True)
    assert 0.9 < curve.discount(1.5) < 0.95


@pytest.mark.parametrize("t", [0.0, -1.0])
def test_non_positive_time_rejected(t):
    with pytest.raises(ValueError, match="Node time"):
        YieldCurve().add(t, 0.9)


def test_duplicate_node_rejected():
    curve = YieldCurve()
    curve.add(1.0, 0.95)
    with pytest.raises(ValueError, match="Duplicate"):
        curve.add(1.0 + 1e-13, 0.94)


@pytest.mark.parametrize("df", [0.0, -0.5])
def test_non_positive_discount_rejected(df):
    with pytest.raises(ValueError, match="positive"):
        YieldCurve().add(1.0, df)


@pytest.mark.parametrize("t", [-0.5, 1.5])
def test_extrapolation_rejected(t):
    curve = YieldCurve()
    curve.add(1.0, 0.95)
    with pytest.raises(ValueError, match="Extrapolation"):
        curve.discount(t)