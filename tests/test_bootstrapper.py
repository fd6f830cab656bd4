import pytest

from curveforge.bootstrapper import CurveBootstrapper
from curveforge.instruments import FRA, IRSwap, OISDeposit


def test_add_returns_self_for_chaining():
    bootstrapper = CurveBootstrapper()
    assert bootstrapper.add(OISDeposit(1.0, 0.05)) is bootstrapper


def test_empty_build_gives_only_origin():
    curve = CurveBootstrapper().build()
    assert [(n.t, n.df) for n in curve.nodes] == [(0.0, 1.0)]


def test_deposit_node_matches_instrument():
    deposit = OISDeposit(1.0, 0.05)
    curve = CurveBootstrapper().add(deposit).build()
    assert curve.discount(1.0) == pytest.approx(1.0 / (1.0 + 0.05 * 1.0))


def test_fra_chains_from_earlier_node():
    curve = CurveBootstrapper().add(FRA(1.0, 2.0, 0.04)).add(OISDeposit(1.0, 0.05)).build()
    assert curve.discount(2.0) == pytest.approx(curve.discount(1.0) / (1.0 + 0.04 * 1.0))


def test_order_of_addition_does_not_matter():
    instruments = [OISDeposit(0.5, 0.03), FRA(0.5, 1.0, 0.035), IRSwap([1.0, 2.0], 0.04)]
    forward = CurveBootstrapper()
    backward = CurveBootstrapper()
    for inst in instruments:
        forward.add(inst)
    for inst in reversed(instruments):
        backward.add(inst)
    assert forward.build().nodes == backward.build().nodes


def test_swap_reprices_at_par():
    rate = 0.04
    curve = (
        CurveBootstrapper()
        .add(OISDeposit(1.0, 0.035))
        .add(IRSwap([1.0, 2.0], rate))
        .build()
    )
    d1 = curve.discount(1.0)
    d2 = curve.discount(2.0)
    assert rate * (1.0 * d1 + 1.0 * d2) == pytest.approx(1.0 - d2)


def test_duplicate_maturities_raise():
    bootstrapper = CurveBootstrapper().add(OISDeposit(1.0, 0.05)).add(OISDeposit(1.0, 0.06))
    with pytest.raises(ValueError, match="Duplicate"):
        bootstrapper.build()