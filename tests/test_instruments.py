import pytest

from curveforge.instruments import FRA, IRSwap, Futures, OISDeposit


def _unused(t):
    raise AssertionError("discount should not be called")


def test_ois_deposit_round_trip():
    deposit = OISDeposit(0.5, 0.04)
    df = deposit.solve_discount(_unused)
    assert df * (1.0 + 0.04 * 0.5) == pytest.approx(1.0)
    assert deposit.maturity == 0.5
    assert deposit.type == "OIS"


def test_ois_deposit_rejects_non_positive_maturity():
    with pytest.raises(ValueError):
        OISDeposit(0.0, 0.03)
    with pytest.raises(ValueError):
        OISDeposit(-1.0, 0.03)


def test_fra_uses_discount_at_start():
    calls = []

    def discount(t):
        calls.append(t)
        return 0.98

    fra = FRA(0.5, 1.0, 0.05)
    df = fra.solve_discount(discount)
    assert calls == [0.5]
    assert 0.98 / df == pytest.approx(1.0 + 0.05 * 0.5)
    assert fra.maturity == 1.0
    assert fra.type == "FRA"


def test_futures_uses_discount_at_start():
    calls = []

    def discount(t):
        calls.append(t)
        return 0.97

    fut = Futures(0.25, 0.5, 0.03)
    df = fut.solve_discount(discount)
    assert calls == [0.25]
    assert 0.97 / df == pytest.approx(1.0 + 0.03 * 0.25)
    assert fut.maturity == 0.5
    assert fut.type == "FUT"


@pytest.mark.parametrize("cls", [FRA, Futures])
@pytest.mark.parametrize("t1,t2", [(1.0, 1.0), (1.0, 0.5), (-0.1, 1.0)])
def test_forward_period_invalid_times(cls, t1, t2):
    with pytest.raises(ValueError):
        cls(t1, t2, 0.02)


def test_swap_par_condition_holds():
    known = {1.0: 0.97, 2.0: 0.935}
    swap = IRSwap([1.0, 2.0, 3.0], 0.03)
    df = swap.solve_discount(lambda t: known[t])
    fixed_leg = 0.03 * (1.0 * 0.97 + 1.0 * 0.935 + 1.0 * df)
    assert fixed_leg == pytest.approx(1.0 - df)
    assert 0.0 < df < 1.0
    assert swap.maturity == 3.0
    assert swap.payment_times == (1.0, 2.0, 3.0)
    assert swap.type == "SWAP"


def test_swap_single_period_acts_like_deposit():
    swap = IRSwap([2.0], 0.05)
    df = swap.solve_discount(_unused)
    assert df * (1.0 + 0.05 * 2.0) == pytest.approx(1.0)


def test_swap_construction_errors():
    with pytest.raises(ValueError):
        IRSwap([], 0.03)
    with pytest.raises(ValueError):
        IRSwap([1.0, 1.0], 0.03)
    with pytest.raises(ValueError):
        IRSwap([2.0, 1.0], 0.03)


def test_swap_single_period_non_positive_maturity():
    with pytest.raises(ValueError):
        IRSwap([0.0], 0.03).solve_discount(_unused)


def test_swap_single_period_non_positive_denominator():
    with pytest.raises(RuntimeError):
        IRSwap([1.0], -1.0).solve_discount(_unused)


def test_swap_non_increasing_first_time():
    with pytest.raises(RuntimeError):
        IRSwap([-1.0, 1.0], 0.03).solve_discount(lambda t: 0.99)


def test_swap_rejects_non_positive_earlier_discount():
    with pytest.raises(RuntimeError):
        IRSwap([1.0, 2.0], 0.03).solve_discount(lambda t: 0.0)


def test_swap_rejects_non_positive_denominator():
    with pytest.raises(RuntimeError):
        IRSwap([1.0, 2.0], -1.0).solve_discount(lambda t: 0.9)


def test_swap_rejects_non_positive_solution():
    with pytest.raises(RuntimeError):
        IRSwap([1.0, 2.0], 1.0).solve_discount(lambda t: 1.0)


def test_swap_rejects_discount_above_one():
    with pytest.raises(RuntimeError):
        IRSwap([1.0, 2.0], -0.5).solve_discount(lambda t: 0.9)