"""Toy pricing formulae."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["par_rate_example"]


def par_rate_example(cashflows: Sequence[float], discounts: Sequence[float]) -> float:
    """Discounted cash flows divided by the annuity (sum of discount factors).

    Returns 0 when the annuity is zero.
    """
    if len(cashflows) != len(discounts):
        raise ValueError("size mismatch")
    pv = sum(cf * df for cf, df in zip(cashflows, discounts))
    annuity = sum(discounts)
    if annuity == 0.0:
        return 0.0
    return pv / annuity