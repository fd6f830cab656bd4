"""Carry and roll-down analysis of a bond over a horizon."""

from __future__ import annotations

from dataclasses import dataclass

from curveforge.bond import Bond

__all__ = ["CarryRollMetrics", "calculate_carry_roll", "calculate_carry", "calculate_roll"]

_TIME_TOLERANCE = 1e-10


@dataclass(frozen=True)
class CarryRollMetrics:
    """Coupon income, price change and their sum over a horizon."""

    carry: float
    roll: float
    total_return: float


def _check_horizon(bond: Bond, time_horizon: float) -> None:
    if time_horizon <= 0.0:
        raise ValueError("Time horizon must be positive")
    if time_horizon > bond.maturity:
        raise ValueError("Time horizon exceeds bond maturity")


def calculate_carry(bond: Bond, time_horizon: float) -> float:
    """Coupons paid up to ``time_horizon``, principal excluded."""
    if time_horizon <= 0.0:
        raise ValueError("Time horizon must be positive")
    carry = 0.0
    for t, amount in bond.cash_flows:
        if t <= time_horizon:
            if abs(t - bond.maturity) < _TIME_TOLERANCE:
                amount -= bond.face_value
            carry += amount
    return carry


def calculate_roll(
    bond: Bond, current_yield: float, forward_yield: float, time_horizon: float
) -> float:
    """Price at the horizon (at ``forward_yield``) less the price today."""
    _check_horizon(bond, time_horizon)
    current_price = bond.price_from_yield(current_yield)

    if bond.maturity - time_horizon <= _TIME_TOLERANCE:
        carry = calculate_carry(bond, time_horizon)
        total = sum(
            amount for t, amount in bond.cash_flows if t <= time_horizon + _TIME_TOLERANCE
        )
        return total - carry - current_price

    future_price = sum(
        amount * bond.discount_factor(forward_yield, t - time_horizon)
        for t, amount in bond.cash_flows
        if t > time_horizon
    )
    return future_price - current_price


def calculate_carry_roll(
    bond: Bond, current_yield: float, forward_yield: float, time_horizon: float
) -> CarryRollMetrics:
    """Carry, roll and total return over ``time_horizon`` years."""
    _check_horizon(bond, time_horizon)
    carry = calculate_carry(bond, time_horizon)
    roll = calculate_roll(bond, current_yield, forward_yield, time_horizon)
    return CarryRollMetrics(carry=carry, roll=roll, total_return=carry + roll)