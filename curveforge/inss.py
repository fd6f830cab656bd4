"""INSS bonds: fixed-coupon bonds whose coupons are taxed."""

from __future__ import annotations

import math
from dataclasses import dataclass

from curveforge.bond import Bond

__all__ = ["INSSBond", "INSSMetrics", "calculate_inss_metrics"]

_TIME_TOLERANCE = 1e-10
_MAX_ITERATIONS = 100
_PRICE_TOLERANCE = 1e-8
_MIN_DERIVATIVE = 1e-14


class INSSBond:
    """A bond whose coupons, but not principal, are taxed at ``tax_rate``."""

    def __init__(
        self,
        face_value: float,
        coupon_rate: float,
        maturity: float,
        payment_frequency: int,
        tax_rate: float,
        is_floating_rate: bool = False,
    ):
        self._underlying = Bond(face_value, coupon_rate, maturity, payment_frequency)
        if tax_rate < 0.0 or tax_rate > 1.0:
            raise ValueError("Tax rate must be between 0 and 1")
        self._tax_rate = tax_rate
        self._is_floating_rate = is_floating_rate

    @property
    def underlying_bond(self) -> Bond:
        return self._underlying

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    @property
    def is_floating_rate(self) -> bool:
        return self._is_floating_rate

    def _coupon_flows(self):
        """Pairs of payment time and coupon amount, principal excluded."""
        bond = self._underlying
        for t, amount in bond.cash_flows:
            if abs(t - bond.maturity) < _TIME_TOLERANCE:
                amount -= bond.face_value
            yield t, amount

    def _after_tax_flows(self) -> list[tuple[float, float]]:
        bond = self._underlying
        flows = []
        for t, coupon in self._coupon_flows():
            amount = self.after_tax_coupon(coupon)
            if abs(t - bond.maturity) < _TIME_TOLERANCE:
                amount += bond.face_value
            flows.append((t, amount))
        return flows

    def price_from_yield(self, yld: float) -> float:
        """Present value of after-tax coupons and the full principal."""
        return sum(
            cf * self._underlying.discount_factor(yld, t) for t, cf in self._after_tax_flows()
        )

    def yield_from_price(self, price: float, initial_guess: float | None = None) -> float:
        """After-tax yield that reprices the bond to ``price``, by Newton-Raphson."""
        if price <= 0.0:
            raise ValueError("Price must be positive")
        bond = self._underlying
        y = bond.coupon_rate if initial_guess is None or initial_guess < 0.0 else initial_guess
        frequency = bond.compounding_frequency
        flows = self._after_tax_flows()

        for _ in range(_MAX_ITERATIONS):
            base = 1.0 + y / frequency
            p = 0.0
            dp_dy = 0.0
            for t, cf in flows:
                n = frequency * t
                p += cf * math.pow(base, -n)
                dp_dy -= cf * t * math.pow(base, -n - 1)

            f = p - price
            if abs(f) < _PRICE_TOLERANCE:
                return y
            if abs(dp_dy) < _MIN_DERIVATIVE:
                raise RuntimeError("Derivative too small in Newton-Raphson")
            y -= f / dp_dy
            if y < -0.5 or y > 2.0:
                raise RuntimeError("Yield iteration diverged")

        raise RuntimeError("Yield calculation did not converge")

    def after_tax_coupon(self, coupon_payment: float) -> float:
        """Coupon left after tax."""
        return coupon_payment * (1.0 - self._tax_rate)

    def effective_yield(self, gross_yield: float) -> float:
        """Gross yield scaled down by the tax rate."""
        return gross_yield * (1.0 - self._tax_rate)

    def tax_pv(self, yld: float) -> float:
        """Present value of the tax paid on all coupons."""
        return sum(
            coupon * self._tax_rate * self._underlying.discount_factor(yld, t)
            for t, coupon in self._coupon_flows()
        )


@dataclass(frozen=True)
class INSSMetrics:
    """Yields, tax value and risk measures of an INSS bond."""

    gross_yield: float
    net_yield: float
    tax_pv: float
    duration: float
    convexity: float


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def calculate_inss_metrics(bond: INSSBond, price: float) -> INSSMetrics:
    """Metrics at the net yield implied by ``price``."""
    net_yield = bond.yield_from_price(price)
    underlying = bond.underlying_bond
    return INSSMetrics(
        gross_yield=_divide(net_yield, 1.0 - bond.tax_rate),
        net_yield=net_yield,
        tax_pv=bond.tax_pv(net_yield),
        duration=underlying.duration(net_yield),
        convexity=underlying.convexity(net_yield),
    )