"""Fixed-coupon bonds: price, yield, accrued interest, duration and convexity."""

from __future__ import annotations

import math

__all__ = ["Bond"]

_TIME_TOLERANCE = 1e-10
_MAX_ITERATIONS = 100
_PRICE_TOLERANCE = 1e-8
_MIN_DERIVATIVE = 1e-14


class Bond:
    """A bullet bond paying ``payment_frequency`` equal coupons a year."""

    def __init__(
        self,
        face_value: float,
        coupon_rate: float,
        maturity: float,
        payment_frequency: int = 2,
    ):
        if face_value <= 0.0:
            raise ValueError("Face value must be positive")
        if maturity <= 0.0:
            raise ValueError("Maturity must be positive")
        if payment_frequency <= 0:
            raise ValueError("Payment frequency must be positive")
        if coupon_rate < 0.0:
            raise ValueError("Coupon rate cannot be negative")

        self._face_value = face_value
        self._coupon_rate = coupon_rate
        self._maturity = maturity

        period = 1.0 / payment_frequency
        coupon = face_value * coupon_rate / payment_frequency
        times: list[float] = []
        amounts: list[float] = []
        t = period
        while t <= maturity + _TIME_TOLERANCE:
            times.append(min(t, maturity))
            amounts.append(coupon)
            t += period

        if times and abs(times[-1] - maturity) < _TIME_TOLERANCE:
            amounts[-1] += face_value
        else:
            times.append(maturity)
            amounts.append(face_value)

        self._coupon_times = tuple(times)
        self._coupon_amounts = tuple(amounts)

    @property
    def face_value(self) -> float:
        return self._face_value

    @property
    def coupon_rate(self) -> float:
        return self._coupon_rate

    @property
    def maturity(self) -> float:
        return self._maturity

    @property
    def coupon_times(self) -> tuple[float, ...]:
        """Payment times in years."""
        return self._coupon_times

    @property
    def coupon_amounts(self) -> tuple[float, ...]:
        """Payment amounts; the last one includes the principal."""
        return self._coupon_amounts

    @property
    def cash_flows(self) -> list[tuple[float, float]]:
        """Pairs of payment time and amount."""
        return list(zip(self._coupon_times, self._coupon_amounts))

    @property
    def compounding_frequency(self) -> int:
        """Compounding periods a year, inferred from the first payment time."""
        return math.floor(1.0 / self._coupon_times[0] + 0.5)

    def discount_factor(self, yld: float, t: float) -> float:
        """``(1 + y/f) ** (-f t)`` at the bond's compounding frequency."""
        frequency = self.compounding_frequency
        return math.pow(1.0 + yld / frequency, -frequency * t)

    def price_from_yield(self, yld: float) -> float:
        """Present value of all cash flows at yield ``yld``."""
        return sum(cf * self.discount_factor(yld, t) for t, cf in self.cash_flows)

    def yield_from_price(self, price: float, initial_guess: float | None = None) -> float:
        """Yield that reprices the bond to ``price``, by Newton-Raphson.

        Without a non-negative ``initial_guess`` the coupon rate is the start.
        """
        if price <= 0.0:
            raise ValueError("Price must be positive")
        y = self._coupon_rate if initial_guess is None or initial_guess < 0.0 else initial_guess
        frequency = self.compounding_frequency

        for _ in range(_MAX_ITERATIONS):
            base = 1.0 + y / frequency
            p = 0.0
            dp_dy = 0.0
            for t, cf in self.cash_flows:
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

    def accrued_interest(self, t: float) -> float:
        """Coupon accrued linearly since the previous payment, at time ``t``."""
        if t < 0.0 or t > self._maturity:
            raise ValueError("Time must be between 0 and maturity")

        times = self._coupon_times
        amounts = self._coupon_amounts
        idx = next((i for i, paid in enumerate(times) if paid > t), len(times))

        if idx == 0:
            return amounts[0] * (t / times[0])
        if idx == len(times):
            return 0.0

        prev_time = times[idx - 1]
        period = times[idx] - prev_time
        coupon = amounts[idx]
        if abs(times[idx] - self._maturity) < _TIME_TOLERANCE:
            coupon -= self._face_value
        return coupon * ((t - prev_time) / period)

    def duration(self, yld: float) -> float:
        """Macaulay duration in years."""
        price = self.price_from_yield(yld)
        if price < 1e-10:
            raise RuntimeError("Price too small for duration calculation")
        weighted = sum(t * cf * self.discount_factor(yld, t) for t, cf in self.cash_flows)
        return weighted / price

    def modified_duration(self, yld: float) -> float:
        """Macaulay duration divided by ``1 + y/f``."""
        return self.duration(yld) / (1.0 + yld / self.compounding_frequency)

    def convexity(self, yld: float) -> float:
        """Convexity under discrete compounding."""
        price = self.price_from_yield(yld)
        if price < 1e-10:
            raise RuntimeError("Price too small for convexity calculation")
        weighted = sum(t * t * cf * self.discount_factor(yld, t) for t, cf in self.cash_flows)
        return weighted / (price * math.pow(1.0 + yld / self.compounding_frequency, 2))