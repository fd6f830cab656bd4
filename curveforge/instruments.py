"""Market instruments that fix one discount factor of a curve each."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from typing import ClassVar

__all__ = ["CurveInstrument", "OISDeposit", "FRA", "Futures", "IRSwap"]

DiscountFunction = Callable[[float], float]

_EPS = 1e-14


class CurveInstrument(abc.ABC):
    """An instrument whose quote determines the discount factor at its maturity."""

    type: ClassVar[str]

    @property
    @abc.abstractmethod
    def maturity(self) -> float:
        """Final maturity in years."""

    @abc.abstractmethod
    def solve_discount(self, discount: DiscountFunction) -> float:
        """Discount factor at maturity, given discount factors at earlier times."""


class OISDeposit(CurveInstrument):
    """Simple-interest deposit from today to ``maturity``."""

    type = "OIS"

    def __init__(self, maturity: float, rate: float):
        if maturity <= 0.0:
            raise ValueError("OISDeposit maturity <=0")
        self._maturity = maturity
        self.rate = rate

    @property
    def maturity(self) -> float:
        return self._maturity

    def solve_discount(self, discount: DiscountFunction) -> float:
        return 1.0 / (1.0 + self.rate * self._maturity)


class _ForwardPeriod(CurveInstrument):
    """A simple-interest rate fixed for the period ``[t1, t2]``."""

    def __init__(self, t1: float, t2: float, rate: float):
        if not (t2 > t1 and t1 >= 0.0):
            raise ValueError(f"{self._label} invalid times")
        self.t1 = t1
        self.t2 = t2
        self._rate = rate

    _label: ClassVar[str]

    @property
    def maturity(self) -> float:
        return self.t2

    def solve_discount(self, discount: DiscountFunction) -> float:
        return discount(self.t1) / (1.0 + self._rate * (self.t2 - self.t1))


class FRA(_ForwardPeriod):
    """Forward rate agreement over ``[t1, t2]`` at rate ``fwd``."""

    type = "FRA"
    _label = "FRA"

    def __init__(self, t1: float, t2: float, fwd: float):
        super().__init__(t1, t2, fwd)

    @property
    def fwd(self) -> float:
        return self._rate

    def solve_discount(self, discount: DiscountFunction) -> float:
        return super().solve_discount(discount)


class Futures(_ForwardPeriod):
    """Interest-rate future over ``[t1, t2]`` with its implied rate."""

    type = "FUT"
    _label = "Futures"

    def __init__(self, t1: float, t2: float, implied: float):
        super().__init__(t1, t2, implied)

    @property
    def implied(self) -> float:
        return self._rate

    def solve_discount(self, discount: DiscountFunction) -> float:
        return super().solve_discount(discount)


class IRSwap(CurveInstrument):
    """Par fixed-for-floating swap used to bootstrap a single discount curve."""

    type = "SWAP"

    def __init__(self, pay_times: Iterable[float], fixed_rate: float):
        times = tuple(pay_times)
        if not times:
            raise ValueError("IRSwap needs payments")
        if any(later <= earlier for earlier, later in zip(times, times[1:])):
            raise ValueError("IRSwap times not ascending")
        self._pay_times = times
        self.fixed_rate = fixed_rate

    @property
    def maturity(self) -> float:
        return self._pay_times[-1]

    @property
    def payment_times(self) -> tuple[float, ...]:
        return self._pay_times

    def solve_discount(self, discount: DiscountFunction) -> float:
        """Solve ``k * sum(alpha_i * D(t_i)) = 1 - D(T_n)`` for ``D(T_n)``."""
        rate = self.fixed_rate
        if len(self._pay_times) == 1:
            maturity = self._pay_times[0]
            if not maturity > 0.0:
                raise ValueError("Invalid single payment maturity")
            denom = 1.0 + rate * maturity
            if denom <= _EPS:
                raise RuntimeError("Denominator non-positive in single-period swap")
            return 1.0 / denom

        known = 0.0
        prev = 0.0
        for t in self._pay_times[:-1]:
            if not t > prev:
                raise RuntimeError("Non-increasing payment time encountered")
            df = discount(t)
            if not df > 0.0:
                raise RuntimeError("Non-positive discount factor returned for earlier payment")
            known += (t - prev) * df
            prev = t

        final = self._pay_times[-1]
        if not final > prev:
            raise RuntimeError("Final maturity not greater than previous payment")
        denom = 1.0 + rate * (final - prev)
        if denom <= _EPS:
            raise RuntimeError("Denominator non-positive solving final discount factor")
        df = (1.0 - rate * known) / denom
        if not df > 0.0:
            raise RuntimeError("Solved non-positive DF for IRSwap")
        if df > 1.0 + 1e-10:
            raise RuntimeError("Solved discount factor > 1 (inconsistent inputs)")
        return df