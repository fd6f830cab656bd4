"""Sequential bootstrapping of a discount curve from instruments."""

from __future__ import annotations

from curveforge.instruments import CurveInstrument
from curveforge.yield_curve import YieldCurve

__all__ = ["CurveBootstrapper"]


class CurveBootstrapper:
    """Collects instruments and solves their discount factors in maturity order."""

    def __init__(self) -> None:
        self._instruments: list[CurveInstrument] = []

    def add(self, instrument: CurveInstrument) -> CurveBootstrapper:
        """Queue an instrument; returns the bootstrapper for chaining."""
        self._instruments.append(instrument)
        return self

    def build(self) -> YieldCurve:
        """Curve with one node per instrument, each solved from those before it."""
        curve = YieldCurve()
        for instrument in sorted(self._instruments, key=lambda inst: inst.maturity):
            curve.add(instrument.maturity, instrument.solve_discount(curve.discount))
        return curve