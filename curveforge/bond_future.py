"""Bond futures: pricing, implied rates, cheapest-to-deliver and conversion factors."""

from __future__ import annotations

import math
from collections.abc import Sequence

from curveforge.bond import Bond

__all__ = ["BondFuture", "calculate_conversion_factor"]


class BondFuture:
    """A futures contract on a basket of deliverable bonds."""

    def __init__(
        self,
        futures_maturity: float,
        deliverable_bonds: Sequence[Bond],
        conversion_factors: Sequence[float],
    ):
        bonds = tuple(deliverable_bonds)
        factors = tuple(conversion_factors)
        if futures_maturity <= 0.0:
            raise ValueError("Futures maturity must be positive")
        if not bonds:
            raise ValueError("Must have at least one deliverable bond")
        if len(bonds) != len(factors):
            raise ValueError("Number of bonds and conversion factors must match")
        if any(cf <= 0.0 for cf in factors):
            raise ValueError("Conversion factors must be positive")
        self._futures_maturity = futures_maturity
        self._deliverable_bonds = bonds
        self._conversion_factors = factors

    @property
    def futures_maturity(self) -> float:
        """Time to expiry in years."""
        return self._futures_maturity

    @property
    def deliverable_bonds(self) -> tuple[Bond, ...]:
        return self._deliverable_bonds

    @property
    def conversion_factors(self) -> tuple[float, ...]:
        return self._conversion_factors

    def _check_prices(self, bond_prices: Sequence[float]) -> None:
        if len(bond_prices) != len(self._deliverable_bonds):
            raise ValueError("Number of prices must match number of deliverable bonds")

    def _conversion_factor(self, bond_index: int) -> float:
        if not 0 <= bond_index < len(self._deliverable_bonds):
            raise IndexError("Bond index out of range")
        return self._conversion_factors[bond_index]

    def _carried(self, price: float, repo_rate: float) -> float:
        return price * math.exp(repo_rate * self._futures_maturity)

    def futures_price(self, bond_prices: Sequence[float], repo_rate: float) -> float:
        """Theoretical futures price from the cheapest-to-deliver bond's carry."""
        self._check_prices(bond_prices)
        ctd = self.cheapest_to_deliver(bond_prices, repo_rate)
        return self._carried(bond_prices[ctd], repo_rate) / self._conversion_factors[ctd]

    def _implied_rate(self, bond_index: int, bond_price: float, futures_price: float) -> float:
        cf = self._conversion_factor(bond_index)
        if bond_price <= 0.0 or futures_price <= 0.0:
            raise ValueError("Prices must be positive")
        forward_price = futures_price * cf
        return math.log(forward_price / bond_price) / self._futures_maturity

    def implied_repo_rate(self, bond_index: int, bond_price: float, futures_price: float) -> float:
        """Continuously compounded repo rate that carries the bond to the invoice price."""
        return self._implied_rate(bond_index, bond_price, futures_price)

    def implied_forward_rate(
        self, bond_index: int, bond_price: float, futures_price: float
    ) -> float:
        """``ln(futures * CF / spot) / T``, annualised and continuously compounded."""
        return self._implied_rate(bond_index, bond_price, futures_price)

    def cheapest_to_deliver(self, bond_prices: Sequence[float], repo_rate: float) -> int:
        """Index of the bond with the lowest carried price per conversion factor."""
        self._check_prices(bond_prices)
        return min(
            range(len(self._deliverable_bonds)),
            key=lambda i: self._carried(bond_prices[i], repo_rate) / self._conversion_factors[i],
        )

    def net_basis(
        self,
        bond_index: int,
        bond_price: float,
        futures_price: float,
        accrued_interest: float,
    ) -> float:
        """Bond price less futures price times conversion factor, less accrued interest."""
        cf = self._conversion_factor(bond_index)
        return bond_price - futures_price * cf - accrued_interest


def calculate_conversion_factor(bond: Bond, notional_coupon: float) -> float:
    """Price per unit face at the notional coupon yield, rounded to four decimals."""
    if notional_coupon <= 0.0:
        raise ValueError("Notional coupon must be positive")
    cf = bond.price_from_yield(notional_coupon) / bond.face_value
    scaled = cf * 10000.0
    rounded = math.floor(scaled + 0.5) if scaled >= 0 else -math.floor(-scaled + 0.5)
    return rounded / 10000.0