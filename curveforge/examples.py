"""Worked examples of bond pricing, carry and roll, futures and INSS bonds."""

from __future__ import annotations

import sys
from typing import TextIO

from curveforge.bond import Bond
from curveforge.bond_future import BondFuture, calculate_conversion_factor
from curveforge.carry_roll import CarryRollMetrics, calculate_carry_roll
from curveforge.inss import INSSBond, INSSMetrics, calculate_inss_metrics

__all__ = [
    "basic_bond_pricing",
    "duration_convexity",
    "carry_roll_analysis",
    "bond_futures",
    "inss_bonds",
    "main",
]

_RULE = "=" * 60


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _header(title: str, out: TextIO) -> None:
    print(f"\n{_RULE}", file=out)
    print(title, file=out)
    print(_RULE, file=out)


def _float_steps(start: float, stop: float, step: float):
    """Values ``start, start+step, ...`` accumulated by repeated addition up to ``stop``."""
    value = start
    while value <= stop:
        yield value
        value += step


def basic_bond_pricing(out: TextIO | None = None) -> float:
    """Price a 10-year 5% bond at several yields; returns the yield implied by a price of 95."""
    out = _stream(out)
    _header("Example 1: Basic Bond Pricing", out)

    bond = Bond(100.0, 0.05, 10.0, 2)
    print("\nBond Characteristics:", file=out)
    print(f"  Face Value: ${bond.face_value:.4f}", file=out)
    print(f"  Coupon Rate: {bond.coupon_rate * 100:.4f}%", file=out)
    print(f"  Maturity: {bond.maturity:.4f} years", file=out)
    print("  Payments per year: 2 (semi-annual)", file=out)

    print("\nPricing at different yields:", file=out)
    for yld in _float_steps(0.03, 0.07, 0.01):
        price = bond.price_from_yield(yld)
        if price > 100:
            kind = "Premium"
        elif price < 100:
            kind = "Discount"
        else:
            kind = "Par"
        print(f"  Yield {yld * 100:.2f}%: ${price:.2f} ({kind})", file=out)

    target_price = 95.0
    implied_yield = bond.yield_from_price(target_price)
    print(
        f"\nImplied yield at ${target_price:.2f}: {implied_yield * 100:.2f}%",
        file=out,
    )
    return implied_yield


def duration_convexity(out: TextIO | None = None) -> tuple[float, float, float]:
    """Risk measures of a 5-year 6% bond; returns Macaulay and modified duration and convexity."""
    out = _stream(out)
    _header("Example 2: Duration and Convexity", out)

    bond = Bond(100.0, 0.06, 5.0, 2)
    yld = 0.06

    price = bond.price_from_yield(yld)
    duration = bond.duration(yld)
    mod_duration = bond.modified_duration(yld)
    convexity = bond.convexity(yld)

    print(f"\nBond at {yld * 100:.2f}% yield:", file=out)
    print(f"  Price: ${price:.2f}", file=out)
    print(f"  Macaulay Duration: {duration:.4f} years", file=out)
    print(f"  Modified Duration: {mod_duration:.4f}", file=out)
    print(f"  Convexity: {convexity:.4f}", file=out)

    print("\nPrice sensitivity analysis:", file=out)
    for delta_y in _float_steps(-0.01, 0.01, 0.005):
        if delta_y == 0.0:
            continue
        actual_change = bond.price_from_yield(yld + delta_y) - price
        duration_est = -mod_duration * delta_y * price
        convexity_est = duration_est + 0.5 * convexity * delta_y * delta_y * price
        print(
            f"  \u0394y = {delta_y * 100:6.2f}bp: "
            f"Actual \u0394P = ${actual_change:6.2f}, "
            f"Duration est = ${duration_est:6.2f}, "
            f"With convexity = ${convexity_est:6.2f}",
            file=out,
        )
    return duration, mod_duration, convexity


def _print_metrics(metrics: CarryRollMetrics, out: TextIO) -> None:
    print(f"  Carry: ${metrics.carry:.2f}", file=out)
    print(f"  Roll: ${metrics.roll:.2f}", file=out)
    print(f"  Total Return: ${metrics.total_return:.2f}", file=out)


def carry_roll_analysis(
    out: TextIO | None = None,
) -> tuple[CarryRollMetrics, CarryRollMetrics, CarryRollMetrics]:
    """Six-month carry and roll with the yield unchanged, falling to 4% and rising to 6%."""
    out = _stream(out)
    _header("Example 3: Carry and Roll Analysis", out)

    bond = Bond(100.0, 0.05, 10.0, 2)
    print("\n6-month horizon analysis:", file=out)

    unchanged = calculate_carry_roll(bond, 0.05, 0.05, 0.5)
    print("\nScenario 1: Yield unchanged at 5%", file=out)
    _print_metrics(unchanged, out)

    falling = calculate_carry_roll(bond, 0.05, 0.04, 0.5)
    print("\nScenario 2: Yield declines to 4%", file=out)
    _print_metrics(falling, out)
    print(
        "  Additional return from yield decline: "
        f"${falling.total_return - unchanged.total_return:.2f}",
        file=out,
    )

    rising = calculate_carry_roll(bond, 0.05, 0.06, 0.5)
    print("\nScenario 3: Yield rises to 6%", file=out)
    _print_metrics(rising, out)
    print(
        f"  Loss from yield increase: ${rising.total_return - unchanged.total_return:.2f}",
        file=out,
    )
    return unchanged, falling, rising


def bond_futures(out: TextIO | None = None) -> int:
    """Price a futures contract on three bonds; returns the cheapest-to-deliver index."""
    out = _stream(out)
    _header("Example 4: Bond Futures Pricing", out)

    deliverable_bonds = [
        Bond(100.0, 0.06, 10.0, 2),
        Bond(100.0, 0.05, 15.0, 2),
        Bond(100.0, 0.055, 12.0, 2),
    ]
    notional_coupon = 0.06

    print("\nDeliverable Bonds and Conversion Factors:", file=out)
    conversion_factors = []
    for number, bond in enumerate(deliverable_bonds, start=1):
        cf = calculate_conversion_factor(bond, notional_coupon)
        conversion_factors.append(cf)
        print(
            f"  Bond {number}: {bond.coupon_rate * 100:.4f}% coupon, "
            f"{bond.maturity:.4f}y maturity, CF = {cf:.4f}",
            file=out,
        )

    future = BondFuture(0.5, deliverable_bonds, conversion_factors)
    bond_prices = [105.0, 98.0, 101.5]
    repo_rate = 0.03

    print("\nMarket Prices:", file=out)
    for number, price in enumerate(bond_prices, start=1):
        print(f"  Bond {number}: ${price:.2f}", file=out)

    futures_price = future.futures_price(bond_prices, repo_rate)
    print(f"\nTheoretical Futures Price: ${futures_price:.2f}", file=out)
    print(f"Repo Rate: {repo_rate * 100:.2f}%", file=out)

    ctd = future.cheapest_to_deliver(bond_prices, repo_rate)
    print(f"\nCheapest to Deliver: Bond {ctd + 1}", file=out)

    print("\nImplied Repo Rates:", file=out)
    for index, price in enumerate(bond_prices):
        implied_repo = future.implied_repo_rate(index, price, futures_price)
        print(f"  Bond {index + 1}: {implied_repo * 100:.2f}%", file=out)

    print("\nImplied Forward Rates:", file=out)
    print("  (Forward rate implied by futures pricing for 6-month period)", file=out)
    for index, price in enumerate(bond_prices):
        implied_forward = future.implied_forward_rate(index, price, futures_price)
        print(f"  Bond {index + 1}: {implied_forward * 100:.2f}% p.a.", file=out)

    print(f"\nNote: For the CTD bond (Bond {ctd + 1}):", file=out)
    ctd_repo = future.implied_repo_rate(ctd, bond_prices[ctd], futures_price)
    print(f"  Implied Repo Rate = Implied Forward Rate = {ctd_repo * 100:.4f}%", file=out)
    print("  This equality holds because repo rate represents the", file=out)
    print("  cost of carry, which is the forward rate for the CTD bond.", file=out)
    return ctd


def inss_bonds(out: TextIO | None = None) -> INSSMetrics:
    """Compare a taxed INSS bond with a plain bond; returns the INSS bond's metrics."""
    out = _stream(out)
    _header("Example 5: INSS Bond Pricing (Brazilian Social Security Bonds)", out)

    inss_bond = INSSBond(100.0, 0.05, 10.0, 2, 0.15, False)
    regular_bond = Bond(100.0, 0.05, 10.0, 2)

    yld = 0.05
    inss_price = inss_bond.price_from_yield(yld)
    regular_price = regular_bond.price_from_yield(yld)

    print(f"\nComparison at {yld * 100:.2f}% yield:", file=out)
    print(f"  INSS Bond Price: ${inss_price:.2f}", file=out)
    print(f"  Regular Bond Price: ${regular_price:.2f}", file=out)
    print(
        f"  Price difference: ${regular_price - inss_price:.2f} (due to 15% tax)",
        file=out,
    )

    metrics = calculate_inss_metrics(inss_bond, inss_price)
    print("\nINSS Bond Metrics:", file=out)
    print(f"  Net (after-tax) yield: {metrics.net_yield * 100:.2f}%", file=out)
    print(f"  Gross (pre-tax) yield: {metrics.gross_yield * 100:.2f}%", file=out)
    print(f"  Present value of taxes: ${metrics.tax_pv:.2f}", file=out)
    print(f"  Duration: {metrics.duration:.4f} years", file=out)
    print(f"  Convexity: {metrics.convexity:.4f}", file=out)

    gross_coupon = 2.5
    after_tax = inss_bond.after_tax_coupon(gross_coupon)
    print("\nCoupon Calculation:", file=out)
    print(f"  Gross coupon: ${gross_coupon:.2f}", file=out)
    print(f"  Tax (15%): ${gross_coupon * inss_bond.tax_rate:.2f}", file=out)
    print(f"  After-tax coupon: ${after_tax:.2f}", file=out)
    return metrics


def main(argv: list[str] | None = None) -> int:
    """Run every example, printing to standard output; returns the exit status."""
    out = sys.stdout
    print("", file=out)
    print("\u2554" + "\u2550" * 60 + "\u2557", file=out)
    print("\u2551    Bond Pricing Module - Comprehensive Examples           \u2551", file=out)
    print("\u255a" + "\u2550" * 60 + "\u255d", file=out)

    try:
        basic_bond_pricing(out)
        duration_convexity(out)
        carry_roll_analysis(out)
        bond_futures(out)
        inss_bonds(out)
    except (ValueError, RuntimeError, IndexError, ArithmeticError) as exc:
        print(f"\nError: {exc}", file=sys.stderr)
        return 1

    _header("Examples Completed Successfully", out)
    print("\nAll examples executed without errors!", file=out)
    print("\nFor more information, see BOND_PRICING_README.md", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())