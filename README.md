# curveforge

Tools for rates calibration and fixed-income analysis.

| Module | What it provides |
| --- | --- |
| `curveforge.calendars` | `CalendarBase` and holiday calendars for ten exchanges (`CalendarNYSE`, `CalendarLSE`, `CalendarTSE`, `CalendarHKEX`, `CalendarSSE`, `CalendarEuronext`, `CalendarASX`, `CalendarTSX`, `CalendarNSE`, `CalendarBSE`) with `holidays`, `is_holiday`, `next_business_day`, `prev_business_day` and `day_in_between` |
| `curveforge.calendar_factory` | `FinancialCalendar` enum, `create_calendar` and `name` (the exchange's full name) |
| `curveforge.daycount` | `DayCountConvention` enum, `create_daycount_convention`, and the rules `Act360`, `Act365F`, `ActAct`, `Thirty360`, `Thirty365`, `ThirtyAct`, each callable and with `year_fraction` and `months_fraction` |
| `curveforge.bspline` | `BSpline` curves on [0, 1] with `evaluate`, `find_span`, `basis_function`, exact `interpolate` and penalised `smooth_interpolate`; `clamped_knots` |
| `curveforge.instruments` | Curve instruments `OISDeposit`, `FRA`, `Futures` and `IRSwap`, each solving the discount factor at its maturity |
| `curveforge.yield_curve` | `YieldCurve` of `CurveNode`s, log-linear interpolation of discount factors, no extrapolation |
| `curveforge.bootstrapper` | `CurveBootstrapper`, which solves instruments in maturity order into a `YieldCurve` |
| `curveforge.engine` | `par_rate_example`, a toy discounted cash flow over annuity ratio |
| `curveforge.bond` | `Bond`: price from yield, yield from price (Newton-Raphson), accrued interest, Macaulay and modified duration, convexity |
| `curveforge.carry_roll` | `calculate_carry`, `calculate_roll`, `calculate_carry_roll` and `CarryRollMetrics` |
| `curveforge.bond_future` | `BondFuture` (futures price, implied repo and forward rates, cheapest to deliver, net basis) and `calculate_conversion_factor` |
| `curveforge.inss` | `INSSBond`, a bond whose coupons are taxed, with `calculate_inss_metrics` and `INSSMetrics` |
| `curveforge.awaitable` | `async_call`, which runs a blocking function on a worker thread and awaits its result |
| `curveforge.examples` | Printed walk-throughs of the bond analytics and the `main` behind the `curveforge-bond-examples` command |

## Installation

```
pip install .
```

Python 3.10 or later; NumPy is the only dependency.

## Quick start

```python
from curveforge.bond import Bond
from curveforge.carry_roll import calculate_carry_roll

bond = Bond(100.0, 0.05, 10.0, 2)        # 5% semi-annual, 10 years
price = bond.price_from_yield(0.04)      # premium price
yld = bond.yield_from_price(price)       # back to ~0.04
metrics = calculate_carry_roll(bond, 0.05, 0.05, 0.5)
print(metrics.carry, metrics.roll, metrics.total_return)
```

Bootstrapping a discount curve:

```python
from curveforge.bootstrapper import CurveBootstrapper
from curveforge.instruments import OISDeposit, FRA, IRSwap

curve = (
    CurveBootstrapper()
    .add(OISDeposit(0.5, 0.03))
    .add(FRA(0.5, 1.0, 0.032))
    .add(IRSwap([1.0, 2.0], 0.033))
    .build()
)
print(curve.discount(1.5))
```

Discount factors between nodes are interpolated linearly in their logarithm;
asking for a time before 0 or after the last node raises `ValueError`.

Holiday calendars and day counts:

```python
import datetime as dt
from curveforge.calendar_factory import FinancialCalendar, create_calendar
from curveforge.daycount import DayCountConvention, create_daycount_convention

nyse = create_calendar(FinancialCalendar.NYSE)
nyse.is_holiday(dt.date(2023, 7, 4))     # True
act360 = create_daycount_convention(DayCountConvention.ACT_360)
act360.year_fraction(dt.date(2024, 1, 1), dt.date(2024, 7, 1))
```

B-spline interpolation:

```python
from curveforge.bspline import BSpline

points = [(x / 8, (x / 8) ** 2) for x in range(9)]
spline = BSpline.interpolate(points, 3, "uniform")
spline.evaluate(0.5)                     # array close to [0.5, 0.25]
smooth = BSpline.smooth_interpolate(points, 3, 0.5, "uniform")
```

Running a blocking function from a coroutine:

```python
import asyncio
from curveforge.awaitable import async_call

async def demo():
    return await async_call(lambda a, b: a + b, 20, 22)

asyncio.run(demo())                      # 42
```

## Worked examples

A walk-through of bond pricing, duration and convexity, carry and roll, bond
futures and INSS bonds is printed by:

```
curveforge-bond-examples
```

## Limitations

- Holiday rules are simplified. Easter is taken as the first Sunday of April,
  holidays on moving weekdays are placed on the first such weekday of their
  month, and lunar and religious holidays are fixed placeholder dates. The
  calendars are not suitable for production settlement schedules.
- Stepping to the next or previous business day gives up with `RuntimeError`
  after more than ten consecutive non-business days.
- There is no command for calibrating curves from market data files, and no
  storage of curves or quotes; curves are built in memory through the Python API.

## Running the tests

```
pip install .[test]
pytest
```