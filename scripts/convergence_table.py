"""Print how the discrete-mode price converges to the closed-form price.

This script is a manual validation harness for the time-stepped pricer: for a
sequence of step counts it prints the discrete value, its error against the
continuous-time value and the ratio of successive errors (about 2 per
doubling for a first-order scheme).

Run from the repository root:

    PYTHONPATH=src python scripts/convergence_table.py
    PYTHONPATH=src python scripts/convergence_table.py --side put --q 0.02
    PYTHONPATH=src python scripts/convergence_table.py --strategy forward_drift
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from option_greeks import (
    ContinuousPricer,
    DiscreteConfig,
    DiscretePricer,
    DiscretizationKind,
    OptionParameters,
    OptionSide,
    PricingMode,
)


@dataclass(frozen=True)
class Row:
    n_steps: int
    value: float
    diff: float


def _observed_ratio(d_prev: float, d_next: float) -> float | None:
    if d_next == 0:
        return None
    return d_prev / d_next


def _make_table(
    p: OptionParameters, steps: Sequence[int], strategy: DiscretizationKind
) -> tuple[float, list[Row]]:
    exact = ContinuousPricer().price(p).price
    rows = []
    for n in steps:
        cfg = DiscreteConfig(n_steps=n, strategy=strategy, max_steps=max(n, 10_000))
        value = DiscretePricer(config=cfg).price_only(p)
        rows.append(Row(n_steps=n, value=value, diff=value - exact))
    return exact, rows


def _print_table(title: str, exact: float, rows: Sequence[Row]) -> None:
    print("\n" + title)
    print(f"Exact (analytic): {exact:.10f}")
    print(f"{'N':>7} {'Value':>14} {'Diff':>14} {'Ratio':>8}")
    prev = None
    for r in rows:
        ratio = _observed_ratio(abs(prev.diff), abs(r.diff)) if prev else None
        ratio_s = f"{ratio:8.3f}" if ratio is not None else ""
        print(f"{r.n_steps:7d} {r.value:14.10f} {r.diff:14.3e} {ratio_s:>8}")
        prev = r


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--side", choices=[s.value for s in OptionSide], default="call")
    ap.add_argument(
        "--strategy",
        choices=[k.value for k in DiscretizationKind],
        default=DiscretizationKind.COMPOUNDING.value,
    )
    ap.add_argument("--S", type=float, default=100.0)
    ap.add_argument("--K", type=float, default=100.0)
    ap.add_argument("--T", type=float, default=1.0)
    ap.add_argument("--sigma", type=float, default=0.2)
    ap.add_argument("--r", type=float, default=0.05)
    ap.add_argument("--q", type=float, default=0.0)
    ap.add_argument("--steps", type=int, nargs="+", default=[25, 50, 100, 200, 400, 800, 1600])
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    p = OptionParameters(
        side=OptionSide(args.side),
        spot=args.S,
        strike=args.K,
        time_to_maturity=args.T,
        volatility=args.sigma,
        risk_free_rate=args.r,
        dividend_yield=args.q,
        mode=PricingMode.DISCRETE,
    )
    exact, rows = _make_table(p, args.steps, DiscretizationKind(args.strategy))
    _print_table(f"{args.side} ({args.strategy})", exact, rows)


if __name__ == "__main__":
    main()
