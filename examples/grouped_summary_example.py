"""Example: Per-group summaries.

This example summarizes a continuous and a binary outcome for two groups,
calling the estimators once per group the way a grouped data pipeline would.
"""

import numpy as np
from descriptives import binom_summary, bootstrapped_summary


def main():
    """Run per-group summary examples."""

    rng = np.random.default_rng(42)
    groups = {
        "a": {"dv": rng.normal(40, 4, size=30), "outcome": rng.binomial(1, 0.7, size=20)},
        "b": {"dv": rng.normal(70, 4, size=30), "outcome": rng.binomial(1, 0.2, size=20)},
    }

    print("=" * 60)
    print("Bootstrapped mean (95% normal interval, 1000 repeats)")
    print("=" * 60)
    print(f"{'group':<6} {'statistic':>10} {'lower':>10} {'upper':>10}")
    for name, columns in groups.items():
        summary = bootstrapped_summary(columns["dv"], rng=rng)
        print(f"{name:<6} {summary.statistic:>10.3f} {summary.lower:>10.3f} {summary.upper:>10.3f}")

    print("\n" + "=" * 60)
    print("Binomial proportion (95% Agresti-Coull interval)")
    print("=" * 60)
    print(f"{'group':<6} {'successes':>9} {'trials':>6} {'mean':>8} {'lower':>8} {'upper':>8}")
    for name, columns in groups.items():
        summary = binom_summary(columns["outcome"])
        print(
            f"{name:<6} {summary.successes:>9d} {summary.trials:>6d} "
            f"{summary.statistic:>8.4f} {summary.lower:>8.4f} {summary.upper:>8.4f}"
        )


if __name__ == "__main__":
    main()
