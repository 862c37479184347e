# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
compare_presets.py

Evaluates every preset scenario against either the built-in catalog or a
JSON catalog file and prints one line per preset.

Run with:  python examples/compare_presets.py [--catalog path/to/catalog.json]
"""

from __future__ import annotations

import argparse

from license_budget import default_catalog, evaluate_scenario, get_preset_scenarios, load_catalog


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--catalog", help="JSON catalog file (defaults to the built-in catalog)")
    args = parser.parse_args()

    catalog = load_catalog(args.catalog) if args.catalog else default_catalog()

    for scenario in get_preset_scenarios():
        summary = evaluate_scenario(scenario, catalog)
        status = "OK  " if summary.within_budget else "OVER"
        print(
            f"{status} {scenario.name:<18} ${summary.total_cost:>9,.2f}  "
            f"{summary.budget_utilization:6.1f}%  {len(summary.warnings)} warning(s)"
        )
        for warning in summary.warnings:
            print(f"       - {warning}")


if __name__ == "__main__":
    main()
