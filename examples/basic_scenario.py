# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_scenario.py

Demonstrates the editing loop for a what-if license budget:
  1. Start a session on the built-in catalog (Balanced preset).
  2. Add, update and remove assignments; each edit re-evaluates in full.
  3. See a rejected edit leave the scenario untouched.
  4. Print the dashboard figures at the end.

Run with:  python examples/basic_scenario.py
(with license-budget installed)
"""

import logging

from license_budget import InvalidAssignmentError, ScenarioSession, build_report

logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(name)s: %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

session = ScenarioSession()
print(f"Starting from '{session.scenario.name}': ${session.summary.total_cost:,.0f}")

# ─── Edits ────────────────────────────────────────────────────────────────────

session.add_assignment("claude-code-pro", "ux", 4)
session.update_assignment(0, user_count=30)
session.remove_assignment(2)

try:
    session.add_assignment("cursor-team", "pm", 12)
except InvalidAssignmentError as error:
    print(f"Rejected: {'; '.join(error.errors)}")

# ─── Dashboard figures ────────────────────────────────────────────────────────

summary = session.summary
report = build_report(session.scenario, summary, session.catalog)

print("\n── Budget summary ────────────────────────────────────")
print(f"  Total cost  : ${report.total_cost:,.2f}")
print(f"  Budget      : ${report.total_budget:,.2f}")
print(f"  Remaining   : ${report.remaining_budget:,.2f}")
print(f"  Utilization : {report.budget_utilization:.1f}%")
print(f"  Seats       : {report.total_users}  (${report.average_cost_per_user:.2f}/seat)")
print(f"  Experimental: {summary.experimental_tools_used} tools, {summary.experimental_users_count} seats")
print("──────────────────────────────────────────────────────")

for row in report.team_breakdown:
    print(f"  {row.name:<12} ${row.cost:>8,.2f}  {row.seats:>3} seats  {row.utilization_percent:5.1f}%")

if summary.warnings:
    print(f"\n{len(summary.warnings)} warning(s):")
    for warning in summary.warnings:
        print(f"  - {warning}")
