# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Budget evaluator for license-budget scenarios.

Takes a scenario plus the tool catalog, team roster, and policy constraints
and derives a cost breakdown and the list of policy warnings. This module is
purely computational: it never mutates its inputs and never raises for
malformed scenario content. Assignments that reference unknown tools or
teams are skipped without a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from license_budget.config import BudgetCatalog
from license_budget.types import (
    BudgetSummary,
    PolicyConstraints,
    PolicyViolation,
    Scenario,
    Team,
    Tool,
    ViolationKind,
)

logger = logging.getLogger("license_budget.evaluator")

_Entry = TypeVar("_Entry", Tool, Team)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_amount(value: float) -> str:
    """
    Render a dollar or seat amount without a trailing '.0' when it is whole.

    Fractional amounts always get two decimals ('75.50'), unlike JavaScript
    number rendering, which would print '75.5'.
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def _index_first(entries: Sequence[_Entry]) -> dict[str, _Entry]:
    """Map id -> entry, keeping the first entry when an id repeats."""
    index: dict[str, _Entry] = {}
    for entry in entries:
        index.setdefault(entry.id, entry)
    return index


class _Findings:
    """Ordered accumulator for warnings and their structured form."""

    def __init__(self) -> None:
        self.violations: list[PolicyViolation] = []

    def add(self, kind: ViolationKind, message: str, subject_id: str | None = None) -> None:
        self.violations.append(
            PolicyViolation(kind=kind, message=message, subject_id=subject_id)
        )

    @property
    def messages(self) -> list[str]:
        return [violation.message for violation in self.violations]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def evaluate(
    scenario: Scenario,
    tools: Sequence[Tool],
    teams: Sequence[Team],
    constraints: PolicyConstraints,
) -> BudgetSummary:
    """
    Compute the cost breakdown and policy warnings for a scenario.

    Warnings are collected in check order: per-assignment checks as each
    assignment is processed, then the distinct experimental tool count, then
    per-team budgets in roster order, then the total budget. There is no
    deduplication and no severity ranking.

    The team capacity check compares each assignment on its own against the
    team's member count. Several assignments to the same team are not summed
    for this check.

    Args:
        scenario:    The scenario to evaluate.
        tools:       The tool catalog.
        teams:       The team roster.
        constraints: Spending policy.

    Returns:
        A BudgetSummary. Evaluating the same inputs twice yields equal summaries.
    """
    tool_index = _index_first(tools)
    team_index = _index_first(teams)

    # Every rostered team appears, even with no assignments.
    team_costs: dict[str, float] = {team_id: 0.0 for team_id in team_index}
    tool_costs: dict[str, float] = {}
    findings = _Findings()

    total_cost = 0.0
    experimental_tool_ids: set[str] = set()
    experimental_users_count = 0
    skipped = 0

    for position, assignment in enumerate(scenario.assignments):
        tool = tool_index.get(assignment.tool_id)
        team = team_index.get(assignment.team_id)
        if tool is None or team is None:
            skipped += 1
            logger.debug(
                "assignment_skipped",
                extra={
                    "scenario_id": scenario.id,
                    "position": position,
                    "tool_id": assignment.tool_id,
                    "team_id": assignment.team_id,
                },
            )
            continue

        assignment_cost = tool.price * assignment.user_count
        total_cost += assignment_cost
        team_costs[team.id] += assignment_cost
        tool_costs[tool.id] = tool_costs.get(tool.id, 0.0) + assignment_cost

        if tool.type == "experimental":
            experimental_tool_ids.add(tool.id)
            experimental_users_count += assignment.user_count

            if assignment.user_count > constraints.max_users_per_experimental_tool:
                findings.add(
                    "experimental_seat_limit",
                    f"{tool.name} exceeds max {constraints.max_users_per_experimental_tool} "
                    f"users per experimental tool ({assignment.user_count} assigned)",
                    subject_id=tool.id,
                )

        if tool.price > constraints.max_user_cost:
            findings.add(
                "max_user_cost",
                f"{tool.name} (${format_amount(tool.price)}) exceeds max user cost "
                f"of ${format_amount(constraints.max_user_cost)}",
                subject_id=tool.id,
            )

        if assignment.user_count > team.member_count:
            findings.add(
                "team_capacity",
                f"{team.name} assignment ({assignment.user_count}) exceeds team size "
                f"({team.member_count})",
                subject_id=team.id,
            )

    experimental_tools_used = len(experimental_tool_ids)
    if experimental_tools_used > constraints.max_experimental_tools:
        findings.add(
            "experimental_tool_limit",
            f"Using {experimental_tools_used} experimental tools, max allowed is "
            f"{constraints.max_experimental_tools}",
        )

    for team_id, team in team_index.items():
        if team.budget_allocation > 0 and team_costs[team_id] > team.budget_allocation:
            findings.add(
                "team_budget",
                f"{team.name} cost (${format_amount(team_costs[team_id])}) exceeds "
                f"allocated budget (${format_amount(team.budget_allocation)})",
                subject_id=team_id,
            )

    total_budget = constraints.total_monthly_budget
    budget_utilization = (total_cost / total_budget) * 100.0
    within_budget = total_cost <= total_budget

    if not within_budget:
        findings.add(
            "total_budget",
            f"Total cost (${format_amount(total_cost)}) exceeds monthly budget "
            f"(${format_amount(total_budget)})",
        )

    logger.debug(
        "scenario_evaluated",
        extra={
            "scenario_id": scenario.id,
            "assignments": len(scenario.assignments),
            "skipped": skipped,
            "total_cost": total_cost,
            "within_budget": within_budget,
            "warning_count": len(findings.violations),
        },
    )

    return BudgetSummary(
        total_cost=total_cost,
        team_costs=team_costs,
        tool_costs=tool_costs,
        budget_utilization=budget_utilization,
        experimental_tools_used=experimental_tools_used,
        experimental_users_count=experimental_users_count,
        within_budget=within_budget,
        warnings=findings.messages,
        violations=findings.violations,
    )


def evaluate_scenario(scenario: Scenario, catalog: BudgetCatalog) -> BudgetSummary:
    """Evaluate ``scenario`` against every table in ``catalog``."""
    return evaluate(scenario, catalog.tools, catalog.teams, catalog.constraints)
