# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Dashboard figures derived from an evaluated scenario.

Turns a BudgetSummary into per-team and per-tool rows plus headline numbers
(seat total, average cost per seat, remaining budget). Nothing here adds
policy warnings: ``over_capacity_teams`` compares each team's total seats
against its size, which the evaluator does not do, and is informational only.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from license_budget.config import BudgetCatalog
from license_budget.types import BudgetSummary, Scenario, ToolType


# ---------------------------------------------------------------------------
# Report models
# ---------------------------------------------------------------------------


class TeamBreakdown(BaseModel, frozen=True):
    """Cost and seat totals for one team."""

    team_id: str
    name: str
    cost: float
    budget_allocation: float
    utilization_percent: float = Field(
        ..., description="cost / budget_allocation * 100, or 0 when the team has no allocation."
    )
    seats: int = Field(..., description="Sum of user_count over the team's resolvable assignments.")
    member_count: int


class ToolBreakdown(BaseModel, frozen=True):
    """Cost for one tool in use."""

    tool_id: str
    name: str
    type: ToolType | None = Field(default=None, description="None if the tool is not in the catalog.")
    cost: float


class ScenarioReport(BaseModel, frozen=True):
    """Headline figures and breakdown rows for one scenario."""

    scenario_id: str
    scenario_name: str
    total_cost: float
    total_budget: float
    remaining_budget: float = Field(..., description="total_budget - total_cost. Negative when over.")
    budget_utilization: float
    total_users: int
    average_cost_per_user: float
    team_breakdown: list[TeamBreakdown] = Field(default_factory=list)
    tool_breakdown: list[ToolBreakdown] = Field(default_factory=list)
    over_capacity_teams: list[str] = Field(default_factory=list)
    warning_count: int


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_report(
    scenario: Scenario,
    summary: BudgetSummary,
    catalog: BudgetCatalog,
) -> ScenarioReport:
    """
    Derive dashboard figures for ``scenario`` from its evaluated ``summary``.

    ``total_users`` counts every assignment's seats, resolvable or not, to
    match what the scenario editor shows. Per-team ``seats`` count only
    assignments whose tool and team are both in the catalog.
    """
    total_users = sum(assignment.user_count for assignment in scenario.assignments)
    average_cost_per_user = summary.total_cost / total_users if total_users > 0 else 0.0

    seats_by_team: dict[str, int] = {}
    for assignment in scenario.assignments:
        if catalog.get_tool(assignment.tool_id) is None:
            continue
        if catalog.get_team(assignment.team_id) is None:
            continue
        seats_by_team[assignment.team_id] = (
            seats_by_team.get(assignment.team_id, 0) + assignment.user_count
        )

    team_breakdown: list[TeamBreakdown] = []
    over_capacity_teams: list[str] = []
    for team in catalog.teams:
        cost = summary.team_costs.get(team.id, 0.0)
        seats = seats_by_team.get(team.id, 0)
        utilization = (
            (cost / team.budget_allocation) * 100.0 if team.budget_allocation > 0 else 0.0
        )
        team_breakdown.append(
            TeamBreakdown(
                team_id=team.id,
                name=team.name,
                cost=cost,
                budget_allocation=team.budget_allocation,
                utilization_percent=utilization,
                seats=seats,
                member_count=team.member_count,
            )
        )
        if seats > team.member_count:
            over_capacity_teams.append(team.id)

    tool_breakdown: list[ToolBreakdown] = []
    for tool_id, cost in summary.tool_costs.items():
        tool = catalog.get_tool(tool_id)
        tool_breakdown.append(
            ToolBreakdown(
                tool_id=tool_id,
                name=tool.name if tool is not None else tool_id,
                type=tool.type if tool is not None else None,
                cost=cost,
            )
        )

    total_budget = catalog.constraints.total_monthly_budget

    return ScenarioReport(
        scenario_id=scenario.id,
        scenario_name=scenario.name,
        total_cost=summary.total_cost,
        total_budget=total_budget,
        remaining_budget=total_budget - summary.total_cost,
        budget_utilization=summary.budget_utilization,
        total_users=total_users,
        average_cost_per_user=average_cost_per_user,
        team_breakdown=team_breakdown,
        tool_breakdown=tool_breakdown,
        over_capacity_teams=over_capacity_teams,
        warning_count=len(summary.warnings),
    )
