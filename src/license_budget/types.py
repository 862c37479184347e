# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Core data model for the license-budget package.

Catalog entries (tools, teams, policy constraints) and the evaluator's
output are frozen Pydantic v2 models. Scenarios are frozen too: every edit
produces a new Scenario rather than mutating the current one.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, computed_field

# ─── Catalog ──────────────────────────────────────────────────────────────────

ToolType = Literal["approved", "experimental"]


class Tool(BaseModel, frozen=True):
    """A licensable AI tool with a flat per-seat monthly price."""

    id: str = Field(..., min_length=1, description="Unique tool identifier.")
    name: str = Field(..., min_length=1, description="Display name.")
    price: float = Field(..., ge=0.0, description="Cost per user per month in USD.")
    type: ToolType = Field(..., description="Approval status of the tool.")
    category: Optional[str] = Field(default=None, description="Optional grouping label.")


class Team(BaseModel, frozen=True):
    """A team that can receive tool seats."""

    id: str = Field(..., min_length=1, description="Unique team identifier.")
    name: str = Field(..., min_length=1, description="Display name.")
    member_count: int = Field(..., ge=0, description="Number of people on the team.")
    budget_allocation: float = Field(
        default=0.0,
        ge=0.0,
        description=(
            "Monthly soft budget ceiling for the team in USD. "
            "Zero means the team draws from the shared budget and is not checked."
        ),
    )


class PolicyConstraints(BaseModel, frozen=True):
    """Process-wide spending policy applied to every scenario."""

    monthly_budget: float = Field(..., gt=0.0, description="Base monthly budget in USD.")
    premium_buffer: float = Field(
        default=0.0,
        ge=0.0,
        description="Extra headroom above the base budget that still counts as within budget.",
    )
    max_user_cost: float = Field(..., ge=0.0, description="Advisory per-seat price ceiling.")
    max_experimental_tools: int = Field(
        ..., ge=0, description="Maximum distinct experimental tools in use at once."
    )
    max_users_per_experimental_tool: int = Field(
        ..., ge=0, description="Per-assignment seat ceiling for experimental tools."
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_monthly_budget(self) -> float:
        """Base budget plus premium buffer."""
        return self.monthly_budget + self.premium_buffer


# ─── Scenario ─────────────────────────────────────────────────────────────────


class ToolAssignment(BaseModel, frozen=True):
    """N seats of one tool allocated to one team."""

    tool_id: str
    team_id: str
    user_count: int = Field(..., description="Seats assigned. Not range-checked here.")


class Scenario(BaseModel, frozen=True):
    """A named what-if budget plan."""

    id: str = Field(..., min_length=1)
    name: str
    description: Optional[str] = None
    assignments: list[ToolAssignment] = Field(default_factory=list)
    external_seats: int = Field(
        default=0,
        ge=0,
        description="External-team seat count. Advisory only; not part of the cost math.",
    )


# ─── Evaluation result ────────────────────────────────────────────────────────

ViolationKind = Literal[
    "experimental_seat_limit",
    "max_user_cost",
    "team_capacity",
    "experimental_tool_limit",
    "team_budget",
    "total_budget",
]


class PolicyViolation(BaseModel, frozen=True):
    """Structured form of a single advisory warning."""

    kind: ViolationKind
    message: str
    subject_id: Optional[str] = Field(
        default=None,
        description="Tool or team id the finding is about. None for scenario-wide findings.",
    )


class BudgetSummary(BaseModel, frozen=True):
    """Full cost breakdown and policy findings for one scenario."""

    total_cost: float
    team_costs: dict[str, float]
    tool_costs: dict[str, float]
    budget_utilization: float = Field(
        ..., description="total_cost as a percentage of total_monthly_budget. Unbounded."
    )
    experimental_tools_used: int
    experimental_users_count: int
    within_budget: bool
    warnings: list[str] = Field(default_factory=list)
    violations: list[PolicyViolation] = Field(default_factory=list)
