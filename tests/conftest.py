# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for license-budget tests."""

from __future__ import annotations

import pytest

from license_budget.config import BudgetCatalog, default_catalog
from license_budget.scenario import ScenarioSession
from license_budget.types import PolicyConstraints, Scenario, Team, Tool, ToolAssignment


def make_scenario(*assignments: tuple[str, str, int], scenario_id: str = "test") -> Scenario:
    """Build a scenario from (tool_id, team_id, user_count) triples."""
    return Scenario(
        id=scenario_id,
        name="Test",
        assignments=[
            ToolAssignment(tool_id=tool_id, team_id=team_id, user_count=user_count)
            for tool_id, team_id, user_count in assignments
        ],
    )


@pytest.fixture
def catalog() -> BudgetCatalog:
    """The built-in catalog."""
    return default_catalog()


@pytest.fixture
def small_catalog() -> BudgetCatalog:
    """
    A three-tool, one-team synthetic catalog.

    tool-a: $19 approved. tool-b: $100 experimental. tool-c: $25 experimental.
    eng: 60 members, $3600 allocation. Total budget $5750.
    """
    return BudgetCatalog(
        tools=[
            Tool(id="tool-a", name="Tool A", price=19, type="approved"),
            Tool(id="tool-b", name="Tool B", price=100, type="experimental"),
            Tool(id="tool-c", name="Tool C", price=25, type="experimental"),
        ],
        teams=[Team(id="eng", name="Engineering", member_count=60, budget_allocation=3600)],
        constraints=PolicyConstraints(
            monthly_budget=4500,
            premium_buffer=1250,
            max_user_cost=60,
            max_experimental_tools=3,
            max_users_per_experimental_tool=5,
        ),
    )


@pytest.fixture
def session() -> ScenarioSession:
    """A session on the built-in catalog, starting from the Balanced preset."""
    return ScenarioSession()
