# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Built-in tool catalog, team roster, and spending policy.

These are static lookup tables. Use ``config.load_catalog`` to evaluate
scenarios against a different catalog.
"""

from __future__ import annotations

from license_budget.types import PolicyConstraints, Team, Tool

# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

DEFAULT_TOOLS: tuple[Tool, ...] = (
    Tool(id="gh-copilot", name="GitHub Copilot Business", price=19, type="approved", category="Code Assistant"),
    Tool(id="claude-code-pro", name="Claude Code Pro", price=17, type="experimental", category="AI Assistant"),
    Tool(id="claude-code-team", name="Claude Code Team", price=25, type="experimental", category="AI Assistant"),
    Tool(
        id="claude-code-enterprise",
        name="Claude Code Enterprise",
        price=60,
        type="approved",
        category="AI Assistant",
    ),
    Tool(id="cursor-team", name="Cursor Teams", price=40, type="approved", category="IDE"),
    Tool(
        id="gh-copilot-ft",
        name="GitHub Copilot with Fine-tuning",
        price=60,
        type="experimental",
        category="Code Assistant",
    ),
    Tool(id="claude-code-max", name="Claude Code Max", price=100, type="experimental", category="AI Assistant"),
    Tool(id="windsurf-teams", name="Windsurf Teams + SSO", price=40, type="experimental", category="IDE"),
)

# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

DEFAULT_TEAMS: tuple[Team, ...] = (
    Team(id="engineering", name="Engineering", member_count=60, budget_allocation=3600),
    Team(id="ux", name="UX", member_count=9, budget_allocation=540),
    Team(id="pm", name="PM", member_count=5, budget_allocation=300),
    # External seats use leftover budget.
    Team(id="external", name="External", member_count=10, budget_allocation=0),
)

# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------

DEFAULT_CONSTRAINTS = PolicyConstraints(
    monthly_budget=4500,
    premium_buffer=1250,  # $15,000/year
    max_user_cost=60,
    max_experimental_tools=3,
    max_users_per_experimental_tool=5,
)
