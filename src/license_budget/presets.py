# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Hand-authored example scenarios.

Each getter returns fresh Scenario objects, so callers are free to edit what
they receive without affecting later calls.
"""

from __future__ import annotations

from license_budget.errors import PresetNotFoundError
from license_budget.types import Scenario, ToolAssignment

DEFAULT_PRESET_ID = "balanced"


def _assign(tool_id: str, team_id: str, user_count: int) -> ToolAssignment:
    return ToolAssignment(tool_id=tool_id, team_id=team_id, user_count=user_count)


_PRESETS: tuple[Scenario, ...] = (
    Scenario(
        id="conservative",
        name="Conservative",
        description="Low-cost approach using mostly approved tools",
        assignments=[
            _assign("gh-copilot", "engineering", 55),
            _assign("claude-code-pro", "engineering", 5),
            _assign("gh-copilot", "ux", 5),
            _assign("gh-copilot", "pm", 3),
        ],
        external_seats=5,
    ),
    Scenario(
        id="balanced",
        name="Balanced",
        description="Mix of approved and experimental tools with moderate coverage",
        assignments=[
            _assign("cursor-team", "engineering", 25),
            _assign("gh-copilot", "engineering", 20),
            _assign("claude-code-max", "engineering", 5),
            _assign("claude-code-team", "engineering", 5),
            _assign("windsurf-teams", "engineering", 5),
            _assign("cursor-team", "ux", 3),
            _assign("cursor-team", "pm", 3),
        ],
        external_seats=10,
    ),
    Scenario(
        id="ambitious",
        name="Ambitious",
        description="High-end tools with maximum team coverage",
        assignments=[
            _assign("cursor-team", "engineering", 30),
            _assign("claude-code-enterprise", "engineering", 25),
            _assign("claude-code-max", "engineering", 5),
            _assign("cursor-team", "ux", 6),
            _assign("claude-code-enterprise", "ux", 3),
            _assign("cursor-team", "pm", 5),
        ],
        external_seats=10,
    ),
    Scenario(
        id="experimental",
        name="Max Experimental",
        description="Focus on testing experimental tools within constraints",
        assignments=[
            _assign("gh-copilot", "engineering", 45),
            _assign("claude-code-max", "engineering", 5),
            _assign("windsurf-teams", "engineering", 5),
            _assign("gh-copilot-ft", "engineering", 5),
            _assign("claude-code-pro", "ux", 5),
            _assign("claude-code-pro", "pm", 5),
        ],
        external_seats=10,
    ),
)

PRESET_IDS: tuple[str, ...] = tuple(preset.id for preset in _PRESETS)


def get_preset_scenarios() -> list[Scenario]:
    """Return every preset, in display order."""
    return [preset.model_copy(deep=True) for preset in _PRESETS]


def get_preset(preset_id: str) -> Scenario:
    """
    Return one preset by id.

    Raises:
        PresetNotFoundError: If ``preset_id`` is not a known preset.
    """
    for preset in _PRESETS:
        if preset.id == preset_id:
            return preset.model_copy(deep=True)
    raise PresetNotFoundError(preset_id)


def get_default_scenario() -> Scenario:
    """Return the scenario a new session starts with (the Balanced preset)."""
    return get_preset(DEFAULT_PRESET_ID)
