# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
license-budget: seat-license budget planning for AI tooling.

Quick start::

    from license_budget import ScenarioSession

    session = ScenarioSession()            # built-in catalog, Balanced preset
    session.add_assignment("gh-copilot", "ux", 4)

    summary = session.summary
    print(summary.total_cost, summary.within_budget)
    for warning in summary.warnings:
        print(warning)
"""

from license_budget.config import BudgetCatalog, SessionConfig, default_catalog, load_catalog
from license_budget.errors import (
    AssignmentIndexError,
    CatalogError,
    InvalidAssignmentError,
    LicenseBudgetError,
    PresetNotFoundError,
)
from license_budget.evaluator import evaluate, evaluate_scenario, format_amount
from license_budget.presets import (
    DEFAULT_PRESET_ID,
    PRESET_IDS,
    get_default_scenario,
    get_preset,
    get_preset_scenarios,
)
from license_budget.report import ScenarioReport, TeamBreakdown, ToolBreakdown, build_report
from license_budget.scenario import (
    ScenarioSession,
    add_assignment,
    remove_assignment,
    rename_scenario,
    update_assignment,
)
from license_budget.types import (
    BudgetSummary,
    PolicyConstraints,
    PolicyViolation,
    Scenario,
    Team,
    Tool,
    ToolAssignment,
    ToolType,
    ViolationKind,
)
from license_budget.validation import require_valid_assignment, validate_assignment

__version__ = "0.1.0"

__all__ = [
    # Core session
    "ScenarioSession",
    # Types
    "Tool",
    "ToolType",
    "Team",
    "PolicyConstraints",
    "ToolAssignment",
    "Scenario",
    "BudgetSummary",
    "PolicyViolation",
    "ViolationKind",
    # Configuration
    "BudgetCatalog",
    "SessionConfig",
    "default_catalog",
    "load_catalog",
    # Evaluation
    "evaluate",
    "evaluate_scenario",
    "format_amount",
    # Validation
    "validate_assignment",
    "require_valid_assignment",
    # Scenario edits
    "add_assignment",
    "update_assignment",
    "remove_assignment",
    "rename_scenario",
    # Presets
    "DEFAULT_PRESET_ID",
    "PRESET_IDS",
    "get_preset_scenarios",
    "get_preset",
    "get_default_scenario",
    # Reporting
    "build_report",
    "ScenarioReport",
    "TeamBreakdown",
    "ToolBreakdown",
    # Errors
    "LicenseBudgetError",
    "InvalidAssignmentError",
    "AssignmentIndexError",
    "PresetNotFoundError",
    "CatalogError",
    "__version__",
]
