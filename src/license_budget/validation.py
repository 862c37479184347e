# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Admission checks for new or edited assignments.

Validation is deliberately stricter than the evaluator: it refuses unknown
ids, non-positive seat counts, and seat counts above team size, whereas the
evaluator tolerates all of these in scenarios that already exist.
"""

from __future__ import annotations

from license_budget.config import BudgetCatalog
from license_budget.errors import InvalidAssignmentError
from license_budget.types import ToolAssignment


def validate_assignment(assignment: ToolAssignment, catalog: BudgetCatalog) -> list[str]:
    """
    Check an assignment before it enters a scenario.

    An unknown tool or team stops the check immediately, since seat limits
    cannot be checked without a team.

    Returns:
        Human-readable error strings. An empty list means the assignment is valid.
    """
    errors: list[str] = []

    if catalog.get_tool(assignment.tool_id) is None:
        errors.append("Invalid tool selected")
        return errors

    team = catalog.get_team(assignment.team_id)
    if team is None:
        errors.append("Invalid team selected")
        return errors

    if assignment.user_count <= 0:
        errors.append("User count must be greater than 0")

    if assignment.user_count > team.member_count:
        errors.append(
            f"Cannot assign more users ({assignment.user_count}) "
            f"than team size ({team.member_count})"
        )

    return errors


def require_valid_assignment(assignment: ToolAssignment, catalog: BudgetCatalog) -> None:
    """
    Raise if ``assignment`` fails validation.

    Raises:
        InvalidAssignmentError: Carrying every error from ``validate_assignment``.
    """
    errors = validate_assignment(assignment, catalog)
    if errors:
        raise InvalidAssignmentError(errors)
