# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for assignment admission checks."""

from __future__ import annotations

import pytest

from license_budget.config import BudgetCatalog
from license_budget.errors import InvalidAssignmentError, LicenseBudgetError
from license_budget.types import ToolAssignment
from license_budget.validation import require_valid_assignment, validate_assignment


def _assignment(tool_id: str, team_id: str, user_count: int) -> ToolAssignment:
    return ToolAssignment(tool_id=tool_id, team_id=team_id, user_count=user_count)


class TestValidateAssignment:
    def test_valid_assignment_has_no_errors(self, catalog: BudgetCatalog) -> None:
        assert validate_assignment(_assignment("gh-copilot", "pm", 5), catalog) == []

    def test_unknown_tool_stops_further_checks(self, catalog: BudgetCatalog) -> None:
        errors = validate_assignment(_assignment("nope", "also-nope", 0), catalog)
        assert errors == ["Invalid tool selected"]

    def test_unknown_team(self, catalog: BudgetCatalog) -> None:
        errors = validate_assignment(_assignment("gh-copilot", "sales", 1), catalog)
        assert errors == ["Invalid team selected"]

    def test_non_positive_user_count(self, catalog: BudgetCatalog) -> None:
        assert validate_assignment(_assignment("gh-copilot", "pm", 0), catalog) == [
            "User count must be greater than 0"
        ]
        assert validate_assignment(_assignment("gh-copilot", "pm", -3), catalog) == [
            "User count must be greater than 0"
        ]

    def test_user_count_above_team_size(self, catalog: BudgetCatalog) -> None:
        errors = validate_assignment(_assignment("cursor-team", "pm", 10), catalog)
        assert errors == ["Cannot assign more users (10) than team size (5)"]

    def test_validation_is_stricter_than_evaluation(self, catalog: BudgetCatalog) -> None:
        # The evaluator accepts this assignment at face value; validation refuses it.
        assert validate_assignment(_assignment("gh-copilot", "engineering", 61), catalog)


class TestRequireValidAssignment:
    def test_raises_with_all_errors(self, catalog: BudgetCatalog) -> None:
        with pytest.raises(InvalidAssignmentError) as excinfo:
            require_valid_assignment(_assignment("gh-copilot", "ux", 12), catalog)
        assert excinfo.value.errors == ["Cannot assign more users (12) than team size (9)"]
        assert excinfo.value.code == "INVALID_ASSIGNMENT"
        assert isinstance(excinfo.value, LicenseBudgetError)

    def test_does_not_raise_when_valid(self, catalog: BudgetCatalog) -> None:
        # Should not raise
        require_valid_assignment(_assignment("gh-copilot", "ux", 9), catalog)
