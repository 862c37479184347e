# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging

from license_budget.config import BudgetCatalog, SessionConfig, default_catalog
from license_budget.errors import AssignmentIndexError
from license_budget.evaluator import evaluate_scenario
from license_budget.presets import get_default_scenario, get_preset
from license_budget.types import BudgetSummary, Scenario, ToolAssignment
from license_budget.validation import require_valid_assignment, validate_assignment

logger = logging.getLogger("license_budget.session")


# ─── Pure edits ───────────────────────────────────────────────────────────────


def add_assignment(scenario: Scenario, assignment: ToolAssignment) -> Scenario:
    """Return a copy of ``scenario`` with ``assignment`` appended."""
    return scenario.model_copy(update={"assignments": [*scenario.assignments, assignment]})


def update_assignment(
    scenario: Scenario,
    index: int,
    *,
    tool_id: str | None = None,
    team_id: str | None = None,
    user_count: int | None = None,
) -> Scenario:
    """
    Return a copy of ``scenario`` with the assignment at ``index`` changed.

    Only the fields passed are replaced. The result is validated like a newly
    built ToolAssignment, so ``user_count="7"`` is coerced to ``7``.

    Raises:
        AssignmentIndexError: If ``index`` is out of range.
        pydantic.ValidationError: If a changed field does not fit its type.
    """
    current = _assignment_at(scenario, index)
    changes: dict[str, object] = {}
    if tool_id is not None:
        changes["tool_id"] = tool_id
    if team_id is not None:
        changes["team_id"] = team_id
    if user_count is not None:
        changes["user_count"] = user_count

    assignments = list(scenario.assignments)
    assignments[index] = ToolAssignment.model_validate({**current.model_dump(), **changes})
    return scenario.model_copy(update={"assignments": assignments})


def remove_assignment(scenario: Scenario, index: int) -> Scenario:
    """
    Return a copy of ``scenario`` without the assignment at ``index``.

    Raises:
        AssignmentIndexError: If ``index`` is out of range.
    """
    _assignment_at(scenario, index)
    assignments = [a for position, a in enumerate(scenario.assignments) if position != index]
    return scenario.model_copy(update={"assignments": assignments})


def rename_scenario(scenario: Scenario, name: str) -> Scenario:
    return scenario.model_copy(update={"name": name})


def _assignment_at(scenario: Scenario, index: int) -> ToolAssignment:
    # Negative indices are rejected rather than counted from the end.
    if not 0 <= index < len(scenario.assignments):
        raise AssignmentIndexError(index, len(scenario.assignments))
    return scenario.assignments[index]


# ─── Session ──────────────────────────────────────────────────────────────────


class ScenarioSession:
    """
    The current what-if scenario for one interactive caller.

    Design contract
    ---------------
    - The catalog is fixed for the life of the session.
    - Every mutation replaces the scenario wholesale and re-runs the
      evaluator in full. ``summary`` always reflects ``scenario``; both
      properties return deep copies, so callers cannot desynchronise them.
    - With ``validate_on_edit`` (the default) an invalid add or update
      raises ``InvalidAssignmentError`` and leaves the session unchanged.
    - Loading a preset replaces the scenario; nothing is merged.

    Usage
    -----
    ::

        session = ScenarioSession()
        session.load_preset("conservative")
        session.add_assignment("cursor-team", "ux", 4)
        if not session.summary.within_budget:
            print(session.summary.warnings)
    """

    def __init__(
        self,
        catalog: BudgetCatalog | None = None,
        scenario: Scenario | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()
        self._config = config or SessionConfig()
        self._scenario = scenario if scenario is not None else get_default_scenario()
        self._summary = self._evaluate(self._scenario)

    # ─── State ────────────────────────────────────────────────────────────────

    @property
    def catalog(self) -> BudgetCatalog:
        return self._catalog

    @property
    def scenario(self) -> Scenario:
        """The current scenario (a deep copy, mutation has no effect)."""
        return self._scenario.model_copy(deep=True)

    @property
    def summary(self) -> BudgetSummary:
        """The summary of the current scenario (a deep copy, mutation has no effect)."""
        return self._summary.model_copy(deep=True)

    # ─── Edits ────────────────────────────────────────────────────────────────

    def add_assignment(self, tool_id: str, team_id: str, user_count: int) -> BudgetSummary:
        """
        Append an assignment and re-evaluate.

        Raises:
            InvalidAssignmentError: If validation is enabled and the assignment
                is rejected.
        """
        assignment = ToolAssignment(tool_id=tool_id, team_id=team_id, user_count=user_count)
        if self._config.validate_on_edit:
            require_valid_assignment(assignment, self._catalog)
        return self._replace(add_assignment(self._scenario, assignment), "assignment_added")

    def update_assignment(
        self,
        index: int,
        *,
        tool_id: str | None = None,
        team_id: str | None = None,
        user_count: int | None = None,
    ) -> BudgetSummary:
        """
        Change fields of the assignment at ``index`` and re-evaluate.

        The assignment is validated as it would look after the change.

        Raises:
            AssignmentIndexError: If ``index`` is out of range.
            InvalidAssignmentError: If validation is enabled and the updated
                assignment is rejected.
        """
        updated = update_assignment(
            self._scenario, index, tool_id=tool_id, team_id=team_id, user_count=user_count
        )
        if self._config.validate_on_edit:
            require_valid_assignment(updated.assignments[index], self._catalog)
        return self._replace(updated, "assignment_updated")

    def remove_assignment(self, index: int) -> BudgetSummary:
        """
        Remove the assignment at ``index`` and re-evaluate.

        Raises:
            AssignmentIndexError: If ``index`` is out of range.
        """
        return self._replace(remove_assignment(self._scenario, index), "assignment_removed")

    def rename(self, name: str) -> BudgetSummary:
        return self._replace(rename_scenario(self._scenario, name), "scenario_renamed")

    def load_preset(self, preset_id: str) -> BudgetSummary:
        """
        Replace the current scenario with a preset.

        Raises:
            PresetNotFoundError: If ``preset_id`` is not a known preset.
        """
        return self._replace(get_preset(preset_id), "preset_loaded")

    def replace_scenario(self, scenario: Scenario) -> BudgetSummary:
        """Replace the current scenario as-is. No assignment validation is applied."""
        return self._replace(scenario, "scenario_replaced")

    def validate(self, tool_id: str, team_id: str, user_count: int) -> list[str]:
        """Return validation errors for a prospective assignment without applying it."""
        return validate_assignment(
            ToolAssignment(tool_id=tool_id, team_id=team_id, user_count=user_count),
            self._catalog,
        )

    # ─── Private helpers ──────────────────────────────────────────────────────

    def _replace(self, scenario: Scenario, event: str) -> BudgetSummary:
        summary = self._evaluate(scenario)
        self._scenario = scenario
        self._summary = summary
        logger.info(
            event,
            extra={
                "scenario_id": scenario.id,
                "assignments": len(scenario.assignments),
                "total_cost": summary.total_cost,
                "within_budget": summary.within_budget,
            },
        )
        return summary.model_copy(deep=True)

    def _evaluate(self, scenario: Scenario) -> BudgetSummary:
        summary = evaluate_scenario(scenario, self._catalog)
        if self._config.log_warnings:
            for violation in summary.violations:
                logger.warning(
                    violation.message,
                    extra={"scenario_id": scenario.id, "kind": violation.kind},
                )
        return summary
