# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from license_budget.errors import CatalogError
from license_budget.types import PolicyConstraints, Team, Tool


class BudgetCatalog(BaseModel, frozen=True):
    """
    Read-only reference data every scenario is evaluated against.

    Pass a catalog into the evaluator, validator, and session instead of
    reading module-level tables, so tests can supply synthetic catalogs.

    Example::

        catalog = BudgetCatalog(
            tools=[Tool(id="copilot", name="Copilot", price=19, type="approved")],
            teams=[Team(id="eng", name="Engineering", member_count=60)],
            constraints=PolicyConstraints(
                monthly_budget=4500,
                max_user_cost=60,
                max_experimental_tools=3,
                max_users_per_experimental_tool=5,
            ),
        )
    """

    tools: list[Tool] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)
    constraints: PolicyConstraints

    @model_validator(mode="after")
    def ids_must_be_unique(self) -> BudgetCatalog:
        for label, ids in (
            ("tool", [tool.id for tool in self.tools]),
            ("team", [team.id for team in self.teams]),
        ):
            seen: set[str] = set()
            for entry_id in ids:
                if entry_id in seen:
                    raise ValueError(f"duplicate {label} id {entry_id!r} in catalog")
                seen.add(entry_id)
        return self

    def get_tool(self, tool_id: str) -> Tool | None:
        """Return the tool with ``tool_id``, or None when it is not in the catalog."""
        return next((tool for tool in self.tools if tool.id == tool_id), None)

    def get_team(self, team_id: str) -> Team | None:
        """Return the team with ``team_id``, or None when it is not in the catalog."""
        return next((team for team in self.teams if team.id == team_id), None)

    def approved_tools(self) -> list[Tool]:
        return [tool for tool in self.tools if tool.type == "approved"]

    def experimental_tools(self) -> list[Tool]:
        return [tool for tool in self.tools if tool.type == "experimental"]

    def tools_by_category(self) -> dict[str, list[Tool]]:
        """Group tools by category label, in catalog order. Unlabelled tools go under 'Uncategorized'."""
        grouped: dict[str, list[Tool]] = {}
        for tool in self.tools:
            grouped.setdefault(tool.category or "Uncategorized", []).append(tool)
        return grouped


class SessionConfig(BaseModel, frozen=True):
    """
    Configuration for a ScenarioSession.

    Attributes:
        validate_on_edit: When True, assignments are validated before they are
            added or updated, and invalid edits raise InvalidAssignmentError.
            When False, any assignment is accepted and the evaluator's
            tolerant handling applies.
        log_warnings: When True, each policy warning from a re-evaluation is
            logged at WARNING level to the ``license_budget.session`` logger.
    """

    validate_on_edit: bool = True
    log_warnings: bool = True


def default_catalog() -> BudgetCatalog:
    """Return the built-in tool catalog, team roster, and policy."""
    from license_budget.data import DEFAULT_CONSTRAINTS, DEFAULT_TEAMS, DEFAULT_TOOLS

    return BudgetCatalog(
        tools=list(DEFAULT_TOOLS),
        teams=list(DEFAULT_TEAMS),
        constraints=DEFAULT_CONSTRAINTS,
    )


def load_catalog(path: str | Path) -> BudgetCatalog:
    """
    Load a catalog from a JSON file.

    The document must have ``tools``, ``teams`` and ``constraints`` keys using
    the same snake_case field names as the models.

    Raises:
        CatalogError: If the file cannot be read or does not describe a valid
            catalog.
    """
    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog file {str(catalog_path)!r}: {exc}") from exc

    try:
        return BudgetCatalog.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(
            f"Catalog file {str(catalog_path)!r} is invalid: "
            f"{exc.error_count()} validation error(s)."
        ) from exc
