# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for catalog construction, lookups, and JSON loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from license_budget.config import BudgetCatalog, SessionConfig, default_catalog, load_catalog
from license_budget.errors import CatalogError
from license_budget.types import PolicyConstraints, Team, Tool


def _constraints(**overrides: float) -> PolicyConstraints:
    values: dict[str, float] = {
        "monthly_budget": 1000,
        "max_user_cost": 50,
        "max_experimental_tools": 2,
        "max_users_per_experimental_tool": 3,
    }
    values.update(overrides)
    return PolicyConstraints(**values)  # type: ignore[arg-type]


class TestDefaultCatalog:
    def test_contents(self, catalog: BudgetCatalog) -> None:
        assert len(catalog.tools) == 8
        assert [team.id for team in catalog.teams] == ["engineering", "ux", "pm", "external"]

    def test_total_monthly_budget_includes_buffer(self, catalog: BudgetCatalog) -> None:
        assert catalog.constraints.monthly_budget == 4500
        assert catalog.constraints.premium_buffer == 1250
        assert catalog.constraints.total_monthly_budget == 5750

    def test_tools_split_by_type(self, catalog: BudgetCatalog) -> None:
        assert [t.id for t in catalog.approved_tools()] == [
            "gh-copilot",
            "claude-code-enterprise",
            "cursor-team",
        ]
        assert len(catalog.experimental_tools()) == 5

    def test_tools_by_category(self, catalog: BudgetCatalog) -> None:
        grouped = catalog.tools_by_category()
        assert list(grouped) == ["Code Assistant", "AI Assistant", "IDE"]
        assert [t.id for t in grouped["IDE"]] == ["cursor-team", "windsurf-teams"]

    def test_lookups(self, catalog: BudgetCatalog) -> None:
        tool = catalog.get_tool("claude-code-max")
        assert tool is not None and tool.price == 100
        assert catalog.get_tool("missing") is None
        team = catalog.get_team("pm")
        assert team is not None and team.member_count == 5
        assert catalog.get_team("missing") is None

    def test_each_call_returns_a_fresh_catalog(self) -> None:
        assert default_catalog() == default_catalog()
        assert default_catalog() is not default_catalog()


class TestCatalogValidation:
    def test_duplicate_tool_ids_rejected(self) -> None:
        tool = Tool(id="dup", name="Dup", price=1, type="approved")
        with pytest.raises(ValidationError, match="duplicate tool id"):
            BudgetCatalog(tools=[tool, tool], teams=[], constraints=_constraints())

    def test_duplicate_team_ids_rejected(self) -> None:
        team = Team(id="dup", name="Dup", member_count=1)
        with pytest.raises(ValidationError, match="duplicate team id"):
            BudgetCatalog(tools=[], teams=[team, team], constraints=_constraints())

    def test_zero_monthly_budget_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _constraints(monthly_budget=0)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tool(id="t", name="T", price=-1, type="approved")

    def test_unknown_tool_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tool(id="t", name="T", price=1, type="beta")  # type: ignore[arg-type]

    def test_session_config_defaults(self) -> None:
        config = SessionConfig()
        assert config.validate_on_edit is True
        assert config.log_warnings is True


class TestLoadCatalog:
    def test_round_trips_default_catalog(self, tmp_path: Path, catalog: BudgetCatalog) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(catalog.model_dump_json(indent=2), encoding="utf-8")
        assert load_catalog(path) == catalog

    def test_loads_hand_written_document(self, tmp_path: Path) -> None:
        document = {
            "tools": [{"id": "ide", "name": "IDE", "price": 12.5, "type": "approved"}],
            "teams": [{"id": "data", "name": "Data", "member_count": 4, "budget_allocation": 100}],
            "constraints": {
                "monthly_budget": 500,
                "max_user_cost": 40,
                "max_experimental_tools": 1,
                "max_users_per_experimental_tool": 2,
            },
        }
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        loaded = load_catalog(str(path))
        assert loaded.get_tool("ide") is not None
        assert loaded.constraints.total_monthly_budget == 500

    def test_missing_file_raises_catalog_error(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Cannot read catalog file"):
            load_catalog(tmp_path / "absent.json")

    def test_invalid_document_raises_catalog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"tools": [], "teams": []}), encoding="utf-8")
        with pytest.raises(CatalogError) as excinfo:
            load_catalog(path)
        assert excinfo.value.code == "CATALOG_ERROR"
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_malformed_json_raises_catalog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)
