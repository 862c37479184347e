# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class LicenseBudgetError(Exception):
    """Base class for all license-budget errors."""

    def __init__(self, message: str, code: str = "LICENSE_BUDGET_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidAssignmentError(LicenseBudgetError):
    """
    Raised when an assignment fails validation and cannot enter a scenario.

    Attributes:
        errors: The human-readable validation errors, in check order.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            "Assignment rejected: " + "; ".join(errors) + ".",
            code="INVALID_ASSIGNMENT",
        )
        self.errors = list(errors)


class AssignmentIndexError(LicenseBudgetError, IndexError):
    """Raised when an edit targets an assignment position that does not exist."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Assignment index {index} is out of range for a scenario "
            f"with {size} assignment(s).",
            code="ASSIGNMENT_INDEX_OUT_OF_RANGE",
        )
        self.index = index
        self.size = size


class PresetNotFoundError(LicenseBudgetError, KeyError):
    """Raised when a preset scenario id is not one of the built-in presets."""

    def __init__(self, preset_id: str) -> None:
        from license_budget.presets import PRESET_IDS

        super().__init__(
            f"'{preset_id}' is not a known preset scenario. "
            f"Valid ids: {list(PRESET_IDS)}.",
            code="PRESET_NOT_FOUND",
        )
        self.preset_id = preset_id

    def __str__(self) -> str:
        return self.message


class CatalogError(LicenseBudgetError):
    """Raised when a tool/team catalog cannot be loaded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CATALOG_ERROR")
