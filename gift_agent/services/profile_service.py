"""Profile Service - Validation of submitted form values.

This module handles:
- Turning raw form/CLI values into a Profile
- The form rules: gender required, age 1-120, budgets non-negative
  integers, max budget not below min budget

Interface Contract:
- from_form(data) -> Profile
- Raises ProfileValidationError with a user-facing message on bad input
"""

from __future__ import annotations

from typing import Any

from gift_agent.models import Gender, Profile

MIN_AGE = 1
MAX_AGE = 120


class ProfileValidationError(Exception):
    """Raised when submitted form values are invalid."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ProfileService:
    """Service for building validated profiles from user input."""

    def from_form(self, data: dict[str, Any]) -> Profile:
        """Validate form values and build a Profile.

        Args:
            data: Mapping with gender, age, interests, budgetMin, budgetMax

        Returns:
            Profile: Validated profile

        Raises:
            ProfileValidationError: On the first invalid field
        """
        gender = self._parse_gender(data.get("gender"))
        age = self._parse_int(data.get("age"), "age", "请输入年龄")
        if not MIN_AGE <= age <= MAX_AGE:
            raise ProfileValidationError(f"年龄必须在{MIN_AGE}-{MAX_AGE}之间", field="age")

        budget_min = self._parse_int(data.get("budgetMin"), "budgetMin", "请输入最低预算")
        budget_max = self._parse_int(data.get("budgetMax"), "budgetMax", "请输入最高预算")
        if budget_min < 0:
            raise ProfileValidationError("最低预算不能为负数", field="budgetMin")
        if budget_max < budget_min:
            raise ProfileValidationError("最高预算必须大于最低预算", field="budgetMax")

        interests = data.get("interests")
        interests = str(interests).strip() if interests is not None else ""

        return Profile(
            gender=gender,
            age=age,
            interests=interests or None,
            budget_min=budget_min,
            budget_max=budget_max,
        )

    def _parse_gender(self, value: Any) -> Gender:
        if value is None or str(value).strip() == "":
            raise ProfileValidationError("请选择性别", field="gender")
        try:
            return Gender.parse(value)
        except ValueError as e:
            raise ProfileValidationError("请选择性别", field="gender") from e

    def _parse_int(self, value: Any, field: str, missing_message: str) -> int:
        """Parse an integer field; bools and fractional numbers are rejected."""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ProfileValidationError(missing_message, field=field)
        if isinstance(value, bool):
            raise ProfileValidationError(missing_message, field=field)
        if isinstance(value, float):
            if not value.is_integer():
                raise ProfileValidationError(f"{field} 必须是整数", field=field)
            return int(value)
        try:
            return int(str(value).strip())
        except ValueError as e:
            raise ProfileValidationError(f"{field} 必须是整数", field=field) from e
