"""Profile data models.

Pure data structures with no business logic.
Validation of user input lives in ProfileService; a Profile is assumed valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Gender(Enum):
    """Recipient gender, valued by the label the prompt uses."""
    MALE = "男"
    FEMALE = "女"

    @classmethod
    def parse(cls, value: str | Gender) -> "Gender":
        """Accept the Chinese label or the English name (any case)."""
        if isinstance(value, Gender):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(f"Unknown gender: {value!r}")


@dataclass(frozen=True)
class Profile:
    """Recipient attributes submitted for one generation cycle."""
    gender: Gender
    age: int
    budget_min: int
    budget_max: int
    interests: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (form field names)."""
        return {
            "gender": self.gender.value,
            "age": self.age,
            "interests": self.interests,
            "budgetMin": self.budget_min,
            "budgetMax": self.budget_max,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create from dictionary produced by to_dict."""
        return cls(
            gender=Gender.parse(data["gender"]),
            age=int(data["age"]),
            interests=data.get("interests") or None,
            budget_min=int(data["budgetMin"]),
            budget_max=int(data["budgetMax"]),
        )
