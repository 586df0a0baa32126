from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""Toggle output models.

``to_dict`` methods render the JSON wire shape (camelCase keys), the dataclass
fields stay snake_case.
"""

__all__ = [
    "RolloutGroup",
    "Toggle",
    "ToggleResult",
]


@dataclass(frozen=True)
class RolloutGroup:
    """A named cohort and how much of it receives the toggle."""
    name: str  # whitespace removed
    rollout_percentage: int  # <= 100, defaults to 100

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rolloutPercentage": self.rollout_percentage}


@dataclass(frozen=True)
class Toggle:
    """A resolved feature toggle. ``groups`` order is rollout precedence."""
    name: str
    value: str
    groups: tuple[RolloutGroup, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "groups": [g.to_dict() for g in self.groups],
        }


@dataclass(frozen=True)
class ToggleResult:
    """Toggles in requested-name order plus the resolution timestamp."""
    toggles: tuple[Toggle, ...] = field(default_factory=tuple)
    fetched_at: int = 0  # epoch milliseconds

    def to_dict(self) -> dict[str, Any]:
        return {
            "toggles": [t.to_dict() for t in self.toggles],
            "fetchedAt": self.fetched_at,
        }
