"""Toggle resolution services: matching, building, group parsing and orchestration."""

from .builder import build_toggle
from .groups import parse_groups, parse_rollout_percentage
from .matcher import match_row
from .resolver import resolve, resolve_result

__all__ = [
    "build_toggle",
    "match_row",
    "parse_groups",
    "parse_rollout_percentage",
    "resolve",
    "resolve_result",
]
