from __future__ import annotations

import re
from collections.abc import Sequence

from ..errors import InvalidArgumentError
from ..models.toggle import RolloutGroup

"""Group parsing for the ``Group`` column.

A Group cell holds comma separated segments, each ``name`` or
``name=percentage``::

    "beta=20, internal"  ->  [beta (20), internal (100)]

Percentages degrade gracefully: anything that is not a number becomes 100
(full rollout) and values above 100 clamp to 100. Negative values are kept.
"""

__all__ = [
    "DEFAULT_PERCENTAGE",
    "MAX_PERCENTAGE",
    "parse_groups",
    "parse_group",
    "parse_rollout_percentage",
]

DEFAULT_PERCENTAGE = 100
MAX_PERCENTAGE = 100

_WHITESPACE = re.compile(r"\s+")

# Text accepted as a number by loose numeric coercion (the sheet may hold "20", "20.5", "1e2", "0x14")
_NUMERIC = re.compile(
    r"""^(?:
        [+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | 0[xX][0-9a-fA-F]+
      | 0[oO][0-7]+
      | 0[bB][01]+
      | [+-]?Infinity
    )$""",
    re.VERBOSE,
)

# Leading integer of a text; hex prefix honoured, everything after the digits ignored
_LEADING_INT = re.compile(r"^([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def _to_number(text: str) -> float | None:
    """Loose numeric coercion. Returns None when ``text`` is not a number."""
    stripped = text.strip()
    if stripped == "":
        # blank-but-truthy text coerces to 0, the leading-int step then rejects it
        return 0.0
    if not _NUMERIC.match(stripped):
        return None
    lowered = stripped.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        return float(int(stripped, 0))
    return float(stripped.replace("Infinity", "inf"))


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text.strip())
    if match is None:
        return None
    sign, hex_digits, dec_digits = match.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(dec_digits)
    return -value if sign == "-" else value


def parse_rollout_percentage(percentage: str | None) -> int:
    """Normalize the right-hand side of a ``name=percentage`` segment.

    Empty, missing or non-numeric input gives 100. Numbers above 100 clamp to
    100, everything else is truncated to its leading integer ("12.9" -> 12).
    No lower bound is applied.
    """
    if not percentage:
        return DEFAULT_PERCENTAGE
    number = _to_number(percentage)
    if number is None:
        return DEFAULT_PERCENTAGE
    if number > MAX_PERCENTAGE:
        return MAX_PERCENTAGE
    parsed = _leading_int(percentage)
    if parsed is None:
        return DEFAULT_PERCENTAGE
    return parsed


def parse_group(segment: str) -> RolloutGroup:
    """Parse one comma delimited segment into a RolloutGroup.

    The name loses every whitespace character, not only the surrounding ones.
    """
    name_part, _, percentage_part = segment.partition("=")
    name = _WHITESPACE.sub("", name_part)
    return RolloutGroup(name=name, rollout_percentage=parse_rollout_percentage(percentage_part))


def parse_groups(segments: Sequence[str]) -> list[RolloutGroup]:
    """Parse Group segments, keeping their order (order is rollout precedence).

    Raises:
        InvalidArgumentError: ``segments`` is None or empty
    """
    if not segments:
        raise InvalidArgumentError("No groups (or zero-length list) passed to parse_groups()!")
    return [parse_group(segment) for segment in segments]
