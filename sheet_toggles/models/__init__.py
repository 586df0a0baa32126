"""Domain models for spreadsheet feature toggles.

Rows come in from a sheet, toggles and results go out to the caller.
"""

from .row import SheetRow
from .toggle import RolloutGroup, Toggle, ToggleResult

__all__ = [
    # Input models
    "SheetRow",
    # Output models
    "RolloutGroup",
    "Toggle",
    "ToggleResult",
]
