"""Feature toggles hosted in a spreadsheet.

Rows with ``Key`` / ``Value`` / ``Group`` columns are resolved into toggle
records with ordered rollout groups.
"""

__version__ = "0.1.0"
