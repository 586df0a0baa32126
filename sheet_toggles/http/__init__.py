"""HTTP shell serving toggles over a single GET endpoint."""

from .app import create_app

__all__ = [
    "create_app",
]
