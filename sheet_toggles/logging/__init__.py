"""Logging setup for sheet-toggles."""
