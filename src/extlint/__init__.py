"""Lint-phase consistency checks for the browser extension sources."""

__version__ = "0.1.0"
