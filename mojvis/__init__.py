"""Inbox eligibility and transport calendar rules for the MOJ VIS backend."""

__version__ = "0.1.0"
