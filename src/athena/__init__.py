"""Athena: a personal task tracker driven by short text commands."""

__version__ = "0.1.0"
