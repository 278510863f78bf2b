"""Worked exercise lessons, terminal status messages and rust-project.json generation."""

__version__ = "5.4.1"