"""Command-line interface."""

from __future__ import annotations

from auto_release.cli.app import app, main

__all__ = ["app", "main"]
