"""Command-line interface for inspecting plugin options and generating docs.

The Click application lives in :mod:`plugopt.cli.main` and works on the
built-in plugin catalog.
"""
from __future__ import annotations
