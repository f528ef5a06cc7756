"""CLI module for pgeo.

Provides the command-line interface for the named geometry operations and
the interactive console session.
"""

from __future__ import annotations

from pgeo.cli.console import ConsoleSession
from pgeo.cli.main import app

__all__ = ["ConsoleSession", "app"]
