"""CLI module for georegion.

Provides command-line access to distance, buffering, containment and zone
lookup for ad-hoc checks and scripting.
"""

from __future__ import annotations

from georegion.cli.main import OutputFormat, app

__all__ = ["OutputFormat", "app"]
