"""Startup and terminal rendering helpers."""

from cirrus.cli.bootstrap import StartupReport, configure_logging, run_startup
from cirrus.cli.rendering import (
    render_auth_outcome,
    render_startup_report,
    render_tool_result,
)

__all__ = [
    "StartupReport",
    "configure_logging",
    "render_auth_outcome",
    "render_startup_report",
    "render_tool_result",
    "run_startup",
]
