"""Rich views for startup results."""

from __future__ import annotations

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel

from cirrus.auth.types import AuthOutcome, AuthOutcomeKind
from cirrus.cli.bootstrap import StartupReport
from cirrus.tools.base import ToolResult


def render_auth_outcome(console: Console, outcome: AuthOutcome) -> bool:
    """Render an authentication outcome panel.

    Success and cancellation print nothing.

    Args:
        console: Rich console.
        outcome: Authentication outcome.

    Returns:
        ``True`` when rendered.
    """
    if outcome.kind == AuthOutcomeKind.INTERACTION_REQUIRED:
        console.print(
            Panel(
                "Silent sign-in is not possible. Run again without silent "
                "mode to log in interactively.",
                title="Login Required",
                border_style="bold yellow",
                expand=True,
            )
        )
        return True
    if outcome.kind == AuthOutcomeKind.FAILED:
        console.print(
            Panel(
                outcome.message or "",
                title="Login Failed",
                border_style="red",
                expand=True,
            )
        )
        return True
    return False


def render_startup_report(console: Console, report: StartupReport) -> None:
    """Render auth outcome and any loaded cloud settings.

    Args:
        console: Rich console.
        report: Startup report.
    """
    render_auth_outcome(console, report.auth)
    if report.remote_settings is not None:
        console.print(
            Panel(
                JSON.from_data(report.remote_settings),
                title="Cloud Settings",
                border_style="cyan",
                expand=True,
            )
        )


def render_tool_result(console: Console, result: ToolResult) -> None:
    """Render the human-facing part of a tool result.

    Args:
        console: Rich console.
        result: Tool result.
    """
    border = "red" if result.llm_content.startswith("Error:") else "green"
    console.print(Panel(result.return_display, border_style=border, expand=True))
