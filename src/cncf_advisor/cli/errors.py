"""
Standardized error handling and exit codes for the launcher CLI.

All diagnostics go to stderr: while the server runs, stdout carries the
MCP protocol stream.
"""

from enum import IntEnum

from rich.console import Console

from cncf_advisor.core.config.models import LauncherConfig

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Exit codes produced by the launcher itself."""

    SUCCESS = 0
    """Clean exit, or help/version/download info shown."""

    GENERAL_ERROR = 1
    """Artifact missing, spawn failure or unexpected error."""

    SIGINT = 130
    """Interrupted (Ctrl+C) before the server was running."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
    """
    err_console.print(f"[red]Error:[/red] {problem}", highlight=False)

    if reason:
        err_console.print(f"[dim]{reason}[/dim]", highlight=False)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {solution}", highlight=False)


def print_artifact_not_found(config: LauncherConfig) -> None:
    """Print the ways to install the server when no artifact is present."""
    lines = [
        "# CNCF Tech Advisor MCP Server",
        "",
        "Binary not found. Please install using one of these methods:",
        "",
        "## Option 1: Docker (Recommended)",
        "```bash",
        "docker run -i --rm -p 8080:8080 \\",
        f"  {config.docker_image}",
        "```",
        "",
        "## Option 2: Build from Source",
        "```bash",
        f"git clone {config.repository_url}.git",
        f"cd {config.repository.split('/')[-1]}",
        "./mvnw package -DskipTests",
        "```",
        "",
        "## Option 3: Download Pre-built Binary",
        f"Visit: {config.releases_url}",
        "",
    ]
    for line in lines:
        err_console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_spawn_failed(message: str) -> None:
    """Print error when the server process could not be started."""
    err_console.print(
        f"Failed to start server: {message}", markup=False, highlight=False, soft_wrap=True
    )


def print_uncaught(error: BaseException) -> None:
    """Print an unexpected error before exiting."""
    err_console.print(
        f"Uncaught exception: {error}", markup=False, highlight=False, soft_wrap=True
    )


__all__ = [
    "ExitCode",
    "err_console",
    "print_artifact_not_found",
    "print_error",
    "print_spawn_failed",
    "print_uncaught",
]
