"""
CNCF Tech Advisor CLI - Main application entry point.

A single command: with --help, --version or --download-url it prints static
information; otherwise it starts the MCP server and exits with its code.
Unrecognized options and arguments are ignored.
"""

import asyncio
import logging
import os
import sys

import typer

from cncf_advisor.cli import info
from cncf_advisor.cli.errors import (
    ExitCode,
    print_artifact_not_found,
    print_error,
    print_spawn_failed,
    print_uncaught,
)
from cncf_advisor.core.config import LauncherConfig, load_user_env
from cncf_advisor.core.launch import (
    ArtifactKind,
    ArtifactNotFoundError,
    ServerLauncher,
    SpawnError,
)

logger = logging.getLogger(__name__)

DEBUG_ENV = "CNCF_ADVISOR_DEBUG"

app = typer.Typer(
    name="cncf-tech-advisor",
    help="CNCF Tech Advisor MCP server launcher (stdio transport)",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on")


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for the launcher.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_server(launcher: ServerLauncher) -> int:
    """
    Run the server to completion and return the launcher's exit code.

    Args:
        launcher: Launcher that has not been started yet

    Returns:
        The server's own exit code, or 1 if it could not be started
    """
    try:
        return asyncio.run(launcher.start())
    except ArtifactNotFoundError as e:
        logger.debug("Artifact lookup failed: %s", e)
        print_artifact_not_found(launcher.config)
        return ExitCode.GENERAL_ERROR
    except SpawnError as e:
        print_spawn_failed(str(e))
        if launcher.artifact is ArtifactKind.JAR and isinstance(e.cause, FileNotFoundError):
            print_error(
                f"Java runtime not found ({e.command})",
                reason="This platform runs the JAR build of the server, which needs Java",
                solution="install a Java runtime or set JAVA_HOME",
            )
        return ExitCode.GENERAL_ERROR
    except KeyboardInterrupt:
        return ExitCode.SIGINT
    except Exception as e:
        logger.debug("Unexpected launcher failure", exc_info=True)
        print_uncaught(e)
        return ExitCode.GENERAL_ERROR


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
def main(
    ctx: typer.Context,
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this help message",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information",
    ),
    download_url: bool = typer.Option(
        False,
        "--download-url",
        help="Show download URL for manual installation",
    ),
) -> None:
    """
    Start the CNCF Tech Advisor MCP server over stdio.

    Examples:
        cncf-tech-advisor                   # Start the server
        cncf-tech-advisor --version         # Platform and native support
        cncf-tech-advisor --download-url    # Where to get the server
    """
    load_user_env()
    setup_logging(debug_enabled())

    if ctx.args:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(ctx.args))

    config = LauncherConfig.from_env()

    if show_help:
        info.show_help(config)
        return

    launcher = ServerLauncher(config)

    if show_version:
        info.show_version(config, launcher.platform, launcher.is_native)
        return

    if download_url:
        info.show_download_url(config)
        return

    exit_code = run_server(launcher)
    if exit_code != 0:
        raise typer.Exit(int(exit_code))


def cli_main() -> None:
    """Console script entry point."""
    try:
        app()
    except Exception as e:
        print_uncaught(e)
        raise SystemExit(ExitCode.GENERAL_ERROR) from e


__all__ = ["app", "cli_main", "debug_enabled", "main", "run_server", "setup_logging"]
