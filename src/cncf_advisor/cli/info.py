"""
Static output for --help, --version and --download-url.
"""

import platform

from rich.console import Console

from cncf_advisor.core.config.models import LauncherConfig
from cncf_advisor.core.launch.models import PlatformKey

console = Console()


def _echo(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def help_text(config: LauncherConfig) -> str:
    return f"""
CNCF Tech Advisor MCP Server

USAGE:
  cncf-tech-advisor [OPTIONS]

OPTIONS:
  --version, -v    Show version information
  --help, -h       Show this help message
  --download-url   Show download URL for manual installation

ENVIRONMENT VARIABLES:
  CNCF_ADVISOR_LOG_LEVEL    Set log level (DEBUG, INFO, WARN, ERROR)
  CNCF_ADVISOR_DEBUG        Show launcher debug logs on stderr (1/true)
  JAVA_HOME                 Java installation path (for JAR mode)

  Variables can also be set in ~/.config/cncf-tech-advisor/.env

EXAMPLES:
  # Start the MCP server (stdio transport)
  cncf-tech-advisor

  # Start with debug logging
  CNCF_ADVISOR_LOG_LEVEL=DEBUG cncf-tech-advisor

  # Use with Claude Desktop
  # Add to claude_desktop_config.json:
  # {{
  #   "mcpServers": {{
  #     "cncf-tech-advisor": {{
  #       "command": "cncf-tech-advisor"
  #     }}
  #   }}
  # }}

SERVER FEATURES:
  - Search CNCF projects and technologies
  - Get personalized technology recommendations
  - Compare technologies based on criteria
  - Analyze technology trends
  - View adoption patterns and best practices
  - Plan technology roadmaps

FOR MORE INFORMATION:
  {config.documentation_url}
"""


def show_help(config: LauncherConfig) -> None:
    _echo(help_text(config))


def show_version(config: LauncherConfig, platform_key: PlatformKey, native: bool) -> None:
    """Print version, platform and native support details."""
    _echo(f"cncf-tech-advisor-mcp v{config.version}")
    _echo("")
    _echo(f"Platform: {platform_key.os} {platform_key.arch}")
    _echo(f"Python: {platform.python_version()}")
    _echo(f"Native support: {'Yes' if native else 'No'}")
    _echo("")
    _echo(f"Repository: {config.repository_url}")
    _echo(f"Documentation: {config.documentation_url}")


def show_download_url(config: LauncherConfig) -> None:
    _echo("# CNCF Tech Advisor MCP Server Download\n")
    _echo("## Pre-built Binaries\n")
    _echo(f"Download from: {config.releases_url}\n")
    _echo("## Docker Image\n")
    _echo(f"Pull: docker pull {config.docker_image}\n")


__all__ = ["help_text", "show_download_url", "show_help", "show_version"]
