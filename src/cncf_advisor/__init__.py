"""
CNCF Tech Advisor - MCP server launcher

Locates the platform-specific CNCF Tech Advisor MCP server artifact and runs
it over stdio for MCP hosts.
"""

__version__ = "1.0.0"

from cncf_advisor.core.config.models import LauncherConfig
from cncf_advisor.core.launch.supervisor import ServerLauncher

__all__ = ["LauncherConfig", "ServerLauncher", "__version__"]
