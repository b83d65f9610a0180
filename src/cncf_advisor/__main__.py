"""Allow running the launcher with ``python -m cncf_advisor``."""

from cncf_advisor.cli import cli_main

if __name__ == "__main__":
    cli_main()
