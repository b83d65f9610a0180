"""Core launcher logic, independent of the CLI."""
