"""Entry point for ``python -m prioritizer_mcp``."""

from prioritizer_mcp import run

run()
