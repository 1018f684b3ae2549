"""mcp-tools CLI package.

Re-exports `main` (the click group):

    from mcp_tools.cli import main
"""

from mcp_tools.cli.main import main

__all__ = ["main"]
