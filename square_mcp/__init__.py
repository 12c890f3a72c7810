"""Square MCP gateway — JSON-RPC tool calls forwarded to the Square REST API."""

__version__ = "1.0.0"
