"""Run the Square MCP gateway with uvicorn."""

from __future__ import annotations

import argparse

from square_mcp.config import settings


def main(argv: list[str] | None = None) -> None:
    """CLI: square-mcp [--host HOST] [--port PORT]"""
    import uvicorn

    parser = argparse.ArgumentParser(description="Serve the Square MCP JSON-RPC endpoint")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    args = parser.parse_args(argv)

    # In-flight requests are not drained on SIGTERM/SIGINT
    uvicorn.run(
        "square_mcp.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=0,
    )


if __name__ == "__main__":
    main()
