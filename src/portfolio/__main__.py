"""
Run the portfolio site with Flask's development server.

    python -m portfolio                  # 0.0.0.0:8080
    python -m portfolio --port 5000 --debug
"""

from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .app import create_app

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """CLI flags; env vars PORTFOLIO_HOST / PORTFOLIO_PORT set the defaults."""
    parser = argparse.ArgumentParser(
        prog="portfolio",
        description="Serve the portfolio site (About and Tools pages).",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("PORTFOLIO_HOST", DEFAULT_HOST),
        help=f"Interface to bind (default: {DEFAULT_HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORTFOLIO_PORT", DEFAULT_PORT)),
        help=f"Port to listen on (default: {DEFAULT_PORT}).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable the reloader and debugger.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
