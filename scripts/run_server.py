#!/usr/bin/env python3
"""Run the citation formatting and search API.

Usage:
  python scripts/run_server.py
  python scripts/run_server.py --host 0.0.0.0 --port 8000
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from citeformat.core.settings import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the references server")
    parser.add_argument("--host", default=settings.server.host, help="Bind host")
    parser.add_argument("--port", type=int, default=settings.server.port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Enable reload (dev)")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("server").info("Server running on http://%s:%d", args.host, args.port)

    import uvicorn

    uvicorn.run("citeformat.api.server:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
