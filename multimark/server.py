"""HTTP server for the multimark API.

Run:
  python -m multimark.server --port 18080
Then POST markdown to:
  http://127.0.0.1:18080/api/v1/render
"""

from __future__ import annotations

import argparse
import sys

import uvicorn

from multimark.env import env_int


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="multimark.server", add_help=True)
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument(
        "--port",
        type=int,
        default=env_int("MULTIMARK_PORT", 18080),
        help="Bind port (default: 18080, or MULTIMARK_PORT)",
    )
    parser.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug"])
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    uvicorn.run(
        "multimark.api:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=bool(args.reload),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
