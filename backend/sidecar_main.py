"""
Budget flow backend – standalone entry point.

Used when the backend is shipped as a sidecar process next to a desktop or
static frontend.  During development ``uvicorn budget_app.main:app --reload``
is used instead.

Startup protocol:
  1. A free OS port is discovered by binding to 127.0.0.1:0 (unless --port).
  2. "PORT:{port}" is printed to stdout (flushed) so the parent process knows
     where to poll /api/health.
  3. uvicorn starts the FastAPI app on that port.

Environment variables read by budget_app.state:
  BUDGET_2025_LIVE      – lock sliders and zero every default reduction
  BUDGET_DATASET        – dataset id from the registry
  BUDGET_DATASET_PATH   – JSON file replacing the registered dataset
  BUDGET_CORS_ORIGINS   – extra CORS origins, comma-separated
"""

from __future__ import annotations

import argparse
import logging
import socket

# Import the app object so bundlers follow the whole dependency tree.
from budget_app.main import app as _fastapi_app  # noqa: E402


def _find_free_port() -> int:
    """Bind to port 0, let the OS assign a free port, return it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the budget flow backend")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", default="info")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    port = args.port or _find_free_port()
    print(f"PORT:{port}", flush=True)

    import uvicorn

    uvicorn.run(
        _fastapi_app,
        host="127.0.0.1",
        port=port,
        workers=1,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
