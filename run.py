"""
Entry point for the polygon overlap analyzer.

Running this script with ``python run.py`` starts the FastAPI server
that exposes the analysis API.  The application defined in
``backend/app/main.py`` is imported after adjusting the Python path to
include the repository root.  Set ``OVERLAP_DEBUG=1`` to get per‑edge
debug output from the classifier and intersection solver.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import logging
import uvicorn

logging.basicConfig(
    level=logging.DEBUG if os.getenv("OVERLAP_DEBUG") else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """Run the Uvicorn server hosting the overlap analyzer."""
    # Make the repository root importable so ``backend`` resolves as a
    # package regardless of the current working directory.
    repo_root = Path(__file__).resolve().parent
    if str(repo_root) not in sys.path:
        sys.path.append(str(repo_root))

    # Import inside main() to avoid touching sys.path at import time.
    from backend.app.main import app  # type: ignore

    host = os.getenv("OVERLAP_HOST", "0.0.0.0")
    port = int(os.getenv("OVERLAP_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
