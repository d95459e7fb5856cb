"""
Shared pytest configuration.

Points the analysis history database at a throwaway SQLite file so
test runs never touch ``backend/storage``.  This must happen before
``app.services.db`` is imported, which is why it lives at module level.
"""

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="overlap-tests-"))
os.environ.setdefault("OVERLAP_DB_URL", f"sqlite:///{(_TMP_DIR / 'overlap.db').as_posix()}")
