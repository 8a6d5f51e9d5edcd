from __future__ import annotations

import os
import sys
from pathlib import Path

# Ensure the repo root (containing `multimark/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

# Tests never write rotating log files into the repo.
os.environ.setdefault("MULTIMARK_DISABLE_FILE_LOG", "1")
