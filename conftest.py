"""Root conftest: loads .env.test before any module imports."""
from __future__ import annotations

import os
from pathlib import Path

_root = Path(__file__).resolve().parent
_env_test = _root / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())

# Keep the process-wide default directory away from the real home directory.
os.environ.setdefault("HISTORY_DIR", str(_root / ".pytest_history"))
