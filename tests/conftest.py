from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def pytest_collection_modifyitems(
    session: pytest.Session,
    config: pytest.Config,
    items: List[pytest.Item],
) -> None:
    """Refuse to run when two scenario ids collide."""
    del session
    del config

    counts: Dict[str, int] = {}
    for item in items:
        counts[item.nodeid] = counts.get(item.nodeid, 0) + 1

    duplicates = sorted(nodeid for nodeid, count in counts.items() if count > 1)

    if duplicates:
        lines = "\n".join(f"- {nodeid}" for nodeid in duplicates)
        raise pytest.UsageError(f"Duplicate scenario ids:\n{lines}")
