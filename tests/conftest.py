"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
provides language client doubles.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local lsphierarchy package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of lsphierarchy modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("lsphierarchy"):
        del sys.modules[module_name]


def _range(start_line: int, start_char: int, end_line: int, end_char: int) -> dict[str, Any]:
    return {
        "start": {"line": start_line, "character": start_char},
        "end": {"line": end_line, "character": end_char},
    }


def wire_item(name: str = "Animal", uri: str = "file:///a.ts", **fields: Any) -> dict[str, Any]:
    """Hierarchy item in wire form spanning lines 3-9, name selected on line 3."""
    item: dict[str, Any] = {
        "name": name,
        "kind": 5,
        "uri": uri,
        "range": _range(3, 0, 9, 1),
        "selectionRange": _range(3, 5, 3, 5 + len(name)),
    }
    item.update(fields)
    return item


@pytest.fixture
def make_wire_item() -> Callable[..., dict[str, Any]]:
    return wire_item


@pytest.fixture
def make_client() -> Callable[..., MagicMock]:
    """Factory for language clients whose send_request is an AsyncMock."""

    def factory(language_id: str = "go", result: Any = None) -> MagicMock:
        client = MagicMock()
        client.language_id = language_id
        client.send_request = AsyncMock(return_value=result)
        return client

    return factory


@pytest.fixture
def selector() -> list[dict[str, str]]:
    return [{"language": "go", "scheme": "file"}]
