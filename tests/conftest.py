from __future__ import annotations

import json
import os
from typing import Any

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def layout_json(
    *,
    desktops: list[dict[str, Any]] | None = None,
    views: list[str] | None = None,
    view_groups: list[dict[str, Any]] | None = None,
) -> str:
    """Serialize a layout document from compact test arguments."""
    return json.dumps(
        {
            "desktops": desktops if desktops is not None else [],
            "views": [{"name": n} for n in (views or [])],
            "viewGroups": view_groups if view_groups is not None else [],
        }
    )


def group(name: str, orientation: str, *children: tuple[str, str]) -> dict[str, Any]:
    """Build a view group entry; children are (type, name) pairs."""
    return {
        "name": name,
        "orientation": orientation,
        "viewGroups": [{"type": t, "name": n} for t, n in children],
    }


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
