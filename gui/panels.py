"""
Placeholder panels for views without a host-supplied widget.

Used by the ``show`` command so that any layout document can be previewed.
"""

from __future__ import annotations

from typing import Iterable

from PySide6.QtWidgets import QPushButton, QSizePolicy, QVBoxLayout, QWidget

from desktop_engine.view_registry import ViewRegistry


def make_placeholder_panel(name: str) -> QWidget:
    """
    Build a panel holding a single button that fills the panel.

    Parameters
    ----------
    name:
        View name, shown as the button text and used as the object name.

    Returns
    -------
    QWidget
        The panel.
    """
    panel = QWidget()
    panel.setObjectName(name)

    layout = QVBoxLayout(panel)
    layout.setContentsMargins(0, 0, 0, 0)

    button = QPushButton(name)
    button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
    layout.addWidget(button)

    return panel


def register_placeholder_panels(registry: ViewRegistry, names: Iterable[str]) -> list[str]:
    """
    Register a placeholder panel for every name not already registered.

    Returns
    -------
    list[str]
        Names that received a placeholder, in input order without repeats.
    """
    added: list[str] = []
    for name in names:
        if name in registry:
            continue
        registry.register(name, make_placeholder_panel(name))
        added.append(name)
    return added
