"""Qt split containers for resolved desktop regions."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QSplitter, QWidget

from desktop_engine.orientation import Orientation

_QT_ORIENTATION = {
    Orientation.HORIZONTAL: Qt.Horizontal,
    Orientation.VERTICAL: Qt.Vertical,
}


class QtSplitFactory:
    """
    SplitFactory producing ``QSplitter`` containers.

    Notes
    -----
    A QWidget has a single parent. Resolving the same desktop twice moves the
    leaf widgets into the newest splitter.
    """

    def __init__(self, *, children_collapsible: bool = False, handle_width: int | None = None) -> None:
        self._children_collapsible = children_collapsible
        self._handle_width = handle_width

    def create(self, orientation: Orientation, regions: Sequence[QWidget]) -> QSplitter:
        splitter = QSplitter(_QT_ORIENTATION[orientation])
        splitter.setChildrenCollapsible(self._children_collapsible)
        if self._handle_width is not None:
            splitter.setHandleWidth(self._handle_width)
        for region in regions:
            splitter.addWidget(region)
        return splitter
