"""
splitdesk GUI app.

Shows one desktop of a layout document as nested splitters.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from desktop_engine.data_models import LayoutSpec
from desktop_engine.desktop import Desktop, build_desktop
from desktop_engine.document import LayoutDocument
from desktop_engine.errors import DesktopBuildError
from desktop_engine.view_registry import ViewRegistry
from gui.panels import register_placeholder_panels
from gui.qt_splits import QtSplitFactory
from gui.settings_store import GuiSettings, save_gui_settings

_log = logging.getLogger(__name__)


class DesktopWindow(QWidget):
    """
    Main window showing a desktop's region.

    Responsibilities
    ----------------
    - Place the resolved root region as the only content of the window
    - Show a notice when the desktop is missing or resolves to no region
    - Persist window size and the shown desktop on close
    """

    def __init__(
        self,
        desktop: Desktop | None,
        *,
        settings: GuiSettings,
        data_root: Path | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._data_root = data_root

        title = "splitdesk" if desktop is None else f"splitdesk - {desktop.name}"
        self.setWindowTitle(title)
        self.resize(settings.window_width, settings.window_height)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        region = desktop.region() if desktop is not None else None
        if region is None:
            notice = QLabel("Nothing to display")
            notice.setAlignment(Qt.AlignCenter)
            notice.setStyleSheet("color: #666;")
            root.addWidget(notice, 1)
            self.region = None
        else:
            root.addWidget(region, 1)
            self.region = region

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """
        Persist the window size before closing.

        Parameters
        ----------
        event:
            Qt close event.
        """
        try:
            settings = replace(
                self._settings,
                window_width=self.width(),
                window_height=self.height(),
            )
            save_gui_settings(data_root=self._data_root, settings=settings)
        except OSError as exc:
            _log.warning("Could not save GUI settings: %s", exc)
        finally:
            super().closeEvent(event)


def create_desktop_window(
    document: LayoutDocument,
    desktop_name: str,
    *,
    registry: ViewRegistry,
    settings: GuiSettings,
    data_root: Path | None = None,
    placeholders: bool = True,
) -> DesktopWindow:
    """
    Build a desktop and wrap it in a window.

    Parameters
    ----------
    document:
        Parsed layout document.
    desktop_name:
        Desktop to show.
    registry:
        Registry holding host widgets.
    settings:
        Settings used for the initial window size and saved on close.
    data_root:
        Settings directory override.
    placeholders:
        Register a placeholder panel for every declared view without a widget.

    Returns
    -------
    DesktopWindow
        The window, not yet shown. It shows a notice if the build failed.
    """
    if placeholders:
        try:
            names = [v.name for v in LayoutSpec.from_document(document).views]
        except DesktopBuildError:
            names = []
        added = register_placeholder_panels(registry, names)
        if added:
            _log.info("Registered placeholder panels: %s", ", ".join(added))

    desktop = build_desktop(desktop_name, document, registry=registry, split_factory=QtSplitFactory())
    return DesktopWindow(desktop, settings=settings, data_root=data_root)


def run_desktop_app(
    layout_path: Path,
    desktop_name: str,
    *,
    settings: GuiSettings,
    data_root: Path | None = None,
    registry: ViewRegistry | None = None,
    placeholders: bool = True,
) -> int:
    """
    Run the GUI for one desktop.

    Raises
    ------
    DocumentParseError
        If the layout document cannot be read.

    Returns
    -------
    int
        Qt application exit code.
    """
    document = LayoutDocument.from_file(layout_path)

    app = QApplication.instance() or QApplication(sys.argv)
    w = create_desktop_window(
        document,
        desktop_name,
        registry=registry if registry is not None else ViewRegistry(),
        settings=replace(settings, layout_path=layout_path, desktop_name=desktop_name),
        data_root=data_root,
        placeholders=placeholders,
    )
    w.show()
    return app.exec()
