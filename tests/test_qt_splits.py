from __future__ import annotations

from pathlib import Path

from conftest import group, layout_json
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QSplitter, QWidget

from desktop_engine.desktop import build_desktop_strict
from desktop_engine.document import LayoutDocument
from desktop_engine.orientation import Orientation
from desktop_engine.view_registry import ViewRegistry
from gui.app import create_desktop_window
from gui.panels import make_placeholder_panel, register_placeholder_panels
from gui.qt_splits import QtSplitFactory
from gui.settings_store import GuiSettings


def test_factory_builds_splitter_with_orientation(qapp) -> None:
    widgets = [QWidget(), QWidget(), QWidget()]
    splitter = QtSplitFactory().create(Orientation.HORIZONTAL, widgets)

    assert isinstance(splitter, QSplitter)
    assert splitter.orientation() == Qt.Horizontal
    assert splitter.count() == 3
    assert [splitter.widget(i) for i in range(3)] == widgets

    vertical = QtSplitFactory().create(Orientation.VERTICAL, [QWidget(), QWidget()])
    assert vertical.orientation() == Qt.Vertical


def test_factory_applies_splitter_options(qapp) -> None:
    default = QtSplitFactory().create(Orientation.HORIZONTAL, [QWidget(), QWidget()])
    assert default.childrenCollapsible() is False

    splitter = QtSplitFactory(children_collapsible=True, handle_width=9).create(
        Orientation.VERTICAL, [QWidget(), QWidget()]
    )
    assert splitter.childrenCollapsible() is True
    assert splitter.handleWidth() == 9


def test_factory_builds_empty_splitter(qapp) -> None:
    splitter = QtSplitFactory().create(Orientation.HORIZONTAL, [])
    assert isinstance(splitter, QSplitter)
    assert splitter.count() == 0


def test_desktop_resolves_to_nested_splitters(qapp) -> None:
    registry = ViewRegistry()
    a, b, c = QLabel("a"), QLabel("b"), QLabel("c")
    registry.register("A", a)
    registry.register("B", b)
    registry.register("C", c)

    text = layout_json(
        desktops=[{"name": "D", "viewGroup": "outer"}],
        views=["A", "B", "C"],
        view_groups=[
            group("inner", "vertical", ("view", "B"), ("view", "C")),
            group("outer", "horizontal", ("view", "A"), ("viewGroup", "inner")),
        ],
    )
    desktop = build_desktop_strict(
        "D", LayoutDocument.from_string(text), registry=registry, split_factory=QtSplitFactory()
    )
    region = desktop.region()

    assert isinstance(region, QSplitter)
    assert region.orientation() == Qt.Horizontal
    assert region.widget(0) is a
    inner = region.widget(1)
    assert isinstance(inner, QSplitter)
    assert inner.orientation() == Qt.Vertical
    assert [inner.widget(i) for i in range(inner.count())] == [b, c]


def test_placeholder_panel_holds_named_button(qapp) -> None:
    panel = make_placeholder_panel("redButton")
    assert panel.objectName() == "redButton"
    button = panel.findChild(QPushButton)
    assert button is not None
    assert button.text() == "redButton"


def test_register_placeholders_keeps_existing_widgets(qapp) -> None:
    registry = ViewRegistry()
    existing = QLabel("mine")
    registry.register("A", existing)

    added = register_placeholder_panels(registry, ["A", "B", "B"])

    assert added == ["B"]
    assert registry.resolve("A") is existing
    assert registry.resolve("B") is not None


def test_window_shows_notice_for_unknown_desktop(qapp, tmp_path: Path) -> None:
    text = layout_json(
        desktops=[{"name": "D", "viewGroup": "G"}],
        views=["A"],
        view_groups=[group("G", "horizontal", ("view", "A"))],
    )
    window = create_desktop_window(
        LayoutDocument.from_string(text),
        "other",
        registry=ViewRegistry(),
        settings=GuiSettings.defaults(),
        data_root=tmp_path,
    )
    assert window.region is None
    assert window.findChild(QLabel).text() == "Nothing to display"


def test_window_uses_placeholders_for_declared_views(qapp, tmp_path: Path) -> None:
    text = layout_json(
        desktops=[{"name": "D", "viewGroup": "G"}],
        views=["A", "B"],
        view_groups=[group("G", "vertical", ("view", "A"), ("view", "B"))],
    )
    registry = ViewRegistry()
    window = create_desktop_window(
        LayoutDocument.from_string(text),
        "D",
        registry=registry,
        settings=GuiSettings.defaults(),
        data_root=tmp_path,
    )
    assert isinstance(window.region, QSplitter)
    assert window.region.count() == 2
    assert window.region.widget(0) is registry.resolve("A")
