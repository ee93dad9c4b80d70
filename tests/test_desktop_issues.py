from __future__ import annotations

import logging

import pytest
from conftest import group, layout_json

from desktop_engine.desktop import build_desktop, build_desktop_strict
from desktop_engine.document import LayoutDocument
from desktop_engine.errors import DanglingReferenceError
from desktop_engine.issues import IssueKind
from desktop_engine.view_registry import ViewRegistry


def _doc(view_groups: list[dict], *, views: list[str] | None = None, root: str = "G") -> LayoutDocument:
    return LayoutDocument.from_string(
        layout_json(
            desktops=[{"name": "D", "viewGroup": root}],
            views=views if views is not None else ["A", "B"],
            view_groups=view_groups,
        )
    )


def _kinds(document: LayoutDocument) -> list[IssueKind]:
    desktop = build_desktop_strict("D", document, registry=ViewRegistry())
    return [i.kind for i in desktop.issues]


def test_dangling_view_is_reported() -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"), ("view", "missing"))])
    desktop = build_desktop_strict("D", doc, registry=ViewRegistry())
    assert [c.name for c in desktop.root.children] == ["A"]
    assert len(desktop.issues) == 1
    issue = desktop.issues[0]
    assert issue.kind is IssueKind.DANGLING_VIEW
    assert issue.group == "G"
    assert issue.name == "missing"


def test_forward_reference_and_undeclared_group_are_distinguished() -> None:
    doc = _doc(
        [
            group("G", "horizontal", ("viewGroup", "H"), ("viewGroup", "nowhere")),
            group("H", "horizontal", ("view", "A")),
        ]
    )
    assert _kinds(doc) == [IssueKind.FORWARD_REFERENCE, IssueKind.DANGLING_VIEW_GROUP]


def test_self_reference_is_a_cycle() -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"), ("viewGroup", "G"))])
    assert _kinds(doc) == [IssueKind.CYCLE]


def test_unknown_child_type_is_reported() -> None:
    doc = _doc([group("G", "horizontal", ("widget", "A"))])
    assert _kinds(doc) == [IssueKind.UNKNOWN_CHILD_TYPE]


def test_child_type_is_case_sensitive() -> None:
    doc = _doc([group("G", "horizontal", ("View", "A"))])
    assert _kinds(doc) == [IssueKind.UNKNOWN_CHILD_TYPE]


def test_duplicate_view_is_reported_and_last_wins() -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"))], views=["A", "A"])
    desktop = build_desktop_strict("D", doc, registry=ViewRegistry())
    assert [i.kind for i in desktop.issues] == [IssueKind.DUPLICATE_VIEW]
    assert len(desktop.root.children) == 1


def test_duplicate_group_declarations_share_one_group() -> None:
    doc = _doc(
        [
            group("G", "horizontal", ("view", "A")),
            group("G", "vertical", ("view", "B")),
        ]
    )
    desktop = build_desktop_strict("D", doc, registry=ViewRegistry())
    assert desktop.root is not None
    assert [c.name for c in desktop.root.children] == ["A", "B"]
    assert desktop.issues[0].kind is IssueKind.DUPLICATE_VIEW_GROUP


def test_duplicate_group_names_cannot_build_a_cycle() -> None:
    doc = _doc(
        [
            group("G", "horizontal", ("view", "A")),
            group("H", "horizontal", ("viewGroup", "G"), ("view", "B")),
            group("G", "horizontal", ("viewGroup", "H")),
        ]
    )
    desktop = build_desktop_strict("D", doc, registry=ViewRegistry())
    assert IssueKind.CYCLE in [i.kind for i in desktop.issues]
    assert [c.name for c in desktop.root.children] == ["A"]


def test_unknown_root_is_reported() -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"))], root="nope")
    assert _kinds(doc) == [IssueKind.UNKNOWN_ROOT]


def test_strict_references_raise_on_forward_reference() -> None:
    doc = _doc(
        [
            group("G", "horizontal", ("viewGroup", "H")),
            group("H", "horizontal", ("view", "A")),
        ]
    )
    with pytest.raises(DanglingReferenceError) as excinfo:
        build_desktop_strict("D", doc, registry=ViewRegistry(), strict_references=True)
    assert "'H'" in str(excinfo.value)


def test_strict_references_tolerate_duplicates() -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"))], views=["A", "A"])
    desktop = build_desktop_strict("D", doc, registry=ViewRegistry(), strict_references=True)
    assert [i.kind for i in desktop.issues] == [IssueKind.DUPLICATE_VIEW]


def test_lenient_build_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    doc = _doc([group("G", "horizontal", ("view", "A"))])
    with caplog.at_level(logging.WARNING, logger="desktop_engine.desktop"):
        assert build_desktop("other", doc, registry=ViewRegistry()) is None
    assert "No desktop found with name 'other'" in caplog.text
