"""
Layout document access.

Thin wrapper over the standard library JSON parser. Accessors return None when
a key is missing or holds a value of the wrong type, so callers decide what
absence means.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .errors import DocumentParseError


class LayoutDocument:
    """A parsed JSON object with typed, absence-aware accessors."""

    def __init__(self, payload: Mapping[str, Any]) -> None:
        self._payload = payload

    @classmethod
    def from_string(cls, text: str) -> LayoutDocument:
        """
        Parse a layout document from JSON text.

        Raises
        ------
        DocumentParseError
            If the text is not valid JSON or its root is not an object.
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Invalid JSON in layout document: {exc}") from exc
        return cls._from_payload(payload)

    @classmethod
    def from_file(cls, path: Path) -> LayoutDocument:
        """
        Read and parse a layout document from disk.

        Raises
        ------
        DocumentParseError
            If the file cannot be read, is not valid JSON, or its root is not an object.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentParseError(f"Failed to read layout document: {path}") from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Invalid JSON in layout document: {path}") from exc
        return cls._from_payload(payload)

    @classmethod
    def _from_payload(cls, payload: object) -> LayoutDocument:
        if not isinstance(payload, dict):
            raise DocumentParseError("Layout document root must be a JSON object.")
        return cls(payload)

    def get_array(self, key: str) -> list[Any] | None:
        value = self._payload.get(key)
        return value if isinstance(value, list) else None

    def get_object(self, key: str) -> LayoutDocument | None:
        value = self._payload.get(key)
        return LayoutDocument(value) if isinstance(value, dict) else None

    def get_string(self, key: str) -> str | None:
        value = self._payload.get(key)
        return value if isinstance(value, str) else None

    def objects(self, key: str) -> list[LayoutDocument] | None:
        """Return the object entries of array ``key``; non-object entries are ignored."""
        items = self.get_array(key)
        if items is None:
            return None
        return [LayoutDocument(item) for item in items if isinstance(item, dict)]
