"""Split orientation and its lenient parsing rules."""

from __future__ import annotations

from enum import Enum


class Orientation(str, Enum):
    """Direction in which a split container lays out its children."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: object) -> Orientation:
        """
        Parse an orientation value from a layout document.

        Parameters
        ----------
        value:
            Raw value. Strings are compared case-insensitively, without trimming.

        Returns
        -------
        Orientation
            HORIZONTAL for "horizontal" in any letter case, VERTICAL otherwise
            (including missing or non-string values).
        """
        if isinstance(value, Orientation):
            return value
        if isinstance(value, str) and value.lower() == cls.HORIZONTAL.value:
            return cls.HORIZONTAL
        return cls.VERTICAL
