"""Core document value for caret_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

LINE_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable plain text with lines derived on demand.

    Lines are never cached; every accessor splits ``text`` again so a
    document is nothing more than its characters. An empty document still
    has one (empty) line.
    """

    text: str = ""

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self.text.split(LINE_SEPARATOR))

    @property
    def line_count(self) -> int:
        return self.text.count(LINE_SEPARATOR) + 1

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def splice(self, start: int, end: int, replacement: str = "") -> "Document":
        """Return a document with ``text[start:end]`` replaced."""

        return Document(self.text[:start] + replacement + self.text[end:])

    def __len__(self) -> int:
        return len(self.text)
