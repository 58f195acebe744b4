"""Blank-line normalisation around headings and list items."""

from __future__ import annotations

import re
from typing import List, Optional

from .models import LineKind, NormalizerState

_HEADING_PATTERN = re.compile(r"^\s*#{1,6}\s+")
_LIST_ITEM_PATTERN = re.compile(r"^\s*(?:[-*+]|\d+\.)\s+")
_LINE_BREAK_PATTERN = re.compile(r"\r?\n")
_BLANK_RUN_PATTERN = re.compile(r"\n{3,}")


def classify_line(line: str) -> LineKind:
    """Return the kind of a single line; headings win over list items."""
    if _HEADING_PATTERN.match(line):
        return LineKind.HEADING
    if _LIST_ITEM_PATTERN.match(line):
        return LineKind.LIST_ITEM
    if not line.strip():
        return LineKind.BLANK
    return LineKind.OTHER


def split_lines(text: str) -> List[str]:
    return _LINE_BREAK_PATTERN.split(text)


class SpacingNormalizer:
    """Enforces blank lines around headings and compacts list items.

    Rules, applied line by line with one line of lookahead:

    * a heading gets a blank line above it (unless it opens the document) and a
      blank line below it when the next input line has content;
    * blank lines between two list items are dropped;
    * prose following a list is separated from it by a blank line;
    * runs of blank lines collapse to one.
    """

    def normalize(self, text: str) -> str:
        lines = split_lines(text)
        state = NormalizerState()
        for index, line in enumerate(lines):
            next_line = lines[index + 1] if index + 1 < len(lines) else None
            self.feed(state, line, next_line)
        return self.finish(state)

    def feed(self, state: NormalizerState, line: str, next_line: Optional[str] = None) -> LineKind:
        """Apply one transition to ``state`` and return the kind of ``line``."""
        kind = classify_line(line)
        emitted = line.rstrip()

        if kind is LineKind.HEADING:
            if state.last_is_content():
                state.lines.append("")
            state.lines.append(emitted)
            state.last_meaningful = LineKind.HEADING
            if next_line is not None and next_line.strip():
                state.lines.append("")
        elif kind is LineKind.LIST_ITEM:
            if state.last_meaningful is LineKind.LIST_ITEM:
                while state.last_is_blank():
                    state.lines.pop()
            state.lines.append(emitted)
            state.last_meaningful = LineKind.LIST_ITEM
        elif kind is LineKind.BLANK:
            if not state.lines or state.last_is_content():
                state.lines.append("")
        else:
            if state.last_meaningful is LineKind.LIST_ITEM and state.last_is_content():
                state.lines.append("")
            state.lines.append(emitted)
            state.last_meaningful = LineKind.OTHER
        return kind

    @staticmethod
    def finish(state: NormalizerState) -> str:
        joined = "\n".join(state.lines)
        return _BLANK_RUN_PATTERN.sub("\n\n", joined).strip()


__all__ = ["SpacingNormalizer", "classify_line", "split_lines"]
