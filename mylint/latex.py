"""Rewrites LaTeX math delimiters into dollar math."""

from __future__ import annotations

import re

_DISPLAY_PATTERN = re.compile(r"\\\[(.*?)\\\]", re.DOTALL)
_INLINE_PATTERN = re.compile(r"\\\((.*?)\\\)", re.DOTALL)


def rewrite_display_math(text: str) -> str:
    return _DISPLAY_PATTERN.sub(lambda match: f"$${match.group(1).strip()}$$", text)


def rewrite_inline_math(text: str) -> str:
    return _INLINE_PATTERN.sub(lambda match: f"${match.group(1).strip()}$", text)


def rewrite_math(text: str) -> str:
    """Convert ``\\[...\\]`` to ``$$...$$`` and then ``\\(...\\)`` to ``$...$``.

    Display math is rewritten first so an inline pattern never consumes part of
    a display span. Unmatched delimiters are left as they are.
    """
    return rewrite_inline_math(rewrite_display_math(text))


__all__ = ["rewrite_display_math", "rewrite_inline_math", "rewrite_math"]
