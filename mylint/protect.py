"""Frontmatter and fenced code block protection."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass, field
from typing import List

from .logging import get_logger

_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:.*?\r?\n)?---\s*(?:\r?\n|\Z)",
    re.DOTALL,
)
_CODE_BLOCK_PATTERN = re.compile(r"```.*?```", re.DOTALL)

_TOKEN_FMT = "%%MYLINT-CODE-{nonce}-{index}%%"

logger = get_logger("protect")


@dataclass
class ProtectedDocument:
    """A document split into its frontmatter and a sentinel-bearing body."""

    frontmatter: str
    body: str
    blocks: List[str] = field(default_factory=list)
    nonce: str = ""

    def token(self, index: int) -> str:
        return _TOKEN_FMT.format(nonce=self.nonce, index=index)

    def restore(self, text: str) -> str:
        """Swap every sentinel in ``text`` back to its original code span."""
        restored = text
        for index, block in enumerate(self.blocks):
            token = self.token(index)
            if token not in restored:
                logger.warning("Code block placeholder %d was lost during linting", index)
                continue
            restored = restored.replace(token, block, 1)
        return restored


def split_frontmatter(document: str) -> tuple[str, str]:
    """Return ``(frontmatter, body)``; frontmatter is empty when absent."""
    match = _FRONTMATTER_PATTERN.match(document)
    if not match:
        return "", document
    return match.group(0), document[match.end():]


def extract_protected(document: str) -> ProtectedDocument:
    """Strip frontmatter and replace fenced code blocks with placeholders."""
    frontmatter, body = split_frontmatter(document)

    nonce = _new_nonce(body)
    blocks: List[str] = []

    def _stash(match: re.Match[str]) -> str:
        blocks.append(match.group(0))
        return _TOKEN_FMT.format(nonce=nonce, index=len(blocks) - 1)

    protected_body = _CODE_BLOCK_PATTERN.sub(_stash, body)
    logger.debug(
        "Protected %d code block(s)%s",
        len(blocks),
        " and frontmatter" if frontmatter else "",
    )
    return ProtectedDocument(
        frontmatter=frontmatter,
        body=protected_body,
        blocks=blocks,
        nonce=nonce,
    )


def _new_nonce(body: str) -> str:
    while True:
        nonce = secrets.token_hex(8)
        if f"%%MYLINT-CODE-{nonce}-" not in body:
            return nonce


__all__ = ["ProtectedDocument", "extract_protected", "split_frontmatter"]
