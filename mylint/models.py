"""Core data models shared across mylint components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class LineKind(str, Enum):
    """Classification of a single physical line."""

    HEADING = "heading"
    LIST_ITEM = "list"
    BLANK = "blank"
    OTHER = "other"


@dataclass
class NormalizerState:
    """Output buffer plus the kind of the most recent non-blank line."""

    lines: List[str] = field(default_factory=list)
    last_meaningful: Optional[LineKind] = None

    def last_is_blank(self) -> bool:
        return bool(self.lines) and not self.lines[-1].strip()

    def last_is_content(self) -> bool:
        return bool(self.lines) and bool(self.lines[-1].strip())


@dataclass
class LintOptions:
    """Rule toggles passed explicitly to each lint call."""

    rewrite_math: bool = True
    normalize_spacing: bool = True


@dataclass(frozen=True)
class LintResult:
    """Linted text and whether it differs from the input."""

    text: str
    changed: bool


@dataclass
class FileOutcome:
    """Result of linting one document on disk."""

    path: Path
    status: str
    diff: str = ""
    dry_run: bool = False
