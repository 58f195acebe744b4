"""Discovery of Markdown documents on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .config import DEFAULT_EXTENSIONS

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    ".obsidian",
    ".trash",
}


@dataclass(frozen=True)
class IgnoreRule:
    """One gitignore-style pattern, e.g. ``build/``, ``/drafts/`` or ``!keep.md``."""

    pattern: str
    negate: bool = False
    directory_only: bool = False
    anchored: bool = False

    @classmethod
    def parse(cls, line: str) -> IgnoreRule | None:
        """Parse a single ignore line; comments and blank lines yield ``None``."""
        text = line.strip()
        if not text or text.startswith("#"):
            return None
        negate = text.startswith("!")
        text = text.removeprefix("!")
        directory_only = text.endswith("/")
        text = text.rstrip("/")
        # A slash anywhere but the end pins the pattern to the scan root.
        anchored = "/" in text
        text = text.lstrip("/")
        if not text:
            return None
        return cls(text, negate=negate, directory_only=directory_only, anchored=anchored)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.anchored:
            return fnmatchcase(rel_path, self.pattern)
        return fnmatchcase(rel_path.rsplit("/", 1)[-1], self.pattern)


@dataclass
class IgnoreRules:
    """Ordered rules where the last matching rule decides, as in git."""

    rules: List[IgnoreRule] = field(default_factory=list)

    @classmethod
    def for_root(cls, root: Path, extra: Iterable[str] = ()) -> IgnoreRules:
        """Combine ``root/.gitignore`` with configured ``exclude_paths``."""
        ignores = cls()
        gitignore = root / ".gitignore"
        if gitignore.exists():
            ignores.extend(gitignore.read_text(encoding="utf-8").splitlines())
        ignores.extend(extra)
        return ignores

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            rule = IgnoreRule.parse(line)
            if rule is not None:
                self.rules.append(rule)

    def ignores(self, rel_path: str, is_dir: bool) -> bool:
        verdict = False
        for rule in self.rules:
            if rule.matches(rel_path, is_dir):
                verdict = not rule.negate
        return verdict


def _iter_files(root: Path, ignores: IgnoreRules) -> Iterator[Path]:
    # Pruning directories in place keeps os.walk out of ignored subtrees, so a
    # file below an ignored directory is never visited.
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        prefix = current_dir.relative_to(root).as_posix() + "/" if current_dir != root else ""

        dirnames[:] = [
            name
            for name in sorted(dirnames)
            if name not in _EXCLUDED_DIRS and not ignores.ignores(prefix + name, True)
        ]
        for filename in sorted(filenames):
            if not ignores.ignores(prefix + filename, False):
                yield current_dir / filename


class DocumentScanner:
    """Walks a directory tree collecting Markdown documents."""

    def scan(
        self,
        root: str | Path,
        *,
        extensions: Sequence[str] | None = None,
        exclude_paths: Sequence[str] = (),
    ) -> List[Path]:
        """Return documents under ``root``; a file root is returned as-is."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Path not found: {root}")
        if root_path.is_file():
            return [root_path]

        suffixes = {ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)}
        ignores = IgnoreRules.for_root(root_path, exclude_paths)

        return [
            path
            for path in _iter_files(root_path, ignores)
            if path.suffix.lower() in suffixes
        ]


__all__ = ["DocumentScanner", "IgnoreRule", "IgnoreRules"]
