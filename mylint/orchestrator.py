"""Pipeline orchestration for fix/check runs over documents on disk."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import DEFAULT_EXTENSIONS, MyLintConfig, load_config
from .linter import MarkdownLinter
from .logging import get_logger
from .models import FileOutcome, LintOptions
from .scanner import DocumentScanner

STATUS_UPDATED = "updated"
STATUS_UNCHANGED = "unchanged"
STATUS_SKIPPED = "skipped"


class Orchestrator:
    """Reads documents, lints them and writes back the ones that changed."""

    def __init__(self, scanner: DocumentScanner | None = None) -> None:
        self.scanner = scanner or DocumentScanner()
        self.logger = get_logger("orchestrator")

    def run_fix(self, paths: Iterable[str | Path], *, dry_run: bool = False) -> List[FileOutcome]:
        """Lint every document under ``paths`` and persist the changes."""
        outcomes: List[FileOutcome] = []
        for raw_path in paths:
            target = Path(raw_path).expanduser()
            if not target.exists():
                raise FileNotFoundError(f"Path not found: {raw_path}")
            config = load_config(target)
            documents = self.scanner.scan(
                target,
                extensions=config.extensions,
                exclude_paths=config.exclude_paths,
            )
            self.logger.debug("Found %d document(s) under %s", len(documents), target)
            for document in documents:
                outcomes.append(self.lint_file(document, config, dry_run=dry_run))
        return outcomes

    def run_check(self, paths: Iterable[str | Path]) -> List[FileOutcome]:
        """Report which documents would change without writing them."""
        return self.run_fix(paths, dry_run=True)

    def lint_file(
        self,
        path: Path,
        config: MyLintConfig | None = None,
        *,
        dry_run: bool = False,
    ) -> FileOutcome:
        extensions: Sequence[str] = config.extensions if config else DEFAULT_EXTENSIONS
        options = config.rules if config else LintOptions()

        if path.suffix.lower() not in extensions:
            self.logger.info("Skipping %s: not a Markdown document", path)
            return FileOutcome(path=path, status=STATUS_SKIPPED, dry_run=dry_run)

        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                original = handle.read()
        except UnicodeDecodeError:
            self.logger.warning("Skipping %s: not valid UTF-8 text", path)
            return FileOutcome(path=path, status=STATUS_SKIPPED, dry_run=dry_run)

        result = MarkdownLinter(options).apply(original)
        if not result.changed:
            self.logger.debug("No changes for %s", path)
            return FileOutcome(path=path, status=STATUS_UNCHANGED, dry_run=dry_run)

        diff_text = self._render_diff(original, result.text, path.name)
        if dry_run:
            self.logger.debug("Dry-run: %s would change", path)
            return FileOutcome(path=path, status=STATUS_UPDATED, diff=diff_text, dry_run=True)

        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(result.text)
        self.logger.info("Updated %s", path)
        return FileOutcome(path=path, status=STATUS_UPDATED, diff=diff_text, dry_run=False)

    @staticmethod
    def _render_diff(original: str, updated: str, name: str) -> str:
        diff = difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (updated)",
        )
        return "".join(diff)


__all__ = ["Orchestrator", "STATUS_SKIPPED", "STATUS_UNCHANGED", "STATUS_UPDATED"]
