"""Markdown lint pipeline: protect, rewrite math, normalise spacing, restore."""

from __future__ import annotations

from .latex import rewrite_math
from .logging import get_logger
from .models import LintOptions, LintResult
from .protect import extract_protected
from .spacing import SpacingNormalizer


class MarkdownLinter:
    """Applies the math and spacing rules outside frontmatter and code fences."""

    def __init__(
        self,
        options: LintOptions | None = None,
        normalizer: SpacingNormalizer | None = None,
    ) -> None:
        self.options = options or LintOptions()
        self.normalizer = normalizer or SpacingNormalizer()
        self.logger = get_logger("linter")

    def lint(self, markdown: str) -> str:
        protected = extract_protected(markdown)
        body = protected.body
        if self.options.rewrite_math:
            body = rewrite_math(body)
        if self.options.normalize_spacing:
            body = self.normalizer.normalize(body)
        return protected.frontmatter + protected.restore(body)

    def apply(self, markdown: str) -> LintResult:
        """Lint ``markdown`` and report whether anything changed."""
        linted = self.lint(markdown)
        changed = linted != markdown
        self.logger.debug("Lint %s", "changed document" if changed else "was a no-op")
        return LintResult(text=linted, changed=changed)


def lint(text: str, options: LintOptions | None = None) -> str:
    """Return the normalised form of ``text``."""
    return MarkdownLinter(options).lint(text)


__all__ = ["MarkdownLinter", "lint"]
