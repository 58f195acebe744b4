"""Markdown normaliser for math delimiters and heading/list spacing."""

from .linter import MarkdownLinter, lint
from .models import FileOutcome, LineKind, LintOptions, LintResult

__all__ = [
    "FileOutcome",
    "LineKind",
    "LintOptions",
    "LintResult",
    "MarkdownLinter",
    "lint",
]
