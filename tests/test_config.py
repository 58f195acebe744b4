"""Tests for mylint.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from mylint.config import ConfigError, MyLintConfig, load_config
from mylint.models import LintOptions


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, MyLintConfig)
    assert config.root == tmp_path.resolve()
    assert config.rules == LintOptions()
    assert config.extensions == [".md", ".markdown"]
    assert config.exclude_paths == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".mylint.yml"
    config_file.write_text(
        """
rules:
  math: false
  spacing: "yes"
extensions: [md, ".MDX"]
exclude_paths:
  - "templates/"
  - "*.draft.md"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.rules.rewrite_math is False
    assert config.rules.normalize_spacing is True
    assert config.extensions == [".md", ".mdx"]
    assert config.exclude_paths == ["templates/", "*.draft.md"]


def test_load_config_resolves_sibling_of_document(tmp_path: Path) -> None:
    (tmp_path / ".mylint.yml").write_text("rules:\n  spacing: off\n", encoding="utf-8")
    document = tmp_path / "note.md"
    document.write_text("# Note\n", encoding="utf-8")

    config = load_config(document)

    assert config.root == tmp_path.resolve()
    assert config.rules.normalize_spacing is False
    assert config.rules.rewrite_math is True


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".mylint.yml").write_text("   \n", encoding="utf-8")
    assert load_config(tmp_path).rules == LintOptions()


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".mylint.yml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".mylint.yml").write_text("rules: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
