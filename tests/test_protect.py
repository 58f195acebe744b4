"""Tests for mylint.protect."""

from __future__ import annotations

import pytest

from mylint import protect
from mylint.protect import extract_protected, split_frontmatter


def test_split_frontmatter_keeps_delimiters_and_terminator() -> None:
    frontmatter, body = split_frontmatter("---\ntitle: t\n---\n# H\nSome text")
    assert frontmatter == "---\ntitle: t\n---\n"
    assert body == "# H\nSome text"


@pytest.mark.parametrize(
    "document, expected",
    [
        ("---\na: 1\n---", "---\na: 1\n---"),
        ("---\n---\nbody", "---\n---\n"),
        ("---  \na: 1\n---\t\nbody", "---  \na: 1\n---\t\n"),
        ("---\r\na: 1\r\n---\r\nbody", "---\r\na: 1\r\n---\r\n"),
        ("---\na: 1\n---x\nb: 2\n---\nbody", "---\na: 1\n---x\nb: 2\n---\n"),
    ],
)
def test_split_frontmatter_variants(document: str, expected: str) -> None:
    frontmatter, body = split_frontmatter(document)
    assert frontmatter == expected
    assert frontmatter + body == document


@pytest.mark.parametrize(
    "document",
    [
        "# H\ntext",
        "\n---\na: b\n---\n",
        " ---\na: b\n---\n",
        "---\ntitle: t\n# never closed",
    ],
)
def test_split_frontmatter_requires_document_start_and_closing_line(document: str) -> None:
    assert split_frontmatter(document) == ("", document)


def test_extract_protected_replaces_code_blocks() -> None:
    block = "```python\nprint('\\( x \\)')\n```"
    document = f"Intro\n{block}\nAfter"

    protected = extract_protected(document)

    assert protected.frontmatter == ""
    assert protected.blocks == [block]
    assert "```" not in protected.body
    assert protected.body == f"Intro\n{protected.token(0)}\nAfter"
    assert protected.restore(protected.body) == document


def test_extract_protected_indexes_blocks_in_order() -> None:
    document = "```a```\ntext\n```b\n\n```\n"
    protected = extract_protected(document)

    assert protected.blocks == ["```a```", "```b\n\n```"]
    assert protected.body == f"{protected.token(0)}\ntext\n{protected.token(1)}\n"
    assert protected.restore(protected.body) == document


def test_extract_protected_ignores_unterminated_fence() -> None:
    document = "text\n```\ncode without end"
    protected = extract_protected(document)
    assert protected.blocks == []
    assert protected.body == document


def test_extract_protected_skips_frontmatter_before_fences() -> None:
    document = "---\nnote: ```x```\n---\nbody ```y```"
    protected = extract_protected(document)
    assert protected.frontmatter == "---\nnote: ```x```\n---\n"
    assert protected.blocks == ["```y```"]


def test_nonce_avoids_collision_with_body(monkeypatch: pytest.MonkeyPatch) -> None:
    nonces = iter(["aaaa", "bbbb"])
    monkeypatch.setattr(protect.secrets, "token_hex", lambda _size: next(nonces))

    document = "literal %%MYLINT-CODE-aaaa-0%% text\n```code```"
    protected = extract_protected(document)

    assert protected.nonce == "bbbb"
    assert protected.body == "literal %%MYLINT-CODE-aaaa-0%% text\n%%MYLINT-CODE-bbbb-0%%"
    assert protected.restore(protected.body) == document


def test_restore_leaves_text_alone_when_placeholder_missing() -> None:
    protected = extract_protected("```x```")
    assert protected.restore("placeholder was dropped") == "placeholder was dropped"


def test_split_frontmatter_keeps_blank_lines_after_closing_delimiter() -> None:
    frontmatter, body = split_frontmatter("---\ntitle: t\n---\n\n# H\n\nSome text")
    assert frontmatter == "---\ntitle: t\n---\n\n"
    assert body == "# H\n\nSome text"

    frontmatter, body = split_frontmatter("---\r\na: 1\r\n--- \r\n\r\nbody")
    assert frontmatter == "---\r\na: 1\r\n--- \r\n\r\n"
    assert body == "body"


def test_restore_is_byte_identical_for_replacement_metacharacters() -> None:
    block = "```tex\n$$ x $$ and $& and $1\n\\1 \\g<0> \\\\ \\( y \\)\n```"
    document = f"before\n{block}\nafter"

    protected = extract_protected(document)

    assert protected.blocks == [block]
    assert protected.restore(protected.body) == document
