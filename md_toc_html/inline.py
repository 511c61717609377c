"""Inline Markdown span rewriting."""

from __future__ import annotations

from .constants import (
    BOLD_MARKER,
    BOLD_PATTERN,
    INLINE_CODE_PATTERN,
    ITALIC_PATTERN,
    LINK_PATTERN,
)


def format_inline(text: str) -> str:
    """Rewrite inline Markdown spans into HTML.

    Applies four independent substitutions in a fixed order: links, bold,
    italic, then inline code. Each pass replaces non-overlapping spans and
    does not look inside the markup produced by an earlier pass, so nested or
    escaped markers are not supported. The text is not HTML-escaped.

    Args:
        text: A single line or table cell.

    Returns:
        str: The text with inline spans rewritten.

    Examples:
        format_inline("See [docs](https://example.com)")
        # 'See <a href="https://example.com">docs</a>'
        format_inline("**bold**, *italic* and `code`")
        # '<strong>bold</strong>, <em>italic</em> and <code>code</code>'
    """
    text = LINK_PATTERN.sub(r'<a href="\2">\1</a>', text)
    text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
    text = ITALIC_PATTERN.sub(r"<em>\1</em>", text)
    text = INLINE_CODE_PATTERN.sub(r"<code>\1</code>", text)
    return text


def format_table_cell(cell: str) -> str:
    """Trim horizontal whitespace around a table cell, then format it inline."""
    return format_inline(cell.strip(" \t"))


def clean_heading_text(text: str) -> str:
    """Remove bold markers from heading text.

    Heading text gets no other inline rewriting, so ``# **Title**`` renders
    as plain ``Title`` and seeds the id ``title``.
    """
    return text.replace(BOLD_MARKER, "")
