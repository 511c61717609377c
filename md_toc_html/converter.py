"""Markdown to HTML conversion."""

from __future__ import annotations

from .config import ConverterConfig
from .constants import (
    CODE_FENCE_PATTERN,
    HEADING_PATTERN,
    HORIZONTAL_RULE_PATTERN,
    TABLE_DIVIDER_PATTERN,
)
from .inline import clean_heading_text, format_inline, format_table_cell
from .models import BlockState, ConversionResult, ConverterContext, HeadingRecord
from .slugify import IdAllocator, sanitize_id


def split_table_row(line: str) -> list[str]:
    """Split a table line into formatted cells.

    One leading and one trailing pipe are dropped before splitting, and each
    cell is trimmed and formatted inline.

    Examples:
        split_table_row("| **A** | B |")  # ["<strong>A</strong>", "B"]
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    if not row:
        return []
    return [format_table_cell(cell) for cell in row.split("|")]


def render_table(rows: list[list[str]]) -> str:
    """Render buffered rows as a table, the first non-empty row as header cells."""
    html = ["<table>\n"]
    first_row = True
    for row in rows:
        if not row:
            continue
        tag = "th" if first_row else "td"
        cells = "".join(f"<{tag}>{cell}</{tag}>" for cell in row)
        html.append(f"<tr>{cells}</tr>\n")
        first_row = False
    html.append("</table>\n")
    return "".join(html)


def _flush_table(ctx: ConverterContext) -> None:
    """Emit and clear buffered table rows.

    Rows confirmed by a divider become a table. Rows that never saw a divider
    are plain text that happened to contain a pipe and are emitted as
    paragraphs.
    """
    if ctx.in_table:
        ctx.html.append(render_table(ctx.table_rows))
    else:
        for line in ctx.table_lines:
            _emit_paragraph(ctx, line)

    ctx.table_rows.clear()
    ctx.table_lines.clear()
    ctx.in_table = False


def _try_close_fence(ctx: ConverterContext, line: str) -> bool:
    """Handle a line inside a code block.

    Returns:
        bool: True when the line was consumed by the open code block, either
            as content or as the closing fence.
    """
    if ctx.state is not BlockState.IN_CODE_BLOCK:
        return False

    if CODE_FENCE_PATTERN.match(line):
        ctx.state = BlockState.NORMAL
        ctx.code_language = ""
        ctx.html.append("</code></pre>\n")
    else:
        ctx.html.append(f"{line}\n")
    return True


def _try_open_fence(ctx: ConverterContext, line: str) -> bool:
    """Detect the start of a fenced code block.

    Examples:
        _try_open_fence(ConverterContext(), "```python")  # True
    """
    if ctx.state is not BlockState.NORMAL:
        return False

    fence_match = CODE_FENCE_PATTERN.match(line)
    if not fence_match:
        return False

    _flush_table(ctx)

    info = fence_match.group("info").split()
    ctx.state = BlockState.IN_CODE_BLOCK
    ctx.code_language = info[0] if info else ""
    if ctx.code_language:
        ctx.html.append(f'<pre><code class="language-{ctx.code_language}">')
    else:
        ctx.html.append("<pre><code>")
    return True


def _try_horizontal_rule(ctx: ConverterContext, line: str) -> bool:
    if not HORIZONTAL_RULE_PATTERN.match(line):
        return False

    _flush_table(ctx)
    ctx.html.append("<hr>\n")
    return True


def _try_table_line(ctx: ConverterContext, line: str) -> bool:
    """Buffer table rows and consume dividers.

    Returns:
        bool: True when the line belongs to a table; False when it should be
            handled by the remaining rules.
    """
    if TABLE_DIVIDER_PATTERN.match(line):
        if ctx.in_table:
            # A second divider ends the table.
            _flush_table(ctx)
            return True
        if ctx.table_rows:
            ctx.in_table = True
            return True
        return False

    if "|" not in line:
        return False

    ctx.table_rows.append(split_table_row(line))
    ctx.table_lines.append(line)
    return True


def _try_heading(ctx: ConverterContext, line: str) -> bool:
    """Emit a heading element and record it for the TOC."""
    heading_match = HEADING_PATTERN.match(line)
    if not heading_match:
        return False

    level = len(heading_match.group("hashes"))
    text = clean_heading_text(heading_match.group("text")).rstrip()
    heading_id = ctx.ids.allocate(sanitize_id(text, ctx.preserve_unicode))

    ctx.headings.append(HeadingRecord(level=level, text=text, id=heading_id))
    ctx.html.append(f'<h{level} id="{heading_id}">{text}</h{level}>\n')
    return True


def _emit_paragraph(ctx: ConverterContext, line: str) -> None:
    formatted = format_inline(line)
    if formatted.strip():
        ctx.html.append(f"<p>{formatted}</p>\n")


def convert_markdown(content: str, config: ConverterConfig | None = None) -> ConversionResult:
    """Convert Markdown text to body HTML and the list of its headings.

    Walks the document one newline-delimited line at a time. Empty lines
    are skipped. Lines inside a fenced code block are copied verbatim until the
    next fence; outside them, whitespace-only lines are skipped as well.
    Outside code blocks the rules are tried in order: opening fence,
    horizontal rule, table divider or row, heading, and finally paragraph.
    Buffered table rows are flushed by the first line that is not part of the
    table and at the end of the input. A code block left open at the end of
    the input is not closed.

    The conversion never fails: malformed lines fall through to paragraphs.

    Args:
        content: The Markdown document.
        config: Configuration controlling heading ids. Defaults to a new
            `ConverterConfig` when omitted.

    Returns:
        ConversionResult: Body HTML and headings in document order.

    Examples:
        result = convert_markdown("# Title\\n\\nSome *text*.\\n")
        result.body_html  # '<h1 id="title">Title</h1>\\n<p>Some <em>text</em>.</p>\\n'
    """
    config = config or ConverterConfig()
    ctx = ConverterContext(
        preserve_unicode=config.preserve_unicode,
        ids=IdAllocator(strict=config.strict_ids),
    )

    # Only "\n" ends a line; form feeds and Unicode separators are content.
    for line in content.split("\n"):
        line = line.removesuffix("\r")
        if not line:
            continue

        if _try_close_fence(ctx, line):
            continue

        if not line.strip():
            continue

        if _try_open_fence(ctx, line):
            continue

        if _try_horizontal_rule(ctx, line):
            continue

        if _try_table_line(ctx, line):
            continue

        _flush_table(ctx)

        if _try_heading(ctx, line):
            continue

        _emit_paragraph(ctx, line)

    _flush_table(ctx)

    return ConversionResult(body_html="".join(ctx.html), headings=ctx.headings)
