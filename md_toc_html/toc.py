"""Table of contents rendering."""

from __future__ import annotations

from collections.abc import Sequence

from .config import ConverterConfig
from .models import HeadingRecord


def render_toc_tree(headings: Sequence[HeadingRecord]) -> str:
    """Render headings as nested ``<ul>`` lists.

    Keeps a depth counter that starts at 1 for the outer list. Before each
    entry, lists are opened while the depth is below the heading level and
    closed while it is above it; after the last entry everything is closed
    again. Skipped levels are not an error: going from level 1 straight to
    level 4 opens three lists in a row.

    Args:
        headings: Headings in document order.

    Returns:
        str: The list markup, or an empty string when there are no headings.

    Examples:
        render_toc_tree([HeadingRecord(1, "Intro", "intro")])
        # '<ul>\\n<li><a href="#intro" data-id="intro">Intro</a></li>\\n</ul>\\n'
    """
    if not headings:
        return ""

    html = ["<ul>\n"]
    depth = 1

    for heading in headings:
        while depth < heading.level:
            html.append("<ul>\n")
            depth += 1

        while depth > heading.level:
            html.append("</ul>\n")
            depth -= 1

        html.append(f'<li><a href="#{heading.id}" data-id="{heading.id}">{heading.text}</a></li>\n')

    while depth > 1:
        html.append("</ul>\n")
        depth -= 1

    html.append("</ul>\n")
    return "".join(html)


def render_toc(headings: Sequence[HeadingRecord], config: ConverterConfig | None = None) -> str:
    """Render the sidebar table of contents.

    Wraps `render_toc_tree` in a ``<div class="toc">`` with the configured
    header. Returns an empty string when there are no headings, so a page
    without headings carries no TOC markup at all.
    """
    if not headings:
        return ""

    config = config or ConverterConfig()
    return (
        '<div class="toc">\n'
        f"<h2>{config.toc_header}</h2>\n"
        f"{render_toc_tree(headings)}"
        "</div>\n"
    )
