from __future__ import annotations

from md_toc_html.config import ConverterConfig
from md_toc_html.converter import convert_markdown
from md_toc_html.models import HeadingRecord
from md_toc_html.toc import render_toc, render_toc_tree


def _headings(*levels: int) -> list[HeadingRecord]:
    return [HeadingRecord(level, f"H{index}", f"h{index}") for index, level in enumerate(levels)]


def _item(index: int) -> str:
    return f'<li><a href="#h{index}" data-id="h{index}">H{index}</a></li>\n'


def _depths(html: str) -> list[int]:
    """Track list nesting depth after each opening or closing tag."""
    depth = 0
    depths = []
    for line in html.splitlines():
        if line == "<ul>":
            depth += 1
            depths.append(depth)
        elif line == "</ul>":
            depth -= 1
            depths.append(depth)
    return depths


def test_render_toc_tree_flat_headings():
    html = render_toc_tree(_headings(1, 1))

    assert html == "<ul>\n" + _item(0) + _item(1) + "</ul>\n"


def test_render_toc_tree_nests_and_unwinds():
    html = render_toc_tree(_headings(1, 2, 2, 1, 3))

    assert html == (
        "<ul>\n"
        + _item(0)
        + "<ul>\n"
        + _item(1)
        + _item(2)
        + "</ul>\n"
        + _item(3)
        + "<ul>\n<ul>\n"
        + _item(4)
        + "</ul>\n</ul>\n"
        + "</ul>\n"
    )


def test_render_toc_tree_depth_returns_to_zero_and_stays_bounded():
    levels = (1, 2, 2, 1, 3)
    html = render_toc_tree(_headings(*levels))

    depths = _depths(html)
    assert depths[-1] == 0
    assert max(depths) == max(levels)
    assert html.count("<ul>") == html.count("</ul>")


def test_render_toc_tree_skipped_levels_open_several_lists():
    html = render_toc_tree(_headings(1, 4))

    assert html == "<ul>\n" + _item(0) + "<ul>\n<ul>\n<ul>\n" + _item(1) + "</ul>\n</ul>\n</ul>\n</ul>\n"


def test_render_toc_tree_starting_deeper_than_one():
    html = render_toc_tree(_headings(2, 3, 2))

    assert html == (
        "<ul>\n<ul>\n" + _item(0) + "<ul>\n" + _item(1) + "</ul>\n" + _item(2) + "</ul>\n</ul>\n"
    )


def test_render_toc_tree_empty():
    assert render_toc_tree([]) == ""


def test_render_toc_wraps_tree():
    headings = convert_markdown("# Intro\n## Setup\n").headings

    html = render_toc(headings)

    assert html.startswith('<div class="toc">\n<h2>Table of Contents</h2>\n<ul>\n')
    assert '<li><a href="#setup" data-id="setup">Setup</a></li>' in html
    assert html.endswith("</ul>\n</div>\n")


def test_render_toc_uses_configured_header():
    html = render_toc(_headings(1), ConverterConfig(toc_header="Contents"))

    assert "<h2>Contents</h2>" in html


def test_render_toc_empty_produces_nothing():
    assert render_toc([]) == ""


def test_render_toc_links_match_heading_ids():
    result = convert_markdown("# Same\n## Same\n## Other\n")

    html = render_toc(result.headings)

    for heading in result.headings:
        assert f'href="#{heading.id}"' in html
        assert f'id="{heading.id}"' in result.body_html
