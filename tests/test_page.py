from __future__ import annotations

from md_toc_html.config import ConverterConfig
from md_toc_html.converter import convert_markdown
from md_toc_html.page import SCRIPT, STYLESHEET, build_page, render_page


def test_render_page_links_companion_assets():
    html = render_page("Title", "", "<p>Body</p>\n")

    assert html.startswith("<!DOCTYPE html>\n")
    assert '<html lang="en">' in html
    assert "<title>Title</title>" in html
    assert '<link rel="stylesheet" href="styles.css">' in html
    assert '<script src="script.js"></script>' in html
    assert '<div class="content">\n<p>Body</p>\n' in html


def test_render_page_keeps_braces_in_content():
    html = render_page("T", "", "<pre><code>{x}\n</code></pre>\n")

    assert "{x}" in html


def test_build_page_uses_first_heading_as_title():
    result = convert_markdown("## Overview\n# Later\n")

    html = build_page(result)

    assert "<title>Overview</title>" in html
    assert html.index('<div class="toc">') < html.index('<div class="content">')


def test_build_page_without_headings_has_no_toc_markup():
    result = convert_markdown("Just text.\n")

    html = build_page(result)

    assert "<title>Document</title>" in html
    assert 'class="toc"' not in html
    assert "<ul>" not in html
    assert "Table of Contents" not in html


def test_build_page_uses_configured_defaults():
    config = ConverterConfig(default_title="Notes", lang="fr")

    html = build_page(convert_markdown(""), config)

    assert "<title>Notes</title>" in html
    assert '<html lang="fr">' in html


def test_assets_cover_toc_behaviour():
    assert ".toc a.active" in STYLESHEET
    assert "IntersectionObserver" in SCRIPT
    assert "history.pushState" in SCRIPT
