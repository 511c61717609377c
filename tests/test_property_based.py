from __future__ import annotations

import re
import string

from hypothesis import given
from hypothesis import strategies as st
from md_toc_html.converter import convert_markdown
from md_toc_html.models import HeadingRecord
from md_toc_html.page import build_page, render_page
from md_toc_html.slugify import IdAllocator, sanitize_id
from md_toc_html.toc import render_toc_tree

_ID_PATTERN = re.compile(r"^[a-z0-9_-]*$")


@given(st.text())
def test_sanitize_id_only_emits_allowed_characters(text: str):
    assert _ID_PATTERN.match(sanitize_id(text))


@given(st.text())
def test_sanitize_id_is_idempotent(text: str):
    slug = sanitize_id(text)
    assert sanitize_id(slug) == slug


@given(st.text(alphabet=string.ascii_letters + " _-", min_size=0, max_size=20), st.integers(1, 20))
def test_allocator_numbers_repeated_bases(text: str, count: int):
    allocator = IdAllocator()
    base = sanitize_id(text)

    ids = [allocator.allocate(base) for _ in range(count)]

    assert ids == [base] + [f"{base}-{n}" for n in range(1, count)]
    assert len(set(ids)) == count


@given(st.lists(st.text(alphabet=string.ascii_lowercase + "-1", max_size=8), max_size=30))
def test_strict_allocator_ids_are_unique(bases: list[str]):
    allocator = IdAllocator(strict=True)

    ids = [allocator.allocate(base) for base in bases]

    assert len(set(ids)) == len(ids)


@given(st.lists(st.integers(min_value=1, max_value=6), min_size=1, max_size=30))
def test_toc_tree_nesting_is_balanced(levels: list[int]):
    headings = [HeadingRecord(level, f"H{i}", f"h{i}") for i, level in enumerate(levels)]

    html = render_toc_tree(headings)

    depth = 0
    max_depth = 0
    for line in html.splitlines():
        if line == "<ul>":
            depth += 1
            max_depth = max(max_depth, depth)
        elif line == "</ul>":
            depth -= 1
        assert depth >= 0
    assert depth == 0
    assert max_depth == max(levels)
    assert html.count("<li>") == len(levels)


@given(
    st.lists(
        st.tuples(
            st.integers(min_value=1, max_value=6),
            st.text(alphabet=string.ascii_letters + string.digits + " ", min_size=1, max_size=16),
        ),
        max_size=20,
    )
)
def test_headings_are_recorded_in_document_order(data):
    content = "\n".join(f"{'#' * level} {title}" for level, title in data)

    result = convert_markdown(content)

    assert [heading.level for heading in result.headings] == [level for level, _ in data]
    assert [heading.text for heading in result.headings] == [title.strip() for _, title in data]


@given(st.text(max_size=300))
def test_convert_markdown_is_deterministic(content: str):
    assert convert_markdown(content) == convert_markdown(content)


@given(st.text(max_size=300))
def test_page_without_headings_has_no_toc(content: str):
    result = convert_markdown(content)
    html = build_page(result)

    if not result.headings:
        assert html == render_page("Document", "", result.body_html)
