"""Anchor id generation for Markdown headings."""

from __future__ import annotations

import re
import string

_WHITESPACE_PATTERN = re.compile(r"\s")
_ASCII_ID_CHARACTERS = frozenset(string.ascii_lowercase + string.digits + "-_")


def sanitize_id(text: str, preserve_unicode: bool = False) -> str:
    """Turn heading text into a URL-safe anchor fragment.

    Lowercases the text, turns every whitespace character into a hyphen, then
    deletes every character that is not alphanumeric, a hyphen, or an
    underscore. Nothing is collapsed or trimmed, so ``"A  B"`` gives ``"a--b"``.

    Args:
        text: Heading text to convert.
        preserve_unicode: When True, keep any character Python considers
            alphanumeric instead of only ASCII letters and digits.

    Returns:
        str: The anchor fragment, possibly empty.

    Examples:
        sanitize_id("Hello World")  # "hello-world"
        sanitize_id("What's New?")  # "whats-new"
        sanitize_id("Café")  # "caf"
        sanitize_id("Café", preserve_unicode=True)  # "café"
    """
    slug = text.lower()
    slug = _WHITESPACE_PATTERN.sub("-", slug)

    if preserve_unicode:
        return "".join(ch for ch in slug if ch.isalnum() or ch in "-_")
    return "".join(ch for ch in slug if ch in _ASCII_ID_CHARACTERS)


class IdAllocator:
    """Hand out heading ids that do not repeat within one document.

    The first occurrence of a base id is returned unchanged. Each later
    occurrence gets ``-1``, ``-2``, ... appended, counted per base id.

    By default a suffixed id is not checked against later base ids, so a
    heading whose own text sanitizes to ``"intro-1"`` can clash with the
    second ``"Intro"``. With ``strict=True`` every emitted id is remembered
    and the counter keeps advancing until the candidate is free.

    Examples:
        allocator = IdAllocator()
        allocator.allocate("intro")  # "intro"
        allocator.allocate("intro")  # "intro-1"
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._counts: dict[str, int] = {}
        self._used: set[str] = set()

    def allocate(self, base_id: str) -> str:
        """Return the id to use for the next heading with `base_id`."""
        if base_id not in self._counts:
            self._counts[base_id] = 0
            candidate = base_id
            if self.strict and candidate in self._used:
                candidate = self._next_free(base_id)
        elif self.strict:
            candidate = self._next_free(base_id)
        else:
            self._counts[base_id] += 1
            candidate = f"{base_id}-{self._counts[base_id]}"

        self._used.add(candidate)
        return candidate

    def _next_free(self, base_id: str) -> str:
        count = self._counts[base_id]
        while True:
            count += 1
            candidate = f"{base_id}-{count}"
            if candidate not in self._used:
                self._counts[base_id] = count
                return candidate

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._used
