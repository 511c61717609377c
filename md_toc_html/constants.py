"""Constants used across the md-toc-html package."""

from __future__ import annotations

import re

from .config import ConverterConfig

DEFAULT_CONFIG = ConverterConfig()

# Block patterns
CODE_FENCE = "```"
CODE_FENCE_PATTERN = re.compile(r"^```(?P<info>.*)$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^\s*[-*_]{3,}\s*$")
TABLE_DIVIDER_PATTERN = re.compile(r"^(?=[^|]*\|)(?=[^-]*-)[\s|:-]+$")
HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<text>.*)$")

# Inline patterns, applied in this order
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*]+)\*")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
BOLD_MARKER = "**"

# Companion assets, written next to the HTML output
STYLESHEET_FILENAME = "styles.css"
SCRIPT_FILENAME = "script.js"

DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
