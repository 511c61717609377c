"""Filesystem helpers for md-toc-html."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, SCRIPT_FILENAME, STYLESHEET_FILENAME
from .exceptions import InputNotFoundError, InputUnreadableError, OutputWriteError

MAX_FILE_SIZE_ENV_VAR = "MD_TOC_HTML_MAX_FILE_SIZE"

# Undecodable bytes round-trip unchanged from input to output.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class SitePaths:
    """Locations of the three generated files.

    Attributes:
        html: The HTML page.
        stylesheet: ``styles.css`` next to the page.
        script: ``script.js`` next to the page.
    """

    html: Path
    stylesheet: Path
    script: Path


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed input size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MD_TOC_HTML_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def resolve_input(raw_path: str) -> Path:
    """Resolve the Markdown source path.

    Args:
        raw_path: User-supplied path (absolute, relative, or starting with ``~``).

    Returns:
        Path: Absolute path to an existing regular file.

    Raises:
        InputNotFoundError: If nothing exists at the path.
        InputUnreadableError: If the path exists but is not a regular file or
            cannot be resolved.

    Examples:
        resolve_input("docs/README.md")
    """
    path = Path(raw_path).expanduser()

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise InputNotFoundError(path) from error
    except OSError as error:
        raise InputUnreadableError(path, str(error)) from error

    if not resolved.is_file():
        raise InputUnreadableError(resolved, "not a regular file")

    return resolved


def read_markdown(filepath: Path, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read the whole Markdown source.

    Args:
        filepath: Path to the source file.
        max_file_size: Largest accepted size in bytes.

    Returns:
        str: The document text. Bytes that are not valid UTF-8 are kept as
            surrogate escapes and written back unchanged.

    Raises:
        InputNotFoundError: If the file disappeared.
        InputUnreadableError: If the file is too large or cannot be opened.
    """
    try:
        size = filepath.stat().st_size
    except FileNotFoundError as error:
        raise InputNotFoundError(filepath) from error
    except OSError as error:
        raise InputUnreadableError(filepath, str(error)) from error

    if size > max_file_size:
        raise InputUnreadableError(
            filepath, f"exceeds the maximum allowed size of {max_file_size} bytes"
        )

    try:
        with open(filepath, "r", encoding=ENCODING, errors=ENCODING_ERRORS) as file:
            return file.read()
    except FileNotFoundError as error:
        raise InputNotFoundError(filepath) from error
    except OSError as error:
        raise InputUnreadableError(filepath, str(error)) from error


def output_paths(html_path: Path) -> SitePaths:
    """Return where the page and its companion assets are written.

    Examples:
        output_paths(Path("site/index.html")).stylesheet  # Path("site/styles.css")
    """
    output_dir = html_path.parent
    return SitePaths(
        html=html_path,
        stylesheet=output_dir / STYLESHEET_FILENAME,
        script=output_dir / SCRIPT_FILENAME,
    )


def write_text_file(filepath: Path, content: str) -> None:
    """Write a file atomically.

    The content goes to a temporary file in the same directory, which then
    replaces the target. An existing target is left untouched on failure.

    Raises:
        OutputWriteError: If the temporary file cannot be created, written,
            or moved into place.
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=ENCODING,
            errors=ENCODING_ERRORS,
            delete=False,
            dir=filepath.parent,
            prefix=f".{filepath.name}.",
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        os.chmod(temp_path, 0o644)
        os.replace(temp_path, filepath)
    except OSError as error:
        raise OutputWriteError(filepath, str(error)) from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass


def write_site(paths: SitePaths, html: str, stylesheet: str, script: str) -> None:
    """Write the page, stylesheet, and script, in that order.

    Creates the output directory when needed. Files written before a failure
    are kept.

    Raises:
        OutputWriteError: Naming the first path that could not be written.
    """
    output_dir = paths.html.parent
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise OutputWriteError(output_dir, str(error)) from error

    write_text_file(paths.html, html)
    write_text_file(paths.stylesheet, stylesheet)
    write_text_file(paths.script, script)
