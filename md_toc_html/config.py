"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

@dataclass
class ConverterConfig:
    """Configuration for rendering a Markdown document to HTML.

    Attributes:
        toc_header: Heading shown above the table of contents.
        default_title: Page title used when the document has no headings.
        lang: Value of the ``lang`` attribute on the ``<html>`` element.
        preserve_unicode: Whether to keep Unicode letters and digits in heading ids.
        strict_ids: Whether suffixed heading ids are checked against every id
            already emitted, not only against their own base id.
        max_file_size: Maximum input size in bytes that will be processed.

    Examples:
        ConverterConfig(toc_header="Contents", preserve_unicode=True)
    """

    # Page
    toc_header: str = "Table of Contents"
    default_title: str = "Document"
    lang: str = "en"

    # Heading ids
    preserve_unicode: bool = False
    strict_ids: bool = False

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


def load_config(search_path: Path) -> ConverterConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.md-toc-html]`` table from `pyproject.toml` and the
    ``[md-toc-html]`` or ``[tool.md-toc-html]`` table from `.md-toc-html.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ConverterConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "md-toc-html")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".md-toc-html.toml",
            table_paths=[("md-toc-html",), ("tool", "md-toc-html")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ConverterConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> ConverterConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ConverterConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return ConverterConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ConverterConfig) -> None:
    """Validate a `ConverterConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If text fields are empty or not strings, flags are not
            booleans, or the size limit is not a positive integer.
    """
    for key in ("toc_header", "default_title", "lang"):
        value = getattr(config, key)
        if not isinstance(value, str):
            raise ConfigError(f"`{key}` must be a string")
        if not value.strip():
            raise ConfigError(f"`{key}` must not be empty")

    for key in ("preserve_unicode", "strict_ids"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: ConverterConfig, **overrides: object) -> ConverterConfig:
    """Apply override values to a `ConverterConfig`.

    Values set to None are ignored, so unset CLI options keep the file value.

    Raises:
        TypeError: If an override name is not defined on `ConverterConfig`.

    Examples:
        updated = apply_overrides(config, toc_header="Contents", lang=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ConverterConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        ConverterConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path("docs"), toc_header="Contents")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
