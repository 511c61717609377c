"""
Converts a Markdown file into an HTML page with a scroll-synced table of contents.
The page is written together with `styles.css` and `script.js` in the same directory.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, build_config
from .converter import convert_markdown
from .exceptions import ConversionError
from .filesystem import get_max_file_size, output_paths, read_markdown, resolve_input, write_site
from .page import SCRIPT, STYLESHEET, build_page

__all__ = ["cli"]


def _show_help(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    # Asking for help means no conversion took place, so it exits non-zero.
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help())
    ctx.exit(1)


@click.command(add_help_option=False)
@click.version_option(package_name="md-toc-html")
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help,
    help="Show this message and exit.",
)
@click.option(
    "-m",
    "--markdown",
    "markdown_path",
    required=True,
    type=click.Path(),
    help="Input Markdown file",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output HTML file",
)
@click.option("--toc-header", help="Heading shown above the table of contents")
@click.option("--default-title", help="Page title used when the document has no headings")
@click.option("--lang", help="Language code of the generated page")
@click.option(
    "--preserve-unicode",
    is_flag=True,
    help="Keep Unicode letters and digits in heading ids",
)
@click.option(
    "--strict-ids",
    is_flag=True,
    help="Also avoid clashes between suffixed ids and other headings",
)
def cli(
    markdown_path: str,
    output_path: str,
    toc_header: str | None = None,
    default_title: str | None = None,
    lang: str | None = None,
    preserve_unicode: bool = False,
    strict_ids: bool = False,
):
    """
    Convert a Markdown file into an HTML page with a table of contents.

    Args:
        markdown_path: Path to the Markdown source.
        output_path: Path of the HTML page to write.
        toc_header: Override for the heading above the table of contents.
        default_title: Override for the title used when there are no headings.
        lang: Override for the page language code.
        preserve_unicode: Keep Unicode characters in heading ids.
        strict_ids: Guarantee document-wide unique heading ids.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If the input cannot be read or an output file
            cannot be written.

    Examples:
        md-toc-html -m README.md -o site/index.html
    """
    try:
        source = resolve_input(markdown_path)
    except ConversionError as error:
        raise click.ClickException(str(error)) from error

    try:
        config = build_config(
            source.parent,
            toc_header=toc_header,
            default_title=default_title,
            lang=lang,
            # Unset flags leave the configured value alone.
            preserve_unicode=preserve_unicode or None,
            strict_ids=strict_ids or None,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_markdown(source, max_file_size)
    except ConversionError as error:
        raise click.ClickException(str(error)) from error

    result = convert_markdown(content, config)
    paths = output_paths(Path(output_path))

    try:
        write_site(paths, build_page(result, config), STYLESHEET, SCRIPT)
    except ConversionError as error:
        raise click.ClickException(str(error)) from error

    click.echo("Successfully generated:")
    click.echo(f"  HTML: {paths.html}")
    click.echo(f"  CSS: {paths.stylesheet}")
    click.echo(f"  JS: {paths.script}")


if __name__ == "__main__":
    cli()
