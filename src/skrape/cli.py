"""Command line interface.

CLI module using Typer with Rich-formatted output for select, extract and validate
commands. All commands read local HTML files only.
"""

# ruff: noqa: B008

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install as install_rich_traceback

from skrape import __version__
from skrape.config import ParserConfig, load_config
from skrape.exceptions import ConfigError, SkrapeError
from skrape.extract import extract, load_document
from skrape.utils import setup_logging

install_rich_traceback(show_locals=True)

console = Console()

app = typer.Typer(
    name="skrape",
    help="skrape - query HTML files with CSS selectors",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"skrape version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """skrape - query HTML files with CSS selectors."""
    pass


@app.command()
def select(
    html_file: Path = typer.Argument(
        ...,
        help="HTML file to query",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    css_selector: str = typer.Argument(..., help="CSS selector, e.g. 'template slot'"),
    attribute: str | None = typer.Option(
        None,
        "--attr",
        "-a",
        help="Print this attribute instead of the element text",
    ),
    outer_html: bool = typer.Option(
        False,
        "--html",
        help="Print outer HTML instead of the element text",
    ),
    first: bool = typer.Option(
        False,
        "--first",
        help="Only print the first match",
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Resolve relative links against this URL",
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="File encoding"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose logging",
    ),
) -> None:
    """Print the elements of an HTML file matching a CSS selector.

    Exits with code 1 when nothing matches.
    """
    setup_logging(verbose=verbose)

    try:
        doc = load_document(html_file, ParserConfig(base_url=base_url, encoding=encoding))
        elements = doc.find_all(css_selector)
        if first:
            elements = elements[:1]

        if not elements:
            console.print(f"[yellow]No elements match[/yellow] {escape(css_selector)}")
            raise typer.Exit(code=1)

        for element in elements:
            if outer_html:
                value = element.outer_html
            elif attribute:
                value = element.attribute(attribute)
            else:
                value = element.text
            console.print(value, markup=False, highlight=False, soft_wrap=True)

    except typer.Exit:
        raise

    except Exception as e:
        console.print(f"[red]Query failed:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1) from None


@app.command(name="extract")
def extract_command(
    html_file: Path = typer.Argument(
        ...,
        help="HTML file to extract from",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to YAML extraction recipe",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose logging",
    ),
) -> None:
    """Extract the fields described by a YAML recipe from an HTML file."""
    setup_logging(verbose=verbose)

    try:
        recipe = load_config(config)
        doc = load_document(html_file, recipe.parser)
        result = extract(doc, recipe.fields)

        if as_json:
            console.print_json(json.dumps(result, ensure_ascii=False))
            return

        table = Table(title=recipe.name)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        for name, value in result.items():
            if isinstance(value, list):
                value = escape("\n".join(value)) if value else "[dim]none[/dim]"
            elif not value:
                value = "[dim]empty[/dim]"
            else:
                value = escape(value)
            table.add_row(name, value)

        console.print(table)

    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1) from None

    except SkrapeError as e:
        console.print(f"[red]Extraction failed:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1) from None

    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        else:
            console.print("[dim]Use --verbose to see full traceback[/dim]")
        raise typer.Exit(code=1) from None


@app.command()
def validate(
    config_path: Path = typer.Argument(
        ...,
        help="Path to YAML recipe to validate",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
) -> None:
    """Validate an extraction recipe.

    Checks YAML syntax and validates all fields against the schema.
    Displays detailed error messages if validation fails.
    """
    try:
        console.print(f"[cyan]Validating configuration:[/cyan] {config_path}")

        recipe = load_config(config_path)

        console.print("[green][OK] Configuration is valid![/green]\n")

        table = Table(title=recipe.name)
        table.add_column("Field", style="cyan")
        table.add_column("Selector", style="white")
        table.add_column("Reads", style="green")

        for rule in recipe.fields:
            reads = f"@{rule.attribute}" if rule.attribute else "text"
            if rule.multiple:
                reads += " (all)"
            table.add_row(rule.name, escape(rule.selector), reads)

        console.print(table)

    except ConfigError as e:
        console.print("[red][FAIL] Configuration validation failed:[/red]\n")
        console.print(escape(str(e)))
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()
