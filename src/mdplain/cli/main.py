"""Command-line interface for mdplain."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdplain import __version__
from mdplain.core.engine import ConversionEngine
from mdplain.core.rules import PIPELINE, RULE_NAMES
from mdplain.models.config import NormalizerConfig
from mdplain.models.result import ConversionResult
from mdplain.utils.logging import set_log_level

console = Console()
err_console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mdplain")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """mdplain - Strip Markdown down to human-readable plain text."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="convert")
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output file path")
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--stats", "show_stats", is_flag=True, help="Print length statistics to stderr")
@click.option(
    "--disable",
    "disabled_rules",
    multiple=True,
    type=click.Choice(RULE_NAMES),
    help="Skip a pipeline rule (repeatable)",
)
@click.option("-q", "--quiet", is_flag=True, help="Suppress status output")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def convert_cmd(
    files: tuple[str, ...],
    output: Optional[str],
    output_format: str,
    show_stats: bool,
    disabled_rules: tuple[str, ...],
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert Markdown files to plain text.

    Reads STDIN when no FILES are given or a FILE is "-".

    Examples:

        mdplain convert README.md

        mdplain convert docs/*.md -o notes.txt

        cat README.md | mdplain convert -f json --stats
    """
    if verbose:
        set_log_level("DEBUG")

    config = NormalizerConfig(disabled_rules=list(disabled_rules))
    engine = ConversionEngine(config)

    results: list[ConversionResult] = []
    for source in files or ("-",):
        if source == "-":
            text = click.get_text_stream("stdin").read()
            result = engine.convert(text, filename="<stdin>")
        else:
            result = engine.convert_file(source)
        results.append(result)

        if not result.success:
            err_console.print(f"[red]FAIL[/red] {escape(source)}: {escape(result.error or '')}")
        elif len(files) > 1 and not quiet:
            err_console.print(f"[green]OK[/green] {escape(source)}")

        if show_stats and result.stats:
            stats = result.stats
            err_console.print(
                f"{escape(result.filename or source)}: "
                f"{stats.original_length} -> {stats.cleaned_length} chars "
                f"({stats.reduction_percent}% reduction)"
            )

    output_content = _format_output(results, output_format)

    if output:
        Path(output).write_text(output_content, encoding="utf-8")
        if not quiet:
            err_console.print(f"[green]Output written to {escape(output)}[/green]")
    else:
        click.echo(output_content)

    if any(not r.success for r in results):
        sys.exit(1)


@cli.command()
def rules() -> None:
    """List the rewrite rules in pipeline order."""
    table = Table(title="Rewrite Pipeline")
    table.add_column("#", justify="right")
    table.add_column("Rule", style="cyan")
    table.add_column("Description", style="green")

    for position, rule in enumerate(PIPELINE, 1):
        table.add_row(str(position), rule.name, escape(rule.description))

    console.print(table)


def _format_output(results: list[ConversionResult], output_format: str) -> str:
    """Format conversion results for output."""
    if output_format == "json":
        if len(results) == 1:
            return json.dumps(results[0].to_dict(), indent=2)
        return json.dumps([r.to_dict() for r in results], indent=2)

    converted = [r for r in results if r.success]
    if len(results) == 1:
        return converted[0].to_text() if converted else ""
    return "\n\n---\n\n".join(
        f"{r.filename}\n\n{r.to_text()}" for r in converted
    )


if __name__ == "__main__":
    cli()
