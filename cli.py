#!/usr/bin/env python3
"""CLI interface for Sieve Simple."""

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

from sieve_simple import load_config, load_tree, from_tree, SieveConversionError
from sieve_simple.simple.comment import parse_comparator_comment
from sieve_simple.simple.extractor import is_annotation_comment
from sieve_simple.tree import Comment

console = Console()


def read_tree(file) -> list:
    """Read a JSON dump of the parser output."""
    try:
        return json.load(file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="FILE")


def print_filter(simple_filter, output_format: str):
    data = simple_filter.to_dict()
    if output_format == "json":
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    console.print(Panel.fit(
        f"[bold blue]Match {data['Operator']['label']}[/] of the following conditions",
        title="Simple Filter"
    ))

    table = Table(title="Conditions")
    table.add_column("Type", style="cyan")
    table.add_column("Comparator", style="white")
    table.add_column("Values", style="yellow")
    for condition in data["Conditions"]:
        table.add_row(
            condition["Type"]["label"] or "-",
            condition["Comparator"]["label"],
            escape(", ".join(condition["Values"])) or "-",
        )
    console.print(table)

    actions = data["Actions"]
    console.print("\n[bold]Actions:[/]")
    console.print(f"  File into: {escape(', '.join(actions['FileInto'])) or '-'}")
    console.print(f"  Mark read: {actions['Mark']['Read']} | Starred: {actions['Mark']['Starred']}")
    if "Vacation" in actions:
        console.print(f"  Vacation: {escape(actions['Vacation'])}")


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
@click.pass_context
def cli(ctx, config, verbose):
    """Sieve Simple - Convert parsed sieve scripts into simple filters."""
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")

    logging.basicConfig(
        level="DEBUG" if verbose else ctx.obj["config"].log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@cli.command()
@click.argument("file", type=click.File("r"))
@click.option("--format", "output_format", type=click.Choice(["json", "table"]), default=None,
              help="Output format (defaults to the config file setting)")
@click.pass_context
def convert(ctx, file, output_format):
    """Convert a parsed sieve tree (JSON) into a simple filter."""
    config = ctx.obj["config"]
    tree = read_tree(file)

    try:
        simple_filter = from_tree(tree, config)
    except SieveConversionError as e:
        console.print(f"[red]Error:[/] {type(e).__name__}: {escape(str(e))}")
        ctx.exit(1)

    print_filter(simple_filter, output_format or config.output_format)


@cli.command()
@click.argument("file", type=click.File("r"))
@click.pass_context
def check(ctx, file):
    """Check whether a parsed sieve tree can be edited as a simple filter."""
    tree = read_tree(file)

    try:
        from_tree(tree, ctx.obj["config"])
    except SieveConversionError as e:
        console.print(f"[red]✗ Not a simple filter:[/] {escape(str(e))}")
        ctx.exit(1)

    console.print("[green]✓ Simple filter[/]")


@cli.command()
@click.argument("file", type=click.File("r"))
@click.pass_context
def annotate(ctx, file):
    """Show the annotations declared in the filter's doc comment."""
    try:
        nodes = load_tree(read_tree(file))
        comments = [n for n in nodes if isinstance(n, Comment) and is_annotation_comment(n)]
        annotation = parse_comparator_comment(comments[-1] if comments else None)
    except SieveConversionError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(1)

    if annotation is None:
        console.print("[dim]No annotation comment found.[/]")
        return

    console.print(f"[bold]Type:[/] {annotation.type or '-'}")
    console.print(f"[bold]Comparators ({len(annotation.comparators)}):[/]")
    for index, comparator in enumerate(annotation.comparators):
        console.print(f"  {index}: {comparator}")


if __name__ == "__main__":
    cli()
