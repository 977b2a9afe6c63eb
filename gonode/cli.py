"""gonode CLI — generate Node.js addon bindings for Go functions."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gonode import __version__
from gonode.errors import GonodeError

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """gonode — build Node.js addons from Go.

    Finds Go functions marked with an //export comment and writes a C++
    addon wrapper plus TypeScript declarations for them.
    """


def _load(project_dir: str, config_path: str | None):
    from gonode.utils.config import find_config, load_config

    return load_config(config_path or find_config(project_dir))


# ── Generate ─────────────────────────────────────────────────────────


@main.command()
@click.option("--dir", "project_dir", default=".", help="Project directory containing .gonode.yaml")
@click.option("--config", "config_path", default=None, help="Configuration file (default: <dir>/.gonode.yaml)")
@click.option("--output", "-o", default=None, help="Override the configured output directory")
def generate(project_dir: str, config_path: str | None, output: str | None):
    """Generate the C++ addon and TypeScript declarations."""
    from gonode.pipeline import run_pipeline
    from gonode.utils.reporter import ConsoleReporter

    console.print(f"\n[bold blue]gonode[/] — Generating bindings in: {escape(project_dir)}\n")
    reporter = ConsoleReporter(console)

    try:
        config = _load(project_dir, config_path)
        if output is not None:
            config.output_dir = output
        result = run_pipeline(Path(project_dir), config, reporter)
    except GonodeError as e:
        reporter.error(str(e))
        console.print("\n[red]Generation failed. No files were written.[/]")
        raise SystemExit(1)

    if result.generated:
        console.print(
            f"\n[green]Generated bindings for {len(result.functions)} function(s).[/]"
        )


# ── Inspect ──────────────────────────────────────────────────────────


@main.command()
@click.option("--dir", "project_dir", default=".", help="Project directory containing .gonode.yaml")
@click.option("--config", "config_path", default=None, help="Configuration file (default: <dir>/.gonode.yaml)")
def inspect(project_dir: str, config_path: str | None):
    """Show the exported functions that would be bound, without writing anything."""
    from gonode.generators.typescript_generator import render_type
    from gonode.pipeline import extract_all
    from gonode.utils.file_scanner import discover_source_files

    try:
        config = _load(project_dir, config_path)
        files = discover_source_files(project_dir, config.files)
        functions = extract_all(files)
    except GonodeError as e:
        console.print(f"[red]x[/] {escape(str(e))}")
        raise SystemExit(1)

    if not functions:
        console.print("[yellow]No exported functions found.[/]")
        return

    table = Table(title=f"Exported functions ({len(functions)} found)")
    table.add_column("Name", style="cyan")
    table.add_column("Parameters")
    table.add_column("Returns", style="green")
    table.add_column("Source", style="dim")
    table.add_column("Documentation")

    for fn in functions:
        params = ", ".join(f"{p.name}: {render_type(p.type)}" for p in fn.parameters)
        table.add_row(
            fn.js_name,
            params,
            render_type(fn.return_type),
            f"{fn.source_file}:{fn.line}",
            fn.documentation.split("\n")[0][:60],
        )

    console.print(table)


if __name__ == "__main__":
    main()
