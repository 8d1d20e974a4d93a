"""
cppscan CLI

Command-line interface for the C/C++ scanner.
Provides commands for scanning sources, inspecting the include graph,
and previewing test input data files.

Commands:
    cppscan scan <path>...     Extract method prototypes and include dependencies
    cppscan graph <dir>        Show the include graph in build order
    cppscan data <csv>         Show the rows of a test input data file

Usage:
    $ cppscan scan ./src
    $ cppscan scan src/Foo.h src/Foo.cpp
    $ cppscan graph ./src
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from engine import __version__
from engine.errors import IncludeCycleError, ScanError
from engine.graph import build_include_graph
from engine.models import ScanResult
from engine.scan import discover_source_files, parse_source_files, scan_directory
from engine.tabular import parse_csv_file

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="cppscan",
    help="cppscan: extract method prototypes and include dependencies from C/C++ sources",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _expand_paths(paths: list[Path], exclude: list[str]) -> list[Path]:
    """Replace each directory with the supported files found under it."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(discover_source_files(path, exclude))
        else:
            files.append(path)
    return files


@app.command()
def scan(
    paths: list[Path] = typer.Argument(
        ...,
        help="Files or directories to scan",
        exists=True,
        resolve_path=True,
    ),
    exclude: list[str] = typer.Option(
        [],
        "--exclude",
        "-e",
        help="Glob pattern to skip inside directories (repeatable)",
    ),
) -> None:
    """
    Extract method prototypes and include dependencies.

    Header files (.h, .hpp, .hxx) are scanned for prototypes, translation
    units (.cpp, .cc, .cxx, .c) for #include directives. Any other file
    aborts the whole scan.
    """
    files = _expand_paths(paths, exclude)

    try:
        result = parse_source_files(files)
    except (ScanError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if result.methods:
        _print_methods_table(result)
    if result.dependencies:
        _print_dependencies_table(result)

    console.print()
    _print_scan_summary(result)

    if result.skipped:
        console.print(f"\n[dim]{result.skipped_count} blank or generated file(s) skipped:[/dim]")
        for path in result.skipped[:5]:
            console.print(f"   • [dim]{path}[/dim]")
        if result.skipped_count > 5:
            console.print(f"   [dim]... and {result.skipped_count - 5} more[/dim]")


@app.command()
def graph(
    directory: Path = typer.Argument(
        ...,
        help="Project directory to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    exclude: list[str] = typer.Option(
        [],
        "--exclude",
        "-e",
        help="Glob pattern to skip (repeatable)",
    ),
) -> None:
    """
    Show the include graph between classes in build order.

    Each class is listed after every project class it includes, with its
    transitive project dependencies and the libraries it needs.
    """
    try:
        result = scan_directory(directory, exclude)
    except (ScanError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    include_graph = build_include_graph(result.dependencies.values())

    try:
        order = include_graph.build_order()
    except IncludeCycleError:
        console.print("[bold yellow]⚠️  Include cycles found:[/bold yellow]")
        for cycle in include_graph.find_cycles():
            console.print(f"   • {' -> '.join(cycle + cycle[:1])}")
        raise typer.Exit(1)

    table = Table(title="Include Graph", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Class", style="cyan")
    table.add_column("Project dependencies")
    table.add_column("Libraries")

    for index, name in enumerate(order, start=1):
        known = include_graph.get_dependence(name) is not None
        table.add_row(
            str(index),
            name if known else f"[dim]{name}[/dim]",
            ", ".join(sorted(include_graph.get_project_dependencies(name, transitive=True))) or "-",
            ", ".join(sorted(include_graph.get_libraries(name, transitive=True))) or "-",
        )

    console.print(table)
    console.print(
        f"\n[dim]{include_graph.node_count} classes, {include_graph.edge_count} project includes[/dim]"
    )


@app.command()
def data(
    csv_file: Path = typer.Argument(
        ...,
        help="Comma-separated test input file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
) -> None:
    """
    Show the rows of a test input data file as they will be used.
    """
    try:
        rows = parse_csv_file(csv_file)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    except UnicodeDecodeError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(csv_file))}: {escape(str(e))}")
        raise typer.Exit(1)

    width = max((len(row) for row in rows), default=0)
    table = Table(title=csv_file.name, box=box.SIMPLE)
    table.add_column("Row", justify="right", style="dim")
    for column in range(width):
        table.add_column(f"Field {column + 1}")

    for index, row in enumerate(rows, start=1):
        # Ragged rows are padded for display only
        table.add_row(str(index), *row, *([""] * (width - len(row))))

    console.print(table)


# Helper functions for output formatting

def _print_methods_table(result: ScanResult) -> None:
    """Print every discovered prototype."""
    table = Table(title="Methods", box=box.ROUNDED)
    table.add_column("Class", style="cyan")
    table.add_column("Return type")
    table.add_column("Method", style="bold")
    table.add_column("Parameter types")

    for method in result.methods:
        table.add_row(
            method.class_name,
            method.return_type,
            method.method_name,
            ", ".join(method.param_types) or "[dim]-[/dim]",
        )

    console.print(table)


def _print_dependencies_table(result: ScanResult) -> None:
    """Print the include dependencies of every translation unit."""
    table = Table(title="Dependencies", box=box.ROUNDED)
    table.add_column("Class", style="cyan")
    table.add_column("Project")
    table.add_column("Libraries")

    for name in sorted(result.dependencies):
        dependence = result.dependencies[name]
        table.add_row(
            name,
            ", ".join(sorted(dependence.project_dependencies)) or "[dim]-[/dim]",
            ", ".join(sorted(dependence.library_dependencies)) or "[dim]-[/dim]",
        )

    console.print(table)


def _print_scan_summary(result: ScanResult) -> None:
    """Print a summary panel after scanning."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Files scanned", str(result.files_scanned))
    table.add_row("Methods found", str(result.method_count))
    table.add_row("Classes with includes", str(result.dependency_count))
    table.add_row("Skipped", str(result.skipped_count))
    table.add_row("Scan time", f"{result.scan_time_seconds:.2f}s")

    panel = Panel(table, title="[bold green]✓ Scan Complete[/bold green]", border_style="green")
    console.print(panel)


# Version and logging options
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log every file and declaration as it is scanned",
    ),
) -> None:
    """
    cppscan: extract method prototypes and include dependencies from C/C++ sources.
    """
    if version:
        console.print(f"[bold]cppscan[/bold] version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    _configure_logging(verbose)


if __name__ == "__main__":
    app()
