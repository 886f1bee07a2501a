# stencil/components/cli/main.py
"""
Main command-line interface for Stencil.
"""
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from stencil import __version__
from stencil.api.emitter import (
    check_balanced, create_version_control, get_file_system, get_header_generator, split_name,
)
from stencil.components.emitter.persistence import PersistenceGate
from stencil.components.generation import GenerationReport, load_schema
from stencil.config import VcsConfig, config_manager
from stencil.core.registry import registry
from stencil.errors import StencilError
from stencil.utils.logging import get_logger, setup_logging

app = typer.Typer(help="Stencil: generate C++ headers from declaration schemas")
config_app = typer.Typer(help="Inspect or initialize the configuration")
app.add_typer(config_app, name="config")

logger = get_logger(__name__)
console = Console()


def version_callback(value: bool):
    """Display version information and exit."""
    if value:
        console.print(f"Stencil version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug logging"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Stencil: generate C++ headers from declaration schemas"""
    config_manager.config.debug = debug or config_manager.config.debug
    setup_logging(debug=config_manager.config.debug, log_to_file=config_manager.config.debug)


def _load_schema_or_exit(schema_path: Path):
    try:
        return load_schema(schema_path)
    except (StencilError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def _print_report(report: GenerationReport) -> None:
    table = Table(title="Generated files")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Notes")

    for result in report.results:
        notes = []
        if result.written:
            status = "[green]created[/green]" if result.created else "[green]updated[/green]"
            if result.checked_out:
                notes.append("checked out")
            if result.marked_for_add:
                notes.append("marked for add")
        else:
            status = f"[dim]skipped ({result.reason.value})[/dim]"
        if result.diagnostics:
            notes.append(f"[yellow]{len(result.diagnostics)} diagnostic(s)[/yellow]")
        table.add_row(str(result.path), status, ", ".join(notes))

    for failure in report.failures:
        table.add_row(str(failure.path), f"[bold red]failed ({failure.stage})[/bold red]", escape(failure.error))

    console.print(table)

    for result in report.results:
        for diagnostic in result.diagnostics:
            console.print(
                f"[yellow]Warning:[/yellow] {result.path}:{diagnostic.line_number}: {escape(diagnostic.message)}"
            )


@app.command()
def generate(
    schema: Path = typer.Argument(..., help="Schema file (.toml or .json) describing the files to generate"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Output root directory"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name for the export macro"),
    vcs: Optional[str] = typer.Option(None, "--vcs", help="Version control backend: none, git or perforce"),
):
    """Generate the files described by SCHEMA and commit changed ones."""
    generation_schema = _load_schema_or_exit(schema)
    config = config_manager.config

    if vcs:
        try:
            config.vcs = VcsConfig(backend=vcs, uses_checkout=config.vcs.uses_checkout)
        except ValidationError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e.errors()[0]['msg']))}")
            raise typer.Exit(1)

    version_control = registry.register("version_control", create_version_control(config, root))
    registry.register("persistence_gate", PersistenceGate(get_file_system(), version_control))

    generator = get_header_generator(project or generation_schema.project)
    report = generator.generate(generation_schema, root)
    _print_report(report)

    if not report.success:
        raise typer.Exit(1)


@app.command()
def preview(
    schema: Path = typer.Argument(..., help="Schema file (.toml or .json)"),
    check: bool = typer.Option(False, "--check", help="Fail when the output has structural problems"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name for the export macro"),
):
    """Print the generated files without writing them."""
    generation_schema = _load_schema_or_exit(schema)
    generator = get_header_generator(project or generation_schema.project)

    problems = 0
    for file_spec in generation_schema.files:
        document = generator.render(file_spec)
        console.rule(f"[bold cyan]{escape(file_spec.path)}")
        console.print(Syntax(document.text, "cpp", theme="monokai", line_numbers=True))

        for diagnostic in document.diagnostics:
            problems += 1
            console.print(f"[yellow]Warning:[/yellow] line {diagnostic.line_number}: {escape(diagnostic.message)}")
        if check:
            valid, error = check_balanced(document.text)
            if not valid:
                problems += 1
                console.print(f"[bold red]Error:[/bold red] {escape(error)}")

    if check and problems:
        raise typer.Exit(1)


@app.command("split-name")
def split_name_command(
    name: str = typer.Argument(..., help="Identifier to split, e.g. DisplayName"),
):
    """Show the human readable label derived from an identifier."""
    console.print(split_name(name))


@config_app.command("show")
def config_show():
    """Show the active configuration."""
    console.print_json(config_manager.config.model_dump_json(exclude_none=True))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing configuration file"),
):
    """Write the active configuration to the configuration file."""
    if config_manager.config_file.exists() and not force:
        console.print(f"Configuration already exists at {config_manager.config_file} (use --force to overwrite)")
        raise typer.Exit(1)
    path = config_manager.save_config()
    console.print(f"[green]Configuration saved to {path}[/green]")


if __name__ == "__main__":
    sys.exit(app())
