"""
gohatch.cli - Command Line Interface
====================================

This module provides the command-line interface for gohatch using Typer.

Architecture
------------
    app (main entry point)
    ├── new      - Scaffold a new Go service
    ├── render   - Print a single rendered template
    └── list     - Show the available templates

Commands work both interactively (prompting for the package name) and
non-interactively. The --yes flag skips all prompts for CI usage.

Usage Examples
--------------
Interactive mode:
    $ gohatch new hello

Non-interactive mode:
    $ gohatch new hello --package github.com/acme/hello --yes

Preview a single file:
    $ gohatch render Dockerfile --app hello

See Also
--------
- generator.py: Project scaffolding
- renderer.py: Template rendering
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import questionary
import typer
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gohatch import __version__
from gohatch.errors import GoHatchError
from gohatch.generator import create_project
from gohatch.models import ProjectConfig, RenderConfig, TemplateName
from gohatch.renderer import placeholders, render


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="gohatch",
    help="Scaffold a new Go HTTP service skeleton.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

# Console for rich output
console = Console()


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]gohatch[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Go service scaffolding[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def prompt_package(default: str) -> str:
    """
    Interactively prompt for the Go module path.

    Parameters
    ----------
    default : str
        Suggested module path, usually the application name.

    Returns
    -------
    str
        The module path entered by the user.
    """
    result = questionary.text(
        "Go module path (e.g. github.com/you/app):",
        default=default,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]gohatch[/] - Go service scaffolding.

    Generates a Makefile, Dockerfile, go.mod, main.go and version package
    for a new HTTP service.

    [bold]Quick Start:[/]

        gohatch new hello --package github.com/acme/hello
    """


# =============================================================================
# New Command - Scaffold a Service
# =============================================================================

@app.command()
def new(
    name: Annotated[
        str,
        typer.Argument(help="Name of the service (and its binary)"),
    ],
    package: Annotated[
        str | None,
        typer.Option(
            "--package",
            "-p",
            help="Go module path (default: the service name)",
        ),
    ] = None,
    version_file: Annotated[
        str | None,
        typer.Option(
            "--version-file",
            help="File the Makefile reads the version from",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to create the service in (default: current directory)",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file with default settings",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    no_git: Annotated[
        bool,
        typer.Option("--no-git", help="Skip git initialization"),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip all prompts, use defaults"),
    ] = False,
) -> None:
    """
    Create a new Go service.

    [bold]Examples:[/]

        # Prompt for the module path
        gohatch new hello

        # Fully non-interactive
        gohatch new hello -p github.com/acme/hello --yes

        # Settings from a file, name from the command line
        gohatch new hello --config gohatch.toml
    """
    if package is None and config_file is None and not yes:
        package = prompt_package(default=name)

    overrides = {
        "name": name,
        "package": package,
        "version_file": version_file,
        "output_dir": output_dir,
    }

    try:
        if config_file is not None:
            config = ProjectConfig.from_toml(config_file, **overrides)
        else:
            config = ProjectConfig(
                **{key: value for key, value in overrides.items() if value is not None}
            )
    except (ValueError, OSError) as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    try:
        result = create_project(config, verbose=True, init_git=not no_git)
    except FileExistsError:
        raise typer.Exit(1)
    except (GoHatchError, OSError) as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    if not result.success:
        raise typer.Exit(1)


# =============================================================================
# Render Command - Print One Template
# =============================================================================

@app.command("render")
def render_command(
    template: Annotated[
        str,
        typer.Argument(help="Template name (see 'gohatch list')"),
    ],
    app_name: Annotated[
        str,
        typer.Option("--app", "-a", help="Value for ApplicationName"),
    ] = "",
    package: Annotated[
        str,
        typer.Option("--package", "-p", help="Value for PackageName"),
    ] = "",
    version_file: Annotated[
        str,
        typer.Option("--version-file", help="Value for VersionFileName"),
    ] = "VERSION.txt",
) -> None:
    """
    Render a single template to standard output.

    Output is written verbatim, without a trailing newline of its own.
    """
    config = RenderConfig(
        application_name=app_name,
        package_name=package,
        version_file_name=version_file,
    )

    try:
        text = render(template, config)
    except GoHatchError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    typer.echo(text, nl=False)


# =============================================================================
# List Command - Show Templates
# =============================================================================

@app.command("list")
def list_command() -> None:
    """List the templates and the files they generate."""
    table = Table(title="Templates")
    table.add_column("Template", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Placeholders", style="dim")

    for name in TemplateName:
        table.add_row(
            name.value,
            name.target_filename,
            "\n".join(sorted(placeholders(name))) or "none",
        )

    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
