"""
gohatch.generator - Project Scaffolding
=======================================

This module writes a Go service skeleton to disk: every template is
rendered with the project's configuration and written to its file in a
new project directory, which can then be committed to a fresh git
repository.

Rendering happens before the project directory is created, so a bad
configuration never leaves files behind. A failure after that point
removes the partial project.

Generated Layout
----------------
    hello/
    ├── .gitignore
    ├── Dockerfile
    ├── Makefile
    ├── VERSION.txt      (ProjectConfig.version_file)
    ├── go.mod
    ├── go.sum
    ├── main.go
    └── version/
        └── version.go

The Makefile starts with ``include docker.mk``, which is not generated;
projects add their own before running ``make``.

Usage Example
-------------
>>> from gohatch.generator import create_project
>>> from gohatch.models import ProjectConfig
>>>
>>> config = ProjectConfig(name="hello", package="github.com/acme/hello")
>>> create_project(config, verbose=False).success
True
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from gohatch.models import ProjectConfig, TemplateName
from gohatch.renderer import render_all


console = Console()

# Left behind wherever the renderer missed a placeholder
UNRENDERED_TOKEN = "{{ ."

GIT_IDENTITY = ["-c", "user.name=gohatch", "-c", "user.email=gohatch@example.com"]


@dataclass
class GenerationResult:
    """
    Outcome of ``create_project``.

    Attributes
    ----------
    success : bool
        Whether every file was written.

    project_path : Path
        The project directory.

    files_created : list[Path]
        Absolute paths of the written files.

    warnings : list[str]
        Non-fatal problems (git, validation).

    errors : list[str]
        The error that stopped generation, if any.

    validation_passed : bool
        Whether ``validate_project`` found nothing wrong.
    """

    success: bool
    project_path: Path
    files_created: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    validation_passed: bool = False


# =============================================================================
# Layout
# =============================================================================


def output_path(name: TemplateName, config: ProjectConfig) -> Path:
    """
    Where a template's output goes inside the project directory.

    This is ``name.target_filename`` except for the version file, which
    follows ``config.version_file`` so it matches the ``VERSION_FILE``
    the Makefile reads.

    Examples
    --------
    >>> config = ProjectConfig(name="hello", version_file="VERSION")
    >>> output_path(TemplateName.VERSION_TXT_FILE, config)
    PosixPath('VERSION')
    >>> output_path(TemplateName.VERSION_GO, config)
    PosixPath('version/version.go')
    """
    if name is TemplateName.VERSION_TXT_FILE:
        return Path(config.version_file)
    return Path(name.target_filename)


def create_directory_structure(config: ProjectConfig) -> list[Path]:
    """
    Create the project directory and its ``version/`` package directory.

    Raises
    ------
    FileExistsError
        If the project directory already exists.
    """
    project_dir = config.project_dir

    if project_dir.exists():
        raise FileExistsError(
            f"Directory '{project_dir}' already exists. "
            "Use a different name or remove the existing directory."
        )

    version_dir = project_dir / "version"
    version_dir.mkdir(parents=True)
    return [project_dir, version_dir]


def render_all_templates(config: ProjectConfig) -> dict[Path, str]:
    """
    Render every template, keyed by its path relative to the project root.

    Raises
    ------
    MissingFieldError
        If the project configuration leaves a placeholder empty.
    """
    rendered = render_all(config.render_config)
    return {output_path(name, config): text for name, text in rendered.items()}


def write_files(project_dir: Path, files: dict[Path, str]) -> list[Path]:
    """
    Write ``files`` under ``project_dir`` exactly as given.

    Content is UTF-8 with no newline translation, so Makefile tabs and
    missing final newlines survive on every platform.
    """
    written: list[Path] = []

    for relative_path, content in files.items():
        full_path = project_dir / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)

        with full_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
        written.append(full_path)

    return written


# =============================================================================
# Git
# =============================================================================


def init_git_repository(project_dir: Path) -> bool:
    """
    Create a repository in ``project_dir`` and commit the skeleton.

    The commit is made as ``gohatch`` so it works on machines without a
    configured git identity.

    Returns
    -------
    bool
        False if git is missing or any git command fails. Generation
        carries on either way.
    """
    git = shutil.which("git")
    if git is None:
        return False

    commands = [
        [git, "init", "--quiet"],
        [git, "add", "--all"],
        [git, *GIT_IDENTITY, "commit", "--quiet", "-m", "Scaffold service with gohatch"],
    ]

    try:
        for command in commands:
            subprocess.run(command, cwd=project_dir, capture_output=True, check=True)
    except (subprocess.CalledProcessError, OSError):
        return False

    return True


# =============================================================================
# Validation
# =============================================================================


def validate_project(config: ProjectConfig) -> tuple[bool, list[str]]:
    """
    Check that every template's file exists with no placeholder left in it.

    Returns
    -------
    tuple[bool, list[str]]
        ``(success, issues)``.
    """
    issues: list[str] = []

    for name in TemplateName:
        relative_path = output_path(name, config)
        full_path = config.project_dir / relative_path

        if not full_path.is_file():
            issues.append(f"Missing file: {relative_path.as_posix()}")
        elif UNRENDERED_TOKEN in full_path.read_text(encoding="utf-8"):
            issues.append(f"Unrendered placeholder in {relative_path.as_posix()}")

    return not issues, issues


# =============================================================================
# Main Generation Function
# =============================================================================


def _summary(config: ProjectConfig, files: dict[Path, str]) -> Panel:
    tree = Tree(f"[bold]{config.name}/[/]")
    for path in sorted(files, key=lambda p: p.as_posix()):
        tree.add(path.as_posix())

    return Panel(
        tree,
        title=f"[bold green]Created {config.package}[/]",
        subtitle=f"cd {config.name} && go run .",
        border_style="green",
    )


def create_project(
    config: ProjectConfig,
    *,
    verbose: bool = True,
    init_git: bool = True,
    validate: bool = True,
) -> GenerationResult:
    """
    Render the templates and write a new Go service to ``config.project_dir``.

    Parameters
    ----------
    config : ProjectConfig
        Complete project configuration.

    verbose : bool, default=True
        Print the generated tree and any warnings.

    init_git : bool, default=True
        Commit the skeleton to a new git repository.

    validate : bool, default=True
        Run ``validate_project`` on the written tree.

    Raises
    ------
    FileExistsError
        If the project directory already exists. It is left untouched.
    MissingFieldError
        If a template placeholder has no value. Nothing is written.
    """
    result = GenerationResult(success=False, project_path=config.project_dir)

    try:
        files = render_all_templates(config)
        create_directory_structure(config)
    except Exception as e:
        result.errors.append(str(e))
        raise

    try:
        result.files_created = write_files(config.project_dir, files)

        if init_git and not init_git_repository(config.project_dir):
            result.warnings.append("Git initialization failed (git may not be installed)")

        if validate:
            result.validation_passed, issues = validate_project(config)
            result.warnings.extend(issues)
    except Exception as e:
        result.errors.append(str(e))
        shutil.rmtree(config.project_dir, ignore_errors=True)
        if verbose:
            console.print("[dim]Partial project directory was removed.[/]")
        raise

    result.success = True

    if verbose:
        console.print(_summary(config, files))
        for warning in result.warnings:
            console.print(f"[yellow]⚠[/] {warning}")
        console.print("[dim]The Makefile includes docker.mk; add one before running make.[/]")

    return result
