"""
Tests for gohatch.cli
=====================

Tests use Typer's CliRunner for testing CLI commands.

Test Organization
-----------------
- TestVersionCommand: Tests for --version flag
- TestHelpOutput: Tests for help text
- TestRenderCommand: Tests for the render command
- TestListCommand: Tests for the list command
- TestNewCommand: Tests for the new command
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gohatch import __version__
from gohatch.cli import app
from gohatch.templates import TEMPLATES


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


# =============================================================================
# Version Command Tests
# =============================================================================

class TestVersionCommand:
    """Tests for the --version flag."""

    def test_version_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_short_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["-V"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


# =============================================================================
# Help Output Tests
# =============================================================================

class TestHelpOutput:
    """Tests for help text."""

    def test_main_help(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "gohatch" in result.stdout.lower()
        assert "new" in result.stdout
        assert "render" in result.stdout

    def test_new_help(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["new", "--help"])

        assert result.exit_code == 0
        assert "Create a new Go service" in result.stdout
        assert "--package" in result.stdout


# =============================================================================
# Render Command Tests
# =============================================================================

class TestRenderCommand:
    """Tests for the render command."""

    def test_render_go_mod(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["render", "GoModFile", "--package", "example.com/app"])

        assert result.exit_code == 0
        assert result.stdout == "module example.com/app\n\ngo 1.13\n"

    def test_render_dockerfile(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["render", "Dockerfile", "--app", "svc"])

        assert result.exit_code == 0
        assert result.stdout.endswith('ENTRYPOINT [ "./svc" ]')

    def test_render_without_placeholders(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["render", "GitIgnore"])

        assert result.exit_code == 0
        assert result.stdout == TEMPLATES["GitIgnore"]

    def test_render_unknown_template(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["render", "Rakefile"])

        assert result.exit_code == 1
        assert "Unknown template" in result.stdout

    def test_render_missing_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["render", "MainGo"])

        assert result.exit_code == 1
        assert "PackageName" in result.stdout


# =============================================================================
# List Command Tests
# =============================================================================

class TestListCommand:
    """Tests for the list command."""

    def test_lists_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        for name in TEMPLATES:
            assert name in result.stdout
        assert "go.mod" in result.stdout


# =============================================================================
# New Command Tests
# =============================================================================

class TestNewCommand:
    """Tests for the new command."""

    def test_new_non_interactive(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "new", "hello",
                "--package", "github.com/acme/hello",
                "--output", str(tmp_path),
                "--no-git",
            ],
        )

        assert result.exit_code == 0
        project_dir = tmp_path / "hello"
        assert (project_dir / "main.go").exists()
        assert (project_dir / "go.mod").read_text() == (
            "module github.com/acme/hello\n\ngo 1.13\n"
        )

    def test_new_yes_defaults_package_to_name(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["new", "hello", "--yes", "--output", str(tmp_path), "--no-git"],
        )

        assert result.exit_code == 0
        assert (tmp_path / "hello" / "go.mod").read_text().startswith("module hello\n")

    def test_new_prompts_for_package(self, runner: CliRunner, tmp_path: Path) -> None:
        with patch("gohatch.cli.prompt_package", return_value="example.com/hello") as prompt:
            result = runner.invoke(
                app,
                ["new", "hello", "--output", str(tmp_path), "--no-git"],
            )

        assert result.exit_code == 0
        prompt.assert_called_once_with(default="hello")
        assert "example.com/hello" in (tmp_path / "hello" / "go.mod").read_text()

    def test_new_version_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "new", "hello", "--yes",
                "--version-file", "VERSION",
                "--output", str(tmp_path),
                "--no-git",
            ],
        )

        assert result.exit_code == 0
        assert "VERSION_FILE:=VERSION\n" in (tmp_path / "hello" / "Makefile").read_text()
        assert (tmp_path / "hello" / "VERSION").read_text() == "0.1.0"
        assert not (tmp_path / "hello" / "VERSION.txt").exists()

    def test_new_from_config_file(
        self, runner: CliRunner, tmp_path: Path, sample_config_toml: Path
    ) -> None:
        output = tmp_path / "out"
        result = runner.invoke(
            app,
            [
                "new", "hello",
                "--config", str(sample_config_toml),
                "--output", str(output),
                "--no-git",
            ],
        )

        assert result.exit_code == 0
        project_dir = output / "hello"
        assert "github.com/acme/fromfile" in (project_dir / "go.mod").read_text()
        assert "VERSION_FILE:=VERSION\n" in (project_dir / "Makefile").read_text()
        assert (project_dir / "VERSION").is_file()

    def test_new_invalid_name(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["new", "1hello", "--yes", "--output", str(tmp_path), "--no-git"],
        )

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_new_existing_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "hello").mkdir()

        result = runner.invoke(
            app,
            ["new", "hello", "--yes", "--output", str(tmp_path), "--no-git"],
        )

        assert result.exit_code == 1
        assert list((tmp_path / "hello").iterdir()) == []
