"""
pytest configuration and shared fixtures for gohatch tests.

Fixtures
--------
render_config : RenderConfig
    Placeholder values for a service called ``hello``.

project_config : ProjectConfig
    A project rooted in a temporary output directory.

sample_config_toml : Path
    A gohatch TOML config file in a temporary directory.
"""

from pathlib import Path

import pytest

from gohatch.models import ProjectConfig, RenderConfig


@pytest.fixture
def render_config() -> RenderConfig:
    """Placeholder values for a service called hello."""
    return RenderConfig(
        application_name="hello",
        package_name="github.com/acme/hello",
    )


@pytest.fixture
def project_config(tmp_path: Path) -> ProjectConfig:
    """
    Create a project configuration in a temporary directory.

    The project directory itself is not created; ``output_dir`` is empty
    so each test starts from a clean slate.
    """
    return ProjectConfig(
        name="hello",
        package="github.com/acme/hello",
        output_dir=tmp_path,
    )


@pytest.fixture
def sample_config_toml(tmp_path: Path) -> Path:
    """Write a gohatch.toml and return its path."""
    path = tmp_path / "gohatch.toml"
    path.write_text(
        'name = "fromfile"\n'
        'package = "github.com/acme/fromfile"\n'
        'version_file = "VERSION"\n',
        encoding="utf-8",
    )
    return path


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external resources"
    )
