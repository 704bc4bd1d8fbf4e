"""
gohatch - Go Service Scaffolding
================================

A CLI tool and library that generates the skeleton of a Go HTTP service:
Makefile, Dockerfile, go.mod/go.sum, main.go, a version package, a
.gitignore and VERSION.txt.

Quick Start
-----------
```bash
# Create a new service interactively
gohatch new hello

# Or with options
gohatch new hello --package github.com/acme/hello --yes

# Preview a single file
gohatch render Makefile --app hello --package github.com/acme/hello
```

Example
-------
>>> from gohatch import render
>>> render("GoModFile", {"PackageName": "example.com/app"})
'module example.com/app\\n\\ngo 1.13\\n'

Architecture
------------
- ``cli``: Typer-based command line interface
- ``generator``: Writes a rendered project to disk
- ``renderer``: Pure template rendering
- ``templates``: The raw Go service templates
- ``models``: Pydantic models for configuration
- ``errors``: Exception types
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from gohatch.errors import GoHatchError, MissingFieldError, UnknownTemplateError
from gohatch.generator import create_project
from gohatch.models import ProjectConfig, RenderConfig, TemplateName
from gohatch.renderer import render, render_all


__all__ = [
    "GoHatchError",
    "MissingFieldError",
    "ProjectConfig",
    "RenderConfig",
    "TemplateName",
    "UnknownTemplateError",
    "__version__",
    "create_project",
    "render",
    "render_all",
]
