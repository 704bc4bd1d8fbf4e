"""
gohatch.models - Pydantic Models for Template Rendering and Scaffolding
======================================================================

This module defines the data models used throughout gohatch. As with the
rest of the package, Pydantic does the heavy lifting:

1. **Validation**: Project and package names are checked before any file
   is touched
2. **Immutability**: ``RenderConfig`` is frozen, so a render always sees
   the values it started with
3. **Aliases**: Fields can be populated with the Go-style placeholder names
   (``ApplicationName``) or the Python field names (``application_name``)

Architecture Notes
------------------
    TemplateName (enum)
    ├── target_filename: str
    └── source_file: str

    RenderConfig (frozen)
    ├── application_name  <- {{ .ApplicationName }}
    ├── package_name      <- {{ .PackageName }}
    └── version_file_name <- {{ .VersionFileName }}

    ProjectConfig
    ├── name, package, version_file, output_dir
    └── render_config -> RenderConfig

Usage Example
-------------
>>> from gohatch.models import ProjectConfig
>>> config = ProjectConfig(name="hello", package="github.com/acme/hello")
>>> config.render_config.package_name
'github.com/acme/hello'
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Enumerations
# =============================================================================

class TemplateName(str, Enum):
    """
    The fixed set of templates a Go service skeleton is built from.

    Member values are the template names used on the command line and in
    the rendered-template mapping. Adding a member requires a matching
    ``.j2`` file in ``gohatch.templates``; the catalog fails to import
    otherwise.

    Examples
    --------
    >>> TemplateName("GoModFile").target_filename
    'go.mod'
    >>> TemplateName.VERSION_GO.target_filename
    'version/version.go'
    """

    VERSION_TXT_FILE = "VersionTxtFile"
    MAKEFILE = "Makefile"
    DOCKERFILE = "Dockerfile"
    VERSION_GO = "VersionGo"
    GO_MOD_FILE = "GoModFile"
    GO_SUM_FILE = "GoSumFile"
    MAIN_GO = "MainGo"
    GIT_IGNORE = "GitIgnore"

    @property
    def target_filename(self) -> str:
        """
        Path of the generated file, relative to the project root.

        Returns
        -------
        str
            POSIX-style relative path such as ``version/version.go``.
        """
        targets = {
            TemplateName.VERSION_TXT_FILE: "VERSION.txt",
            TemplateName.MAKEFILE: "Makefile",
            TemplateName.DOCKERFILE: "Dockerfile",
            TemplateName.VERSION_GO: "version/version.go",
            TemplateName.GO_MOD_FILE: "go.mod",
            TemplateName.GO_SUM_FILE: "go.sum",
            TemplateName.MAIN_GO: "main.go",
            TemplateName.GIT_IGNORE: ".gitignore",
        }
        return targets[self]

    @property
    def source_file(self) -> str:
        """Name of the ``.j2`` resource holding the raw template text."""
        sources = {
            TemplateName.VERSION_TXT_FILE: "VERSION.txt.j2",
            TemplateName.MAKEFILE: "Makefile.j2",
            TemplateName.DOCKERFILE: "Dockerfile.j2",
            TemplateName.VERSION_GO: "version.go.j2",
            TemplateName.GO_MOD_FILE: "go.mod.j2",
            TemplateName.GO_SUM_FILE: "go.sum.j2",
            TemplateName.MAIN_GO: "main.go.j2",
            TemplateName.GIT_IGNORE: "gitignore.j2",
        }
        return sources[self]


# =============================================================================
# Render Configuration
# =============================================================================

class RenderConfig(BaseModel):
    """
    Values substituted into template placeholders.

    Each field corresponds to one Go-style placeholder token. Fields default
    to empty strings; whether an empty value is acceptable depends on the
    template being rendered, so the check happens at render time rather
    than here.

    Attributes
    ----------
    application_name : str
        Binary name, fills ``{{ .ApplicationName }}``.

    package_name : str
        Go module path, fills ``{{ .PackageName }}``.

    version_file_name : str
        File the Makefile reads the version from, fills
        ``{{ .VersionFileName }}``.

    Examples
    --------
    >>> RenderConfig(PackageName="example.com/app").package_name
    'example.com/app'
    >>> RenderConfig(application_name="svc").model_dump(by_alias=True)["ApplicationName"]
    'svc'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    application_name: str = Field(
        default="",
        alias="ApplicationName",
        description="Name of the generated binary",
    )
    package_name: str = Field(
        default="",
        alias="PackageName",
        description="Go module path of the generated service",
    )
    version_file_name: str = Field(
        default="VERSION.txt",
        alias="VersionFileName",
        description="File holding the service version",
    )

    def placeholder_values(self) -> dict[str, str]:
        """
        Map placeholder names to their substitution values.

        Returns
        -------
        dict[str, str]
            ``{"ApplicationName": ..., "PackageName": ..., "VersionFileName": ...}``
        """
        return self.model_dump(by_alias=True)


# =============================================================================
# Project Configuration
# =============================================================================

class ProjectConfig(BaseModel):
    """
    Complete configuration for one scaffolding run.

    The configuration can be:
    - Built from CLI flags and prompts
    - Loaded from a TOML file
    - Constructed programmatically via the Python API

    Attributes
    ----------
    name : str
        Application name. Used as the directory name and the binary name.

    package : str
        Go module path (``github.com/acme/hello``). Defaults to ``name``.

    version_file : str
        Name of the version file. It is both written to the project root
        and read by the Makefile.

    output_dir : Path
        Directory in which the project directory is created.

    Examples
    --------
    >>> config = ProjectConfig(name="Hello")
    >>> config.name, config.package
    ('hello', 'hello')
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(
        description="Application name",
        min_length=1,
        max_length=100,
    )
    package: str = Field(
        default="",
        description="Go module path (defaults to the application name)",
        max_length=255,
    )
    version_file: str = Field(
        default="VERSION.txt",
        description="File holding the service version",
        min_length=1,
    )
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where the project will be created",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """
        Normalize the application name and check it is usable as a binary
        and directory name.

        Raises
        ------
        ValueError
            If the name doesn't start with a letter or contains characters
            other than letters, digits, hyphens and underscores.
        """
        v = v.lower().strip()

        if not re.match(r"^[a-z][a-z0-9_-]*$", v):
            msg = (
                f"Invalid application name '{v}'. Names must start with a letter "
                "and contain only letters, numbers, hyphens, and underscores."
            )
            raise ValueError(msg)

        return v

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str) -> str:
        """Module paths may not contain whitespace."""
        v = v.strip()
        if re.search(r"\s", v):
            msg = f"Invalid package name '{v}'. Go module paths cannot contain whitespace."
            raise ValueError(msg)
        return v

    @field_validator("version_file")
    @classmethod
    def validate_version_file(cls, v: str) -> str:
        """
        The version file is a plain file name in the project root.

        Raises
        ------
        ValueError
            If the name is empty, contains whitespace or a path separator,
            is ``.`` or ``..``, or names another generated file.
        """
        v = v.strip()

        if not v or v in (".", "..") or re.search(r"[\s/\\]", v):
            msg = (
                f"Invalid version file name '{v}'. It must be a single file name "
                "without whitespace or path separators."
            )
            raise ValueError(msg)

        taken = {n.target_filename for n in TemplateName if n is not TemplateName.VERSION_TXT_FILE}
        if v in taken or v == "version":
            msg = f"Version file name '{v}' clashes with a generated file."
            raise ValueError(msg)

        return v

    @model_validator(mode="after")
    def default_package_to_name(self) -> ProjectConfig:
        if not self.package:
            self.package = self.name
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """
        Full path to the project directory.

        Returns
        -------
        Path
            output_dir / name
        """
        return self.output_dir / self.name

    @property
    def render_config(self) -> RenderConfig:
        """The placeholder values this project renders its templates with."""
        return RenderConfig(
            application_name=self.name,
            package_name=self.package,
            version_file_name=self.version_file,
        )

    # -------------------------------------------------------------------------
    # Serialization Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_toml(cls, path: Path, **overrides: object) -> ProjectConfig:
        """
        Load configuration from a TOML file.

        Parameters
        ----------
        path : Path
            Path to the TOML configuration file.

        **overrides
            Values that take precedence over the file. ``None`` values are
            ignored so CLI options that weren't given don't clobber the file.

        Returns
        -------
        ProjectConfig
            Validated configuration object.

        Raises
        ------
        FileNotFoundError
            If the config file doesn't exist.
        ValidationError
            If the config file has invalid values.
        """
        import tomli

        with open(path, "rb") as f:
            data = tomli.load(f)

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)
