"""
gohatch.templates - Go Service Skeleton Templates
=================================================

This package contains the raw template files a new Go service is built
from. The files are byte-exact: tabs in the Makefile, trailing spaces,
and missing final newlines are all significant and end up in the
generated project unchanged.

Template Naming Convention
--------------------------
- Templates end with the `.j2` extension
- Output filename = ``TemplateName.target_filename``
- Exception: `gitignore.j2` → `.gitignore`, `version.go.j2` →
  `version/version.go`

Available Templates
-------------------
    - VERSION.txt.j2 (VersionTxtFile): Initial service version
    - Makefile.j2 (Makefile): build, fmt, lint, test, vet, bump-version
    - Dockerfile.j2 (Dockerfile): Multi-stage alpine build
    - version.go.j2 (VersionGo): Version variables set via -ldflags
    - go.mod.j2 (GoModFile): Module declaration
    - go.sum.j2 (GoSumFile): Empty checksum file
    - main.go.j2 (MainGo): HTTP server with / and /health handlers
    - gitignore.j2 (GitIgnore): Go build artifacts

Placeholders
------------
Templates use Go template syntax for their placeholders, since that is
what the files were written with:

    {{ .ApplicationName }}, {{ .PackageName }}, {{ .VersionFileName }}

See Also
--------
- renderer.py: Module that renders these templates
- models.py: TemplateName and RenderConfig
"""

from __future__ import annotations

import importlib.resources as ilr
from types import MappingProxyType

from gohatch.models import TemplateName


def _read(name: TemplateName) -> str:
    # newline="" keeps the text exactly as stored
    with ilr.files(__name__).joinpath(name.source_file).open(
        "r", encoding="utf-8", newline=""
    ) as f:
        return f.read()


TEMPLATES: MappingProxyType[str, str] = MappingProxyType(
    {name.value: _read(name) for name in TemplateName}
)

__all__ = ["TEMPLATES"]
