"""
gohatch.renderer - Template Rendering
=====================================

This module turns a template name and a ``RenderConfig`` into the final
text of a generated file. Rendering is pure: nothing here touches the
file system. Writing files is the job of ``gohatch.generator``.

Template Engine
---------------
The templates are written with Go-style placeholders
(``{{ .PackageName }}``), so the Jinja2 environment is configured with
``{{ .`` and `` }}`` as its variable delimiters. Block and comment
delimiters are set to strings that never occur in the templates, which
leaves plain variable output as the only template feature in play. The
environment also:

- Disables autoescaping (we're generating source files, not HTML)
- Keeps trailing newlines, so output is byte-identical to the template
  apart from the substituted values
- Uses ``StrictUndefined`` so an unknown placeholder can never render
  as an empty string

Usage Example
-------------
>>> from gohatch.renderer import render
>>> render("GoModFile", {"PackageName": "example.com/app"})
'module example.com/app\\n\\ngo 1.13\\n'
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound, meta

from gohatch.errors import MissingFieldError, UnknownTemplateError
from gohatch.models import RenderConfig, TemplateName
from gohatch.templates import TEMPLATES


# =============================================================================
# Template Engine Setup
# =============================================================================


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment used for Go-style placeholders.

    Returns
    -------
    Environment
        Environment whose loader serves the fixed template set.
    """
    return Environment(
        loader=DictLoader(dict(TEMPLATES)),
        variable_start_string="{{ .",
        variable_end_string=" }}",
        block_start_string="<%gohatch",
        block_end_string="gohatch%>",
        comment_start_string="<#gohatch",
        comment_end_string="gohatch#>",
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


_env = create_jinja_env()


# =============================================================================
# Lookups
# =============================================================================


def _resolve(template_name: TemplateName | str) -> TemplateName:
    try:
        return TemplateName(template_name)
    except ValueError:
        raise UnknownTemplateError(template_name) from None


def template_source(template_name: TemplateName | str) -> str:
    """
    Return the raw text of a template, placeholders and all.

    Raises
    ------
    UnknownTemplateError
        If ``template_name`` is not one of the known templates.
    """
    return TEMPLATES[_resolve(template_name).value]


@lru_cache(maxsize=None)
def _placeholders(name: TemplateName) -> frozenset[str]:
    ast = _env.parse(TEMPLATES[name.value])
    return frozenset(meta.find_undeclared_variables(ast))


def placeholders(template_name: TemplateName | str) -> frozenset[str]:
    """
    Placeholder names referenced by a template.

    Examples
    --------
    >>> sorted(placeholders("Makefile"))
    ['ApplicationName', 'PackageName', 'VersionFileName']
    >>> placeholders("GoSumFile")
    frozenset()
    """
    return _placeholders(_resolve(template_name))


# =============================================================================
# Rendering
# =============================================================================


def _coerce_config(config: RenderConfig | Mapping[str, str | None]) -> RenderConfig:
    if isinstance(config, RenderConfig):
        return config
    # None means "no value", so it fails like an empty string
    values = {key: "" if value is None else value for key, value in config.items()}
    return RenderConfig.model_validate(values)


def render(
    template_name: TemplateName | str,
    config: RenderConfig | Mapping[str, str | None],
) -> str:
    """
    Render a single template with the given placeholder values.

    Parameters
    ----------
    template_name : TemplateName | str
        One of the known template names (e.g., ``"Dockerfile"``).

    config : RenderConfig | Mapping[str, str | None]
        Placeholder values. Mappings are validated into a ``RenderConfig``
        and may use either the Go-style names or the field names.

    Returns
    -------
    str
        The template text with every placeholder replaced. Nothing else
        about the text changes.

    Raises
    ------
    UnknownTemplateError
        If the template name is not recognized.
    MissingFieldError
        If the template references a placeholder whose value is empty.
        Templates without placeholders render for any config.

    Notes
    -----
    All checks run before rendering starts, so a failure never leaves
    partially rendered output behind.
    """
    name = _resolve(template_name)
    values = _coerce_config(config).placeholder_values()

    missing = {field for field in _placeholders(name) if not values.get(field)}
    if missing:
        raise MissingFieldError(name.value, missing)

    try:
        template = _env.get_template(name.value)
    except TemplateNotFound as e:
        raise UnknownTemplateError(name.value) from e

    return template.render(**values)


def render_all(config: RenderConfig | Mapping[str, str | None]) -> dict[TemplateName, str]:
    """
    Render every template in the set.

    Returns
    -------
    dict[TemplateName, str]
        Rendered text keyed by template, in ``TemplateName`` order.

    Raises
    ------
    MissingFieldError
        On the first template that can't be rendered. No partial mapping
        is returned.
    """
    render_config = _coerce_config(config)
    return {name: render(name, render_config) for name in TemplateName}
