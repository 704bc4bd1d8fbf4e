"""
gohatch.errors - Exception Types
================================

All errors raised by the renderer derive from ``GoHatchError`` so callers
can handle them in one place. Each also derives from the closest builtin
(``KeyError`` for lookups, ``ValueError`` for bad input values).
"""

from __future__ import annotations

from collections.abc import Iterable

from gohatch.models import TemplateName


class GoHatchError(Exception):
    """Base class for gohatch errors."""


class UnknownTemplateError(GoHatchError, KeyError):
    """
    Raised when a template name is not part of the fixed template set.

    Attributes
    ----------
    name : str
        The name that was requested.
    """

    def __init__(self, name: object) -> None:
        self.name = str(name)
        super().__init__(self.name)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the name
        valid = ", ".join(t.value for t in TemplateName)
        return f"Unknown template '{self.name}'. Valid templates: {valid}"


class MissingFieldError(GoHatchError, ValueError):
    """
    Raised when a template references a placeholder with no value.

    Attributes
    ----------
    template : str
        Name of the template being rendered.

    fields : tuple[str, ...]
        Placeholder names that were empty, sorted.
    """

    def __init__(self, template: str, fields: Iterable[str]) -> None:
        self.template = template
        self.fields = tuple(sorted(fields))
        msg = (
            f"Template '{template}' requires a value for: "
            f"{', '.join(self.fields)}"
        )
        super().__init__(msg)
