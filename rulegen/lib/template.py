"""Jinja2 rendering for rulegen templates.

Rule implementations, build examples and language notes are inline
template strings held by the registry. The README, index and module
headers are template files on disk. Both go through the same
environment so whitespace handling is identical everywhere.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from .errors import TemplateRenderError


@lru_cache(maxsize=1)
def get_jinja_env() -> Environment:
    """Create the shared Jinja2 Environment.

    Undefined variables are errors so a typo in a rule template fails the
    run instead of silently emitting an empty string. A template file's final
    newline is kept so rendered files end the way their template does.
    """
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render(template: str, data: dict[str, Any], name: str = "<inline>") -> str:
    """Render a template string with ``data``.

    Args:
        template: Jinja2 template source.
        data: Variables available to the template.
        name: Label used in error messages.

    Raises:
        TemplateRenderError: If the template fails to parse or render.
    """
    try:
        tmpl = get_jinja_env().from_string(template)
        return tmpl.render(**data)
    except TemplateError as e:
        raise TemplateRenderError(name, e) from e


def render_file(path: Path, data: dict[str, Any]) -> str:
    """Load a template file from ``path`` and render it with ``data``."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateRenderError(path, e) from e
    return render(source, data, name=str(path))
