"""Line-oriented output buffers and the output root they are written to."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .errors import OutputError
from .template import render, render_file

log = logging.getLogger(__name__)


class LineWriter:
    """Accumulates output one logical line at a time.

    Every entry in ``lines`` is a single line: multi-line strings passed to
    ``write`` or produced by a template are split before being stored.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, text: str = "", *args: Any) -> None:
        """Append ``text`` (``%``-formatted with ``args`` when given)."""
        if args:
            text = text % args
        self.lines.extend(text.split("\n"))

    def blank(self) -> None:
        self.lines.append("")

    def template(self, tmpl: str, data: dict[str, Any], indent: str = "") -> None:
        """Render ``tmpl`` and append its lines, prefixing non-empty ones."""
        self._extend(render(tmpl, data), indent)

    def template_file(self, path: Path, data: dict[str, Any]) -> None:
        """Render the template file at ``path`` and append its lines."""
        self._extend(render_file(path, data), "")

    def _extend(self, rendered: str, indent: str) -> None:
        for line in rendered.split("\n"):
            self.lines.append(f"{indent}{line}" if line else "")

    def content(self) -> str:
        return "\n".join(self.lines)

    def must_write(self, path: Path) -> None:
        """Write the content to ``path``, replacing any existing file.

        Raises:
            OutputError: If the directory or file cannot be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.content(), encoding="utf-8")
        except OSError as e:
            raise OutputError(path, e) from e


class Output:
    """The generation root (``--dir``) and write bookkeeping for one run.

    Unless ``force`` is set, a file whose current content already matches
    is left untouched so file timestamps only move when content does.
    """

    def __init__(self, root: Path, force: bool = False) -> None:
        self.root = Path(root)
        self.force = force
        self.written: list[Path] = []
        self.unchanged: list[Path] = []

    def path(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)

    def write(self, out: LineWriter, *parts: str) -> bool:
        """Write ``out`` to ``root/parts``. Returns True if the file was written."""
        path = self.path(*parts)
        if not self.force and _read_existing(path) == out.content():
            log.debug(f"Unchanged {path}")
            self.unchanged.append(path)
            return False

        out.must_write(path)
        log.debug(f"Wrote {path}")
        self.written.append(path)
        return True


def _read_existing(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise OutputError(path, e) from e
    except UnicodeDecodeError:
        return None
