"""Shared error handling for rulegen."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer


class RulegenError(Exception):
    """Base exception for rulegen operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class UsageError(RulegenError):
    """Raised when an option has an unusable value."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=2)


class TemplateRenderError(RulegenError):
    """Raised when a template cannot be loaded, parsed or rendered."""

    def __init__(self, source: str | Path, error: Exception) -> None:
        self.source = str(source)
        self.error = error
        super().__init__(f"Failed to render template {self.source}: {error}")


class OutputError(RulegenError):
    """Raised on filesystem failures while reading inputs or writing outputs."""

    def __init__(self, path: str | Path, error: Exception) -> None:
        self.path = Path(path)
        self.error = error
        super().__init__(f"Failed to access {self.path}: {error}")


class ChecksumError(RulegenError):
    """Raised when the release archive cannot be downloaded for hashing."""

    def __init__(self, url: str, error: Exception) -> None:
        self.url = url
        self.error = error
        super().__init__(f"Failed to derive sha256 from {url}: {error}")


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on rulegen errors."""
    if isinstance(error, RulegenError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
