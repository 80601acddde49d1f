"""Generate command for rulegen."""

from __future__ import annotations

from pydantic import ValidationError
import typer

from rulegen.generator import generate
from rulegen.lib.config import GeneratorOptions
from rulegen.lib.errors import UsageError, handle_error


def generate_command(**values: object) -> None:
    """Validate the CLI values and run the generator, exiting on failure."""
    try:
        try:
            options = GeneratorOptions(**values)
        except ValidationError as e:
            messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
            raise UsageError(messages) from e

        result = generate(options)
        typer.echo(
            f"Generated {len(result.written)} files "
            f"({len(result.unchanged)} unchanged) in {options.dir}"
        )
    except Exception as e:
        handle_error(e)
