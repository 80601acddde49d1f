"""rulegen CLI Main Entry Point

Regenerates the rules_proto_grpc rule files, language docs, example
projects, root MODULE.bazel, README, docs index, Bazel CI presubmit and
Makefiles from the language registry.

Usage:
    rulegen                                    # Generate into the current directory
    rulegen --dir path/to/checkout             # Generate into another checkout
    rulegen --ref 5.0.0                        # Stamp a release (derives sha256)
    rulegen --ref 5.0.0 --sha256 <hex>         # Stamp a release with a known sha256
"""

from __future__ import annotations

from pathlib import Path

import typer

from ._version import __version__
from .commands import generate_command
from .commands.utils import setup_logging
from .lib.config import (
    DEFAULT_AVAILABLE_TESTS,
    DEFAULT_GITHUB_URL,
    DEFAULT_INDEX_TEMPLATE,
    DEFAULT_MODULE_TEMPLATE,
    DEFAULT_README_FOOTER_TEMPLATE,
    DEFAULT_README_HEADER_TEMPLATE,
    REF_PLACEHOLDER,
    SHA256_PLACEHOLDER,
)

typer_app = typer.Typer(add_completion=False)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rulegen {__version__}")
        raise typer.Exit()


@typer_app.command()
def cli(
    dir: str = typer.Option(".", "--dir", help="Directory to generate into."),
    module_template: Path = typer.Option(
        DEFAULT_MODULE_TEMPLATE,
        "--module_template",
        help="Template for the main MODULE.bazel.",
    ),
    readme_header_template: Path = typer.Option(
        DEFAULT_README_HEADER_TEMPLATE,
        "--readme_header_template",
        help="Template for the main readme header.",
    ),
    readme_footer_template: Path = typer.Option(
        DEFAULT_README_FOOTER_TEMPLATE,
        "--readme_footer_template",
        help="Template for the main readme footer.",
    ),
    index_template: Path = typer.Option(
        DEFAULT_INDEX_TEMPLATE,
        "--index_template",
        help="Template for the index.rst file.",
    ),
    ref: str = typer.Option(
        REF_PLACEHOLDER,
        "--ref",
        help="Version ref to use for main readme and index.rst.",
    ),
    sha256: str = typer.Option(
        SHA256_PLACEHOLDER,
        "--sha256",
        help="SHA256 value to use for main readme and index.rst.",
    ),
    github_url: str = typer.Option(
        DEFAULT_GITHUB_URL,
        "--github_url",
        help="URL for github download, with {ref} substituted.",
    ),
    available_tests: Path = typer.Option(
        Path(DEFAULT_AVAILABLE_TESTS),
        "--available_tests",
        help="File containing the list of available routeguide tests.",
    ),
    force: bool = typer.Option(
        False, "--force", help="Rewrite files even when their content is unchanged."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Generate rules_proto_grpc rules, docs, examples and CI config."""
    setup_logging(verbose)
    generate_command(
        dir=dir,
        module_template=module_template,
        readme_header_template=readme_header_template,
        readme_footer_template=readme_footer_template,
        index_template=index_template,
        ref=ref,
        sha256=sha256,
        github_url=github_url,
        available_tests=available_tests,
        force=force,
    )


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
