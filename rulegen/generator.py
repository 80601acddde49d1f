"""Generator - one full run from options to files on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rulegen.emit import (
    write_bazel_ci_presubmit,
    write_bazelignore,
    write_examples_makefile,
    write_index_rst,
    write_language_defs,
    write_language_docs,
    write_language_examples,
    write_language_rules,
    write_module_bazel,
    write_readme,
    write_test_workspaces_makefile,
)
from rulegen.lib.checksum import fetch_sha256
from rulegen.lib.config import GeneratorOptions
from rulegen.lib.writer import Output
from rulegen.registry import COMMON_FIELDS, Language, make_languages

log = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Summary of a generator run."""

    sha256: str
    written: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)


def resolve_sha256(options: GeneratorOptions) -> str:
    """The archive checksum, downloading the archive when it must be derived."""
    if options.should_derive_sha256:
        return fetch_sha256(options.archive_url())
    return options.sha256


def generate(
    options: GeneratorOptions, languages: list[Language] | None = None
) -> GenerationResult:
    """Generate every output under ``options.dir``.

    Args:
        options: Validated run options.
        languages: Registry to generate from. Defaults to ``make_languages()``.

    Returns:
        The checksum used and the files written or left unchanged.

    Raises:
        RulegenError: On the first template, filesystem or network failure.
    """
    sha256 = resolve_sha256(options)
    if languages is None:
        languages = make_languages()

    output = Output(options.dir, force=options.force)
    common = COMMON_FIELDS

    for lang in languages:
        log.debug(f"Generating {lang.name} ({len(lang.rules)} rules)")
        write_language_docs(output, lang, common)
        write_language_defs(output, lang)
        write_language_rules(output, lang, common)
        write_language_examples(output, lang, common)

    write_module_bazel(output, options.module_template, languages)
    write_bazelignore(output, languages)

    release = {"ref": options.ref, "sha256": sha256}
    write_readme(
        output,
        options.readme_header_template,
        options.readme_footer_template,
        release,
        languages,
    )
    write_index_rst(output, options.index_template, release)

    write_bazel_ci_presubmit(output, languages, options.available_tests)
    write_examples_makefile(output, languages)
    write_test_workspaces_makefile(output)

    log.info(
        f"Generated {len(output.written)} files "
        f"({len(output.unchanged)} unchanged) in {output.root}"
    )
    return GenerationResult(
        sha256=sha256, written=output.written, unchanged=output.unchanged
    )
