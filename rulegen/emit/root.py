"""Repository-wide outputs combining every language."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

from rulegen.lib.config import DOCS_URL, MODULE_VERSION_PLACEHOLDER
from rulegen.lib.errors import OutputError
from rulegen.lib.writer import LineWriter, Output
from rulegen.registry import Language


def write_module_bazel(output: Output, template: Path, languages: list[Language]) -> None:
    """Write the root MODULE.bazel: template header, then one block per language."""
    out = LineWriter()
    out.template_file(template, {})

    for lang in languages:
        out.write("# %s", lang.display_name)
        out.write(
            'bazel_dep(name = "rules_proto_grpc_%s", version = "%s")',
            lang.name,
            MODULE_VERSION_PLACEHOLDER,
        )
        out.write("local_path_override(")
        out.write('    module_name = "rules_proto_grpc_%s",', lang.name)
        out.write('    path = "modules/%s",', lang.name)
        out.write(")")
        out.blank()

        if lang.module_extra_lines:
            out.write(lang.module_extra_lines)
            out.blank()

    output.write(out, "MODULE.bazel")


def write_bazelignore(output: Output, languages: list[Language]) -> None:
    out = LineWriter()
    out.write("modules")
    out.write("test_workspaces")
    out.blank()

    # Example projects are standalone workspaces
    for lang in languages:
        for rule in lang.rules:
            out.write("examples/%s/%s", lang.name, rule.name)
        out.blank()

    output.write(out, ".bazelignore")


def write_readme(
    output: Output,
    header: Path,
    footer: Path,
    data: dict[str, Any],
    languages: list[Language],
) -> None:
    """Write README.md with the combined rules table between header and footer."""
    out = LineWriter()
    out.template_file(header, data)
    out.blank()

    out.write("## Rules")
    out.blank()
    out.write("| Language | Rule | Description")
    out.write("| ---: | :--- | :--- |")
    for lang in languages:
        for rule in lang.rules:
            lang_link = f"[{lang.display_name}]({DOCS_URL}/lang/{lang.name}.html)"
            rule_link = (
                f"[{rule.name}]({DOCS_URL}/lang/{lang.name}.html"
                f"#{rule.name.replace('_', '-')})"
            )
            example_link = f"[example](/examples/{lang.name}/{rule.name})"
            out.write(f"| {lang_link} | {rule_link} | {rule.doc} ({example_link}) |")
    out.blank()

    out.template_file(footer, data)
    output.write(out, "README.md")


def write_index_rst(output: Output, template: Path, data: dict[str, Any]) -> None:
    out = LineWriter()
    out.template_file(template, data)
    output.write(out, "docs", "index.rst")


def write_examples_makefile(output: Output, languages: list[Language]) -> None:
    """Write examples/Makefile.mk with one target per example project."""
    out = LineWriter()
    all_names: list[str] = []

    for lang in languages:
        lang_names: list[str] = []
        # The disk cache lives at the repo root, above examples/<lang>/<rule>
        disk_cache = "../" * (lang.path_depth - 1) + "../../bazel-disk-cache"

        for rule in lang.rules:
            name = f"{lang.name}_{rule.name}_example"
            all_names.append(name)
            lang_names.append(name)

            out.write(".PHONY: %s", name)
            out.write("%s:", name)
            out.write("\tcd %s; \\", _posix_join(output.root, "examples", lang.name, rule.name))
            if rule.is_test:
                out.write(
                    "\tbazel --batch test --enable_bzlmod ${BAZEL_EXTRA_FLAGS} --verbose_failures --test_output=errors --disk_cache=%s //...",
                    disk_cache,
                )
            else:
                out.write(
                    "\tbazel --batch build --enable_bzlmod ${BAZEL_EXTRA_FLAGS} --verbose_failures --disk_cache=%s //...",
                    disk_cache,
                )
            out.blank()

        target = f"{lang.name}_examples"
        out.write(".PHONY: %s", target)
        out.write("%s: %s", target, " ".join(lang_names))
        out.blank()

    out.write(".PHONY: all_examples")
    out.write("all_examples: %s", " ".join(all_names))
    out.blank()

    output.write(out, "examples", "Makefile.mk")


def write_test_workspaces_makefile(output: Output) -> None:
    out = LineWriter()
    all_names: list[str] = []

    for workspace in find_test_workspace_names(output.root):
        name = f"test_workspace_{workspace}"
        all_names.append(name)
        out.write(".PHONY: %s", name)
        out.write("%s:", name)
        out.write("\tcd %s; \\", _posix_join(output.root, "test_workspaces", workspace))
        out.write(
            "\tbazel --batch test --enable_bzlmod ${BAZEL_EXTRA_FLAGS} --verbose_failures --disk_cache=../bazel-disk-cache --test_output=errors //..."
        )
        out.blank()

    out.write(".PHONY: all_test_workspaces")
    out.write("all_test_workspaces: %s", " ".join(all_names))
    out.blank()

    output.write(out, "test_workspaces", "Makefile.mk")


def find_test_workspace_names(root: Path) -> list[str]:
    """Names of the directories under ``root/test_workspaces``, sorted.

    Hidden directories and Bazel convenience symlinks (``bazel-*``) are skipped.

    Raises:
        OutputError: If the directory cannot be listed.
    """
    workspaces_dir = Path(root) / "test_workspaces"
    try:
        entries = sorted(workspaces_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise OutputError(workspaces_dir, e) from e

    return [
        entry.name
        for entry in entries
        if entry.is_dir()
        and not entry.name.startswith(".")
        and not entry.name.startswith("bazel-")
    ]


def _posix_join(root: Path, *parts: str) -> str:
    return str(PurePosixPath(root.as_posix(), *parts))
