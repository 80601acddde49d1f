"""Bazel CI presubmit configuration and the platform/test filters behind it.

A routeguide client/server pair only gets a CI entry when two independent
checks pass: both languages run on the CI platform, and the pair's test
target is listed in the available-tests file. Pairs missing from that file
are dropped silently, which makes the matrix opt-in.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import Path

from rulegen.lib.config import CI_PLATFORMS, CI_PLATFORMS_MAP, EXTRA_PLATFORM_FLAGS
from rulegen.lib.errors import OutputError
from rulegen.lib.writer import LineWriter, Output
from rulegen.registry import Language, Rule

from .root import find_test_workspace_names

log = logging.getLogger(__name__)

CXX_STD_FLAGS = {
    "windows": ("--cxxopt=/std:c++17", "--host_cxxopt=/std:c++17"),
}
DEFAULT_CXX_STD_FLAGS = ("--cxxopt=-std=c++17", "--host_cxxopt=-std=c++17")


def _ci_platforms_for(platforms: Collection[str]) -> set[str]:
    if "all" in platforms:
        return {p for ps in CI_PLATFORMS_MAP.values() for p in ps}
    return {
        ci_platform
        for platform in platforms
        for ci_platform in CI_PLATFORMS_MAP.get(platform, ())
    }


def do_test_on_platform(lang: Language, rule: Rule | None, ci_platform: str) -> bool:
    """Whether ``lang`` (and ``rule``, when given) is tested on ``ci_platform``."""
    if ci_platform not in _ci_platforms_for(lang.platforms):
        return False
    if rule is not None and ci_platform in _ci_platforms_for(rule.skip_test_platforms):
        return False
    return True


def routeguide_label(client: Language, server: Language) -> str:
    return f"//examples/routeguide:{client.name}_{server.name}"


def is_available_test(label: str, available_labels: Collection[str]) -> bool:
    """Whether ``label`` is listed verbatim in the available-tests file."""
    return label in available_labels


def load_available_tests(path: Path) -> set[str]:
    """Read the available-tests file: one Bazel target label per line."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise OutputError(path, e) from e
    return set(content.split("\n"))


def routeguide_targets(
    languages: list[Language], ci_platform: str, available_labels: Collection[str]
) -> list[str]:
    """Routeguide test targets for every eligible (client, server) pair."""
    targets = []
    for client in languages:
        for server in languages:
            if not (
                do_test_on_platform(client, None, ci_platform)
                and do_test_on_platform(server, None, ci_platform)
            ):
                continue
            label = routeguide_label(client, server)
            if is_available_test(label, available_labels):
                targets.append(label)
            else:
                log.debug(f"Skipping {label} on {ci_platform}: not in available tests")
    return targets


def _cxx_std_flags(ci_platform: str) -> tuple[str, ...]:
    return CXX_STD_FLAGS.get(ci_platform, DEFAULT_CXX_STD_FLAGS)


def _write_task_environment(out: LineWriter, ci_platform: str) -> None:
    out.write("    environment:")
    out.write('      BAZEL_EXTRA_FLAGS: "%s"', " ".join(_cxx_std_flags(ci_platform)))
    if ci_platform == "windows":
        out.write("    batch_commands:")
    else:
        out.write("    shell_commands:")
        out.write("     - set -x")


def _make_command(ci_platform: str) -> str:
    return "make.exe" if ci_platform == "windows" else "make"


def write_bazel_ci_presubmit(
    output: Output, languages: list[Language], available_tests: Path
) -> None:
    """Write ``.bazelci/presubmit.yml``."""
    available_labels = load_available_tests(available_tests)

    out = LineWriter()
    out.write("---")
    out.write("tasks:")

    # Main build and routeguide matrix
    for ci_platform in CI_PLATFORMS:
        out.write("  main_%s:", ci_platform)
        out.write("    name: build & test all")
        out.write("    platform: %s", ci_platform)
        out.write("    test_flags:")
        out.write('    - "--test_output=errors"')
        for flag in _cxx_std_flags(ci_platform):
            out.write('    - "%s"', flag)
        for flag in EXTRA_PLATFORM_FLAGS.get(ci_platform, ()):
            out.write('    - "%s"', flag)
        out.write("    test_targets:")
        for target in routeguide_targets(languages, ci_platform, available_labels):
            out.write('    - "%s"', target)
        out.blank()

    # Examples per language
    for lang in languages:
        for ci_platform in CI_PLATFORMS:
            rules = [r for r in lang.rules if do_test_on_platform(lang, r, ci_platform)]
            if not rules:
                continue

            out.write("  %s_%s_examples:", lang.name, ci_platform)
            out.write("    name: %s examples", lang.name)
            out.write("    platform: %s", ci_platform)
            _write_task_environment(out, ci_platform)
            if ci_platform != "windows":
                for flag in EXTRA_PLATFORM_FLAGS.get(ci_platform, ()):
                    out.write('     - export BAZEL_EXTRA_FLAGS="%s $BAZEL_EXTRA_FLAGS"', flag)
            for rule in rules:
                out.write(
                    "     - %s %s_%s_example", _make_command(ci_platform), lang.name, rule.name
                )
            out.blank()

    # Test workspaces
    test_workspaces = find_test_workspace_names(output.root)
    for ci_platform in CI_PLATFORMS:
        out.write("  %s_test_workspaces:", ci_platform)
        out.write("    name: test workspaces")
        out.write("    platform: %s", ci_platform)
        _write_task_environment(out, ci_platform)
        for workspace in test_workspaces:
            out.write("     - %s test_workspace_%s", _make_command(ci_platform), workspace)
        out.blank()

    output.write(out, ".bazelci", "presubmit.yml")
