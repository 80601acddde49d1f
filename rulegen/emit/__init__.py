"""Emitters - each writes one kind of generated file."""

from rulegen.emit.ci import (
    do_test_on_platform,
    is_available_test,
    load_available_tests,
    routeguide_targets,
    write_bazel_ci_presubmit,
)
from rulegen.emit.language import (
    example_module_bazel,
    write_language_defs,
    write_language_docs,
    write_language_examples,
    write_language_rules,
)
from rulegen.emit.root import (
    find_test_workspace_names,
    write_bazelignore,
    write_examples_makefile,
    write_index_rst,
    write_module_bazel,
    write_readme,
    write_test_workspaces_makefile,
)

__all__ = [
    "do_test_on_platform",
    "example_module_bazel",
    "find_test_workspace_names",
    "is_available_test",
    "load_available_tests",
    "routeguide_targets",
    "write_bazel_ci_presubmit",
    "write_bazelignore",
    "write_examples_makefile",
    "write_index_rst",
    "write_language_defs",
    "write_language_docs",
    "write_language_examples",
    "write_language_rules",
    "write_module_bazel",
    "write_readme",
    "write_test_workspaces_makefile",
]
