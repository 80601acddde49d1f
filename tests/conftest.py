"""Shared fixtures for rulegen tests."""

from pathlib import Path

import pytest

from rulegen.lib.config import GeneratorOptions
from rulegen.lib.writer import Output
from rulegen.registry import Attr, Language, Rule

SIMPLE_IMPLEMENTATION = """{{ rule.name }} = rule(
    implementation = _impl,
)"""

SIMPLE_EXAMPLE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "example",
)"""


def make_rule(name: str, **kwargs) -> Rule:
    """Rule with minimal templates, for emitter tests."""
    kwargs.setdefault("implementation", SIMPLE_IMPLEMENTATION)
    kwargs.setdefault("build_example", SIMPLE_EXAMPLE)
    kwargs.setdefault("doc", f"Docs for {name}")
    return Rule(name=name, **kwargs)


@pytest.fixture
def sample_language() -> Language:
    return Language(
        name="sample",
        display_name="Sample",
        rules=(
            make_rule(
                "sample_proto_compile",
                attrs=(
                    Attr(name="protos", type="label_list", mandatory=True, doc="Protos"),
                    Attr(name="verbose", type="int", default="0", doc="Verbosity"),
                    Attr(name="options", type="string_list_dict", doc="Options"),
                ),
                plugins=("//:proto_plugin",),
            ),
            make_rule("sample_grpc_library", kind="grpc", experimental=True),
            make_rule("sample_lint_test", is_test=True),
        ),
        depends_on=("core_dep",),
        aliases={"sample_legacy_compile": "sample_proto_compile"},
        extra_defs={"sample_extra": "@other//:defs.bzl"},
        notes="Rules for {{ lang.display_name }}.",
        module_extra_lines='register_toolchains("//:sample_toolchain")',
    )


@pytest.fixture
def template_files(tmp_path: Path) -> dict[str, Path]:
    """Small header, footer, index and module templates."""
    templates = tmp_path / "templates"
    templates.mkdir()
    files = {
        "module_template": templates / "MODULE.bazel.template",
        "readme_header_template": templates / "README.header.md",
        "readme_footer_template": templates / "README.footer.md",
        "index_template": templates / "index.rst",
    }
    files["module_template"].write_text('module(name = "rules_proto_grpc_workspace")\n')
    files["readme_header_template"].write_text("# Header {{ ref }} {{ sha256 }}\n")
    files["readme_footer_template"].write_text("## Footer\n")
    files["index_template"].write_text("Index {{ ref }} {{ sha256 }}\n")
    return files


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Output root with two test workspaces plus directories that must be skipped."""
    root = tmp_path / "repo"
    for name in ["python_deps", "cpp_deps", ".hidden", "bazel-out"]:
        (root / "test_workspaces" / name).mkdir(parents=True)
    (root / "test_workspaces" / "README.md").write_text("not a workspace")
    return root


@pytest.fixture
def available_tests(tmp_path: Path) -> Path:
    path = tmp_path / "available_tests.txt"
    path.write_text(
        "//examples/routeguide:cpp_cpp\n"
        "//examples/routeguide:go_go\n"
        "//examples/routeguide:go_python\n"
        "//examples/routeguide:python_python\n"
    )
    return path


@pytest.fixture
def options(repo: Path, template_files: dict[str, Path], available_tests: Path) -> GeneratorOptions:
    return GeneratorOptions(dir=repo, available_tests=available_tests, **template_files)


@pytest.fixture
def output(repo: Path) -> Output:
    return Output(repo)
