"""Tests for the repository-wide emitters."""

import pytest

from rulegen.emit import (
    find_test_workspace_names,
    write_bazelignore,
    write_examples_makefile,
    write_index_rst,
    write_module_bazel,
    write_readme,
    write_test_workspaces_makefile,
)
from rulegen.lib.errors import OutputError, TemplateRenderError
from rulegen.lib.writer import Output
from rulegen.registry import Language

from conftest import make_rule

RELEASE = {"ref": "5.0.0", "sha256": "abc123"}


@pytest.fixture
def nested_language() -> Language:
    return Language(
        name="grpc/web",
        display_name="gRPC-Web",
        rules=(make_rule("web_compile"),),
    )


def test_module_bazel_header_then_language_blocks(output, template_files, sample_language):
    write_module_bazel(output, template_files["module_template"], [sample_language])

    content = (output.root / "MODULE.bazel").read_text()
    assert content.startswith('module(name = "rules_proto_grpc_workspace")\n\n# Sample\n')
    assert 'bazel_dep(name = "rules_proto_grpc_sample", version = "0.0.0.rpg.version.placeholder")' in content
    assert '    path = "modules/sample",\n)\n\nregister_toolchains' in content
    assert content.endswith('register_toolchains("//:sample_toolchain")\n')


def test_module_bazel_missing_template(output, tmp_path, sample_language):
    with pytest.raises(TemplateRenderError):
        write_module_bazel(output, tmp_path / "missing", [sample_language])


def test_bazelignore(output, sample_language):
    write_bazelignore(output, [sample_language])

    assert (output.root / ".bazelignore").read_text() == (
        "modules\n"
        "test_workspaces\n"
        "\n"
        "examples/sample/sample_proto_compile\n"
        "examples/sample/sample_grpc_library\n"
        "examples/sample/sample_lint_test\n"
    )


def test_readme_rules_table(output, template_files, sample_language):
    write_readme(
        output,
        template_files["readme_header_template"],
        template_files["readme_footer_template"],
        RELEASE,
        [sample_language],
    )

    content = (output.root / "README.md").read_text()
    assert content.startswith("# Header 5.0.0 abc123\n\n\n## Rules\n")
    assert content.endswith("## Footer\n")
    rows = [line for line in content.split("\n") if line.startswith("| [")]
    assert len(rows) == 3
    assert rows[0] == (
        "| [Sample](https://rules-proto-grpc.com/en/latest/lang/sample.html) "
        "| [sample_proto_compile](https://rules-proto-grpc.com/en/latest/lang/sample.html#sample-proto-compile) "
        "| Docs for sample_proto_compile ([example](/examples/sample/sample_proto_compile)) |"
    )


def test_index_rst_substitutes_release(output, template_files):
    write_index_rst(output, template_files["index_template"], RELEASE)
    assert (output.root / "docs" / "index.rst").read_text() == "Index 5.0.0 abc123\n"


def test_examples_makefile_build_and_test_targets(output, sample_language):
    write_examples_makefile(output, [sample_language])

    content = (output.root / "examples" / "Makefile.mk").read_text()
    root = output.root.as_posix()
    assert (
        ".PHONY: sample_sample_proto_compile_example\n"
        "sample_sample_proto_compile_example:\n"
        f"\tcd {root}/examples/sample/sample_proto_compile; \\\n"
        "\tbazel --batch build --enable_bzlmod ${BAZEL_EXTRA_FLAGS} --verbose_failures "
        "--disk_cache=../../bazel-disk-cache //...\n"
    ) in content
    assert (
        "\tbazel --batch test --enable_bzlmod ${BAZEL_EXTRA_FLAGS} --verbose_failures "
        "--test_output=errors --disk_cache=../../bazel-disk-cache //...\n"
    ) in content
    assert content.count("bazel --batch test") == 1


def test_examples_makefile_aggregate_targets(output, sample_language, nested_language):
    write_examples_makefile(output, [sample_language, nested_language])

    content = (output.root / "examples" / "Makefile.mk").read_text()
    assert (
        "sample_examples: sample_sample_proto_compile_example "
        "sample_sample_grpc_library_example sample_sample_lint_test_example\n"
    ) in content
    assert "grpc/web_examples: grpc/web_web_compile_example\n" in content
    assert content.endswith(
        ".PHONY: all_examples\n"
        "all_examples: sample_sample_proto_compile_example sample_sample_grpc_library_example "
        "sample_sample_lint_test_example grpc/web_web_compile_example\n"
    )


def test_examples_makefile_disk_cache_depth(output, nested_language):
    write_examples_makefile(output, [nested_language])

    content = (output.root / "examples" / "Makefile.mk").read_text()
    assert "--disk_cache=../../../bazel-disk-cache //..." in content


def test_test_workspaces_makefile(output):
    write_test_workspaces_makefile(output)

    content = (output.root / "test_workspaces" / "Makefile.mk").read_text()
    assert f"\tcd {output.root.as_posix()}/test_workspaces/cpp_deps; \\\n" in content
    assert "--disk_cache=../bazel-disk-cache --test_output=errors //...\n" in content
    assert content.endswith(
        "all_test_workspaces: test_workspace_cpp_deps test_workspace_python_deps\n"
    )
    assert "hidden" not in content
    assert "bazel-out" not in content


def test_find_test_workspace_names(repo):
    assert find_test_workspace_names(repo) == ["cpp_deps", "python_deps"]


def test_find_test_workspace_names_missing_dir(tmp_path):
    with pytest.raises(OutputError) as exc_info:
        find_test_workspace_names(tmp_path / "nowhere")
    assert exc_info.value.path == tmp_path / "nowhere" / "test_workspaces"


def test_test_workspaces_makefile_empty(tmp_path):
    (tmp_path / "test_workspaces").mkdir()
    output = Output(tmp_path)
    write_test_workspaces_makefile(output)

    content = (tmp_path / "test_workspaces" / "Makefile.mk").read_text()
    assert content == ".PHONY: all_test_workspaces\nall_test_workspaces: \n"
