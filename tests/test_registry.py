"""Tests for the language registry."""

import pytest
from pydantic import ValidationError

from rulegen.lib.template import render
from rulegen.registry import COMMON_FIELDS, Language, make_languages, rule_context

from conftest import make_rule


def test_language_order_is_stable():
    names = [lang.name for lang in make_languages()]
    assert names == ["buf", "c", "cpp", "doc", "go", "grpc_gateway", "python"]


def test_rule_names_unique_within_each_language():
    for lang in make_languages():
        names = [rule.name for rule in lang.rules]
        assert len(names) == len(set(names)), lang.name


def test_duplicate_rule_names_rejected():
    with pytest.raises(ValidationError, match="Duplicate rule"):
        Language(
            name="dup",
            display_name="Dup",
            rules=(make_rule("dup_compile"), make_rule("dup_compile")),
        )


def test_alias_to_unknown_rule_rejected():
    with pytest.raises(ValidationError, match="unknown rule"):
        Language(
            name="alias",
            display_name="Alias",
            rules=(make_rule("alias_compile"),),
            aliases={"old_compile": "missing_compile"},
        )


def test_models_are_frozen(sample_language):
    with pytest.raises(ValidationError):
        sample_language.name = "other"
    with pytest.raises(ValidationError):
        sample_language.rules[0].doc = "changed"


def test_path_depth_counts_segments():
    assert Language(name="cpp", display_name="C++").path_depth == 1
    assert Language(name="grpc/web", display_name="gRPC-Web").path_depth == 2


def test_every_rule_template_renders():
    """Implementation and example templates render with the shared context."""
    for lang in make_languages():
        for rule in lang.rules:
            data = rule_context(lang, rule, COMMON_FIELDS)
            implementation = render(rule.implementation, data, name=rule.name)
            example = render(rule.build_example, data, name=rule.name)
            assert rule.name in implementation
            assert f'"{rule.name}"' in example
        if lang.notes:
            render(lang.notes, {"lang": lang})


def test_compile_rules_reference_their_plugins():
    cpp = next(lang for lang in make_languages() if lang.name == "cpp")
    rule = next(rule for rule in cpp.rules if rule.name == "cpp_grpc_compile")
    rendered = render(rule.implementation, rule_context(cpp, rule, COMMON_FIELDS))
    assert 'Label("@rules_proto_grpc_cpp//:proto_plugin"),' in rendered
    assert 'Label("@rules_proto_grpc_cpp//:grpc_plugin"),' in rendered


def test_library_template_forwards_args_and_grpc_deps():
    cpp = next(lang for lang in make_languages() if lang.name == "cpp")
    rules = {rule.name: rule for rule in cpp.rules}

    grpc = render(
        rules["cpp_grpc_library"].implementation,
        rule_context(cpp, rules["cpp_grpc_library"], COMMON_FIELDS),
    )
    assert 'load(":cpp_grpc_compile.bzl", "cpp_grpc_compile")' in grpc
    assert "        for (k, v) in kwargs.items()" in grpc
    assert "PROTO_DEPS + GRPC_DEPS + kwargs" in grpc
    assert grpc.endswith("]")

    proto = render(
        rules["cpp_proto_library"].implementation,
        rule_context(cpp, rules["cpp_proto_library"], COMMON_FIELDS),
    )
    assert "GRPC_DEPS" not in proto
    assert proto.endswith("]")


def test_grpc_gateway_depends_on_go():
    gateway = next(lang for lang in make_languages() if lang.name == "grpc_gateway")
    assert gateway.depends_on == ("go",)
    assert gateway.aliases == {"gateway_swagger_compile": "gateway_openapiv2_compile"}


def test_buf_rules_are_tests():
    buf = next(lang for lang in make_languages() if lang.name == "buf")
    assert all(rule.is_test for rule in buf.rules)
