"""Buf lint and breaking-change test rules."""

from __future__ import annotations

from .spec import Attr, Language, Rule

BUF_TEST_RULE_TEMPLATE = """load("@rules_proto_grpc//:defs.bzl", "ProtoPluginInfo", "proto_compile_toolchains")
load("//internal:test.bzl", "buf_test_impl")

# Create test rule
{{ rule.name }} = rule(
    implementation = buf_test_impl,
    attrs = dict(
{% for attr in rule.attrs %}
        {{ attr.name }} = attr.{{ attr.type }}(
{% if attr.mandatory %}
            mandatory = True,
{% else %}
            default = {{ attr.default }},
{% endif %}
            doc = "{{ attr.doc }}",
        ),
{% endfor %}
        _plugins = attr.label_list(
            providers = [ProtoPluginInfo],
            default = [
{% for plugin in rule.plugins %}
                Label("@rules_proto_grpc_{{ lang.name }}{{ plugin }}"),
{% endfor %}
            ],
            doc = "List of protoc plugins to apply",
        ),
    ),
    toolchains = proto_compile_toolchains,
    test = True,
)"""


PROTOS_ATTR = Attr(
    name="protos",
    type="label_list",
    mandatory=True,
    doc="List of labels that provide the ``ProtoInfo`` provider (such as ``proto_library`` from ``rules_proto``)",
)


def rules_attr(name: str, default: str, check: str, verb: str) -> Attr:
    return Attr(
        name=name,
        type="string_list",
        default=default,
        doc=f"List of Buf {check} rules or categories to {verb}",
    )


def make_buf() -> Language:
    return Language(
        name="buf",
        display_name="Buf",
        platforms=("linux", "macos"),
        notes="""Rules for linting and detecting breaking changes in .proto files with `Buf <https://buf.build>`_.

Note that these rules behave differently from the other rules in this repo, since these produce no output and are instead used as tests. Therefore, these are used with ``bazel test`` rather than ``bazel build``. Examples are shown below to explain how to use these rules.""",
        rules=(
            Rule(
                name="buf_proto_breaking_test",
                kind="buf",
                doc="Checks .proto files for breaking changes",
                attrs=(
                    PROTOS_ATTR,
                    Attr(
                        name="against_input",
                        type="label",
                        mandatory=True,
                        doc="Label of an existing input image file to check against (.json or .bin)",
                    ),
                    rules_attr("use_rules", '["FILE"]', "breaking", "use"),
                    rules_attr("except_rules", "[]", "breaking", "ignore"),
                    Attr(
                        name="ignore_unstable_packages",
                        type="bool",
                        default="False",
                        doc="Whether to ignore breaking changes in unstable package versions",
                    ),
                ),
                implementation=BUF_TEST_RULE_TEMPLATE,
                build_example="""load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "buf_proto_breaking",
    against_input = "@rules_proto_grpc_example_protos//:buf_image.json",
    protos = [
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
    ],
)""",
                is_test=True,
                plugins=("//:breaking_plugin",),
            ),
            Rule(
                name="buf_proto_lint_test",
                kind="buf",
                doc="Lints .proto files",
                attrs=(
                    PROTOS_ATTR,
                    rules_attr("use_rules", '["DEFAULT"]', "lint", "use"),
                    rules_attr("except_rules", "[]", "lint", "ignore"),
                    Attr(
                        name="enum_zero_value_suffix",
                        type="string",
                        default='"_UNSPECIFIED"',
                        doc="Specify the allowed suffix for the zero enum value",
                    ),
                    Attr(
                        name="rpc_allow_same_request_response",
                        type="bool",
                        default="False",
                        doc="Allow request and response message to be reused in a single rpc",
                    ),
                    Attr(
                        name="rpc_allow_google_protobuf_empty_requests",
                        type="bool",
                        default="False",
                        doc="Allow request message to be google.protobuf.Empty",
                    ),
                    Attr(
                        name="rpc_allow_google_protobuf_empty_responses",
                        type="bool",
                        default="False",
                        doc="Allow response message to be google.protobuf.Empty",
                    ),
                    Attr(
                        name="service_suffix",
                        type="string",
                        default='"Service"',
                        doc="The suffix to allow for services",
                    ),
                ),
                implementation=BUF_TEST_RULE_TEMPLATE,
                build_example="""load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "buf_proto_lint",
    except_rules = ["PACKAGE_VERSION_SUFFIX"],
    protos = [
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
    ],
    use_rules = [
        "DEFAULT",
        "COMMENTS",
    ],
)""",
                is_test=True,
                plugins=("//:lint_plugin",),
            ),
        ),
    )
