"""Go rules, built on rules_go."""

from __future__ import annotations

from .common import PROTO_COMPILE_RULE_TEMPLATE, compile_rule_attrs, library_rule_attrs
from .spec import Attr, Language, Rule

GO_LIBRARY_RULE_TEMPLATE = """{% set compile_rule = rule.name | replace("_library", "_compile") %}
load("@rules_go//go:def.bzl", "go_library")
load("@rules_proto_grpc//:defs.bzl", "bazel_build_rule_common_attrs", "proto_compile_attrs")
load(":{{ compile_rule }}.bzl", "{{ compile_rule }}")

def {{ rule.name }}(name, **kwargs):  # buildifier: disable=function-docstring
    # Compile protos
    name_pb = name + "_pb"
    {{ compile_rule }}(
        name = name_pb,
        {{ common.compile_args_forwarding | indent(8) }}
    )

    # Create {{ lang.name }} library
    go_library(
        name = name,
        srcs = [name_pb],
        deps = PROTO_DEPS{% if rule.kind == "grpc" %} + GRPC_DEPS{% endif %}{% if rule.kind == "validate" %} + VALIDATE_DEPS{% endif %} + kwargs.get("deps", []),
        importpath = kwargs.get("importpath"),
        {{ common.library_args_forwarding | indent(8) }}
    )

PROTO_DEPS = [
    Label("@org_golang_google_protobuf//reflect/protoreflect"),
    Label("@org_golang_google_protobuf//runtime/protoimpl"),
]
{%- if rule.kind == "grpc" %}


GRPC_DEPS = [
    Label("@org_golang_google_grpc//:grpc"),
    Label("@org_golang_google_grpc//codes"),
    Label("@org_golang_google_grpc//status"),
]
{%- endif %}
{%- if rule.kind == "validate" %}


VALIDATE_DEPS = [
    Label("@com_envoyproxy_protoc_gen_validate//validate:validate_go_proto"),
]
{%- endif %}"""

GO_COMPILE_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "{{ rule.name | replace("_compile", "") }}",
    protos = [
{% if rule.kind == "grpc" %}
        "@rules_proto_grpc_example_protos//:greeter_grpc",
{% else %}
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
{% endif %}
    ],
)"""

GO_LIBRARY_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "{{ rule.name | replace("_library", "") }}",
    importpath = "github.com/rules-proto-grpc/rules_proto_grpc/examples/proto",
    protos = [
{% if rule.kind == "grpc" %}
        "@rules_proto_grpc_example_protos//:greeter_grpc",
{% endif %}
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
    ],
)"""

GO_MODULE_EXTRA_LINES = """go_sdk = use_extension("@rules_go//go:extensions.bzl", "go_sdk")
go_sdk.download(version = "1.22.4")"""


def go_library_attrs() -> tuple[Attr, ...]:
    return library_rule_attrs("go_library") + (
        Attr(
            name="importpath",
            type="string",
            default="None",
            doc="Importpath for the generated files",
        ),
    )


def make_go() -> Language:
    return Language(
        name="go",
        display_name="Go",
        notes="""Rules for generating Go protobuf and gRPC ``.go`` files and libraries using `golang/protobuf <https://github.com/golang/protobuf>`_. Libraries are created with ``go_library`` from `rules_go <https://github.com/bazelbuild/rules_go>`_""",
        module_extra_lines=GO_MODULE_EXTRA_LINES,
        rules=(
            Rule(
                name="go_proto_compile",
                kind="proto",
                doc="Generates Go protobuf ``.go`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin",),
            ),
            Rule(
                name="go_grpc_compile",
                kind="grpc",
                doc="Generates Go protobuf and gRPC ``.go`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:grpc_plugin"),
            ),
            Rule(
                name="go_validate_compile",
                kind="validate",
                doc="Generates Go protobuf and validation ``.go`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:validate_plugin"),
                experimental=True,
            ),
            Rule(
                name="go_proto_library",
                kind="proto",
                doc="Generates a Go protobuf library using ``go_library`` from ``rules_go``",
                attrs=go_library_attrs(),
                implementation=GO_LIBRARY_RULE_TEMPLATE,
                build_example=GO_LIBRARY_EXAMPLE_TEMPLATE,
            ),
            Rule(
                name="go_grpc_library",
                kind="grpc",
                doc="Generates a Go protobuf and gRPC library using ``go_library`` from ``rules_go``",
                attrs=go_library_attrs(),
                implementation=GO_LIBRARY_RULE_TEMPLATE,
                build_example=GO_LIBRARY_EXAMPLE_TEMPLATE,
            ),
            Rule(
                name="go_validate_library",
                kind="validate",
                doc="Generates a Go protobuf and validation library using ``go_library`` from ``rules_go``",
                attrs=go_library_attrs(),
                implementation=GO_LIBRARY_RULE_TEMPLATE,
                build_example=GO_LIBRARY_EXAMPLE_TEMPLATE,
                experimental=True,
            ),
        ),
    )
