"""gRPC-Gateway rules."""

from __future__ import annotations

from .common import PROTO_COMPILE_RULE_TEMPLATE, compile_rule_attrs, library_rule_attrs
from .spec import Attr, Language, Rule

GATEWAY_LIBRARY_RULE_TEMPLATE = """load("@rules_go//go:def.bzl", "go_library")
load("@rules_proto_grpc//:defs.bzl", "bazel_build_rule_common_attrs", "proto_compile_attrs")
load("@rules_proto_grpc_go//:go_grpc_library.bzl", "GRPC_DEPS", "PROTO_DEPS")
load(":gateway_grpc_compile.bzl", "gateway_grpc_compile")

def {{ rule.name }}(name, **kwargs):  # buildifier: disable=function-docstring
    # Compile protos
    name_pb = name + "_pb"
    gateway_grpc_compile(
        name = name_pb,
        {{ common.compile_args_forwarding | indent(8) }}
    )

    # Create {{ lang.name }} library
    go_library(
        name = name,
        srcs = [name_pb],
        deps = PROTO_DEPS + GRPC_DEPS + GATEWAY_DEPS + kwargs.get("deps", []),
        importpath = kwargs.get("importpath"),
        {{ common.library_args_forwarding | indent(8) }}
    )

GATEWAY_DEPS = [
    Label("@org_golang_google_protobuf//proto"),
    Label("@grpc_ecosystem_grpc_gateway_v2//runtime"),
    Label("@grpc_ecosystem_grpc_gateway_v2//utilities"),
    Label("@org_golang_google_genproto_googleapis_api//annotations"),
    Label("@org_golang_google_grpc//grpclog"),
    Label("@org_golang_google_grpc//metadata"),
]"""

GATEWAY_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "api_{{ rule.name | replace("gateway_", "") }}",
{% if rule.name.endswith("_library") %}
    importpath = "github.com/rules-proto-grpc/rules_proto_grpc/modules/grpc_gateway/examples/api",
{% endif %}
    protos = ["@rules_proto_grpc_{{ lang.name }}//examples/api:api_proto"],
)"""


def make_grpc_gateway() -> Language:
    return Language(
        name="grpc_gateway",
        display_name="grpc-gateway",
        depends_on=("go",),
        aliases={"gateway_swagger_compile": "gateway_openapiv2_compile"},
        platforms=("linux", "macos"),
        notes="""Rules for generating `grpc-gateway <https://github.com/grpc-ecosystem/grpc-gateway>`_ ``.go`` files and libraries, and OpenAPI v2 files.

These rules depend on the Go rules, so ``{{ lang.display_name }}`` examples also pull in ``rules_proto_grpc_go``.""",
        rules=(
            Rule(
                name="gateway_grpc_compile",
                kind="grpc",
                doc="Generates grpc-gateway ``.go`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GATEWAY_EXAMPLE_TEMPLATE,
                plugins=("//:grpc_gateway_plugin",),
            ),
            Rule(
                name="gateway_openapiv2_compile",
                kind="grpc",
                doc="Generates grpc-gateway OpenAPI v2 ``.json`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GATEWAY_EXAMPLE_TEMPLATE,
                plugins=("//:openapiv2_plugin",),
            ),
            Rule(
                name="gateway_grpc_library",
                kind="grpc",
                doc="Generates grpc-gateway library files",
                attrs=library_rule_attrs("go_library")
                + (
                    Attr(
                        name="importpath",
                        type="string",
                        default="None",
                        doc="Importpath for the generated files",
                    ),
                ),
                implementation=GATEWAY_LIBRARY_RULE_TEMPLATE,
                build_example=GATEWAY_EXAMPLE_TEMPLATE,
            ),
        ),
    )
