"""C++ rules."""

from __future__ import annotations

from .common import (
    GRPC_COMPILE_EXAMPLE_TEMPLATE,
    GRPC_LIBRARY_EXAMPLE_TEMPLATE,
    PROTO_COMPILE_EXAMPLE_TEMPLATE,
    PROTO_COMPILE_RULE_TEMPLATE,
    PROTO_LIBRARY_EXAMPLE_TEMPLATE,
    compile_rule_attrs,
    library_rule_attrs,
    passthrough_attr,
)
from .spec import Attr, Language, Rule

CPP_LIBRARY_RULE_TEMPLATE = """{% set compile_rule = rule.name | replace("_library", "_compile") %}
load("@rules_cc//cc:defs.bzl", "cc_library")
load("@rules_proto_grpc//:defs.bzl", "bazel_build_rule_common_attrs", "filter_files", "proto_compile_attrs")
load(":{{ compile_rule }}.bzl", "{{ compile_rule }}")

def {{ rule.name }}(name, **kwargs):  # buildifier: disable=function-docstring
    # Compile protos
    name_pb = name + "_pb"
    {{ compile_rule }}(
        name = name_pb,
        {{ common.compile_args_forwarding | indent(8) }}
    )

    # Filter files to sources and headers
    filter_files(
        name = name_pb + "_srcs",
        target = name_pb,
        extensions = ["cc"],
    )

    filter_files(
        name = name_pb + "_hdrs",
        target = name_pb,
        extensions = ["h"],
    )

    # Create {{ lang.name }} library
    cc_library(
        name = name,
        srcs = [name_pb + "_srcs"],
        deps = PROTO_DEPS{% if rule.kind == "grpc" %} + GRPC_DEPS{% endif %} + kwargs.get("deps", []),
        hdrs = [name_pb + "_hdrs"],
        includes = [name_pb],
        alwayslink = kwargs.get("alwayslink"),
        copts = kwargs.get("copts"),
        defines = kwargs.get("defines"),
        include_prefix = kwargs.get("include_prefix"),
        linkopts = kwargs.get("linkopts"),
        linkstatic = kwargs.get("linkstatic"),
        local_defines = kwargs.get("local_defines"),
        strip_include_prefix = kwargs.get("strip_include_prefix"),
        {{ common.library_args_forwarding | indent(8) }}
    )

PROTO_DEPS = [
    Label("@protobuf//:protobuf"),
]
{%- if rule.kind == "grpc" %}


GRPC_DEPS = [
    Label("@grpc//:grpc++"),
    Label("@grpc//:grpc++_reflection"),
]
{%- endif %}"""


def cc_library_attrs() -> tuple[Attr, ...]:
    return library_rule_attrs("cc_library") + tuple(
        passthrough_attr(name, type, "cc_library")
        for name, type in [
            ("alwayslink", "bool"),
            ("copts", "string_list"),
            ("defines", "string_list"),
            ("include_prefix", "string"),
            ("linkopts", "string_list"),
            ("linkstatic", "bool"),
            ("local_defines", "string_list"),
            ("strip_include_prefix", "string"),
        ]
    )


def make_cpp() -> Language:
    return Language(
        name="cpp",
        display_name="C++",
        rules=(
            Rule(
                name="cpp_proto_compile",
                kind="proto",
                doc="Generates C++ protobuf ``.h`` & ``.cc`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=PROTO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin",),
            ),
            Rule(
                name="cpp_grpc_compile",
                kind="grpc",
                doc="Generates C++ protobuf and gRPC ``.h`` & ``.cc`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GRPC_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:grpc_plugin"),
            ),
            Rule(
                name="cpp_proto_library",
                kind="proto",
                doc="Generates a C++ protobuf library using ``cc_library``, with dependencies linked",
                attrs=cc_library_attrs(),
                implementation=CPP_LIBRARY_RULE_TEMPLATE,
                build_example=PROTO_LIBRARY_EXAMPLE_TEMPLATE,
            ),
            Rule(
                name="cpp_grpc_library",
                kind="grpc",
                doc="Generates a C++ protobuf and gRPC library using ``cc_library``, with dependencies linked",
                attrs=cc_library_attrs(),
                implementation=CPP_LIBRARY_RULE_TEMPLATE,
                build_example=GRPC_LIBRARY_EXAMPLE_TEMPLATE,
            ),
        ),
    )
