"""C rules, built on upb."""

from __future__ import annotations

from .common import (
    PROTO_COMPILE_EXAMPLE_TEMPLATE,
    PROTO_COMPILE_RULE_TEMPLATE,
    PROTO_LIBRARY_EXAMPLE_TEMPLATE,
    compile_rule_attrs,
    library_rule_attrs,
    passthrough_attr,
)
from .spec import Language, Rule

C_LIBRARY_RULE_TEMPLATE = """load("@rules_cc//cc:defs.bzl", "cc_library")
load("@rules_proto_grpc//:defs.bzl", "bazel_build_rule_common_attrs", "filter_files", "proto_compile_attrs")
load(":c_proto_compile.bzl", "c_proto_compile")

def {{ rule.name }}(name, **kwargs):  # buildifier: disable=function-docstring
    # Compile protos
    name_pb = name + "_pb"
    c_proto_compile(
        name = name_pb,
        {{ common.compile_args_forwarding | indent(8) }}
    )

    # Filter files to sources and headers
    filter_files(
        name = name_pb + "_srcs",
        target = name_pb,
        extensions = ["c"],
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
        deps = PROTO_DEPS + kwargs.get("deps", []),
        hdrs = [name_pb + "_hdrs"],
        includes = [name_pb],
        copts = kwargs.get("copts"),
        defines = kwargs.get("defines"),
        linkopts = kwargs.get("linkopts"),
        local_defines = kwargs.get("local_defines"),
        {{ common.library_args_forwarding | indent(8) }}
    )

PROTO_DEPS = [
    Label("@protobuf//upb:generated_code_support__only_for_generated_code_do_not_use__i_give_permission_to_break_me"),
    Label("@protobuf//upb:mem"),
    Label("@protobuf//upb:message"),
    Label("@protobuf//upb:port"),
]"""


def make_c() -> Language:
    library_attrs = library_rule_attrs("cc_library") + tuple(
        passthrough_attr(name, type, "cc_library")
        for name, type in [
            ("copts", "string_list"),
            ("defines", "string_list"),
            ("linkopts", "string_list"),
            ("local_defines", "string_list"),
        ]
    )

    return Language(
        name="c",
        display_name="C",
        notes="""Rules for generating C protobuf ``.c`` & ``.h`` files and libraries using `upb <https://github.com/protocolbuffers/protobuf/tree/main/upb>`_. Libraries are created with the Bazel native ``cc_library``""",
        rules=(
            Rule(
                name="c_proto_compile",
                kind="proto",
                doc="Generates C protobuf ``.h`` & ``.c`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=PROTO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:upb_plugin",),
                experimental=True,
            ),
            Rule(
                name="c_proto_library",
                kind="proto",
                doc="Generates a C protobuf library using ``cc_library``, with dependencies linked",
                attrs=library_attrs,
                implementation=C_LIBRARY_RULE_TEMPLATE,
                build_example=PROTO_LIBRARY_EXAMPLE_TEMPLATE,
                experimental=True,
            ),
        ),
    )
