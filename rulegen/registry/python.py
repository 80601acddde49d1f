"""Python rules, built on rules_python."""

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
from .spec import Language, Rule

PYTHON_LIBRARY_RULE_TEMPLATE = """{% set compile_rule = rule.name | replace("_library", "_compile") %}
load("@rules_python//python:defs.bzl", "py_library")
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
    py_library(
        name = name,
        srcs = [name_pb],
        deps = PROTO_DEPS{% if rule.kind == "grpc" %} + GRPC_DEPS{% endif %} + kwargs.get("deps", []),
        data = kwargs.get("data", []),
        imports = [name_pb],
        {{ common.library_args_forwarding | indent(8) }}
    )

PROTO_DEPS = [
    Label("@protobuf//:protobuf_python"),
]
{%- if rule.kind == "grpc" %}


GRPC_DEPS = [
    Label("@pypi__rules_proto_grpc_python//grpcio"),
]
{%- endif %}"""

PYTHON_MODULE_EXTRA_LINES = """python = use_extension("@rules_python//python/extensions:python.bzl", "python")
python.toolchain(
    ignore_root_user_error = True,
    python_version = "3.11",
)"""


def make_python() -> Language:
    library_attrs = library_rule_attrs("py_library") + (
        passthrough_attr("data", "label_list", "py_library"),
    )

    return Language(
        name="python",
        display_name="Python",
        notes="""Rules for generating {{ lang.display_name }} protobuf and gRPC ``.py`` files and libraries using standard Protocol Buffers and `gRPC <https://grpc.io>`_, or `grpclib <https://github.com/vmagamedov/grpclib>`_. Libraries are created with ``py_library`` from ``rules_python``""",
        module_extra_lines=PYTHON_MODULE_EXTRA_LINES,
        rules=(
            Rule(
                name="python_proto_compile",
                kind="proto",
                doc="Generates Python protobuf ``.py`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=PROTO_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:pyi_plugin"),
            ),
            Rule(
                name="python_grpc_compile",
                kind="grpc",
                doc="Generates Python protobuf and gRPC ``.py`` files",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GRPC_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:pyi_plugin", "//:grpc_plugin"),
            ),
            Rule(
                name="python_grpclib_compile",
                kind="grpc",
                doc="Generates Python protobuf and grpclib ``.py`` files (supports Python 3 only)",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=GRPC_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:proto_plugin", "//:pyi_plugin", "//:grpclib_plugin"),
            ),
            Rule(
                name="python_proto_library",
                kind="proto",
                doc="Generates a Python protobuf library using ``py_library`` from ``rules_python``",
                attrs=library_attrs,
                implementation=PYTHON_LIBRARY_RULE_TEMPLATE,
                build_example=PROTO_LIBRARY_EXAMPLE_TEMPLATE,
            ),
            Rule(
                name="python_grpc_library",
                kind="grpc",
                doc="Generates a Python protobuf and gRPC library using ``py_library`` from ``rules_python``",
                attrs=library_attrs,
                implementation=PYTHON_LIBRARY_RULE_TEMPLATE,
                build_example=GRPC_LIBRARY_EXAMPLE_TEMPLATE,
            ),
        ),
    )
