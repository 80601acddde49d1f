"""Documentation generation rules, built on protoc-gen-doc."""

from __future__ import annotations

from .common import PROTO_COMPILE_RULE_TEMPLATE, compile_rule_attrs
from .spec import Language, Rule

DOC_COMPILE_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "greeter_{{ rule.name | replace("_compile", "") }}",
    protos = [
        "@rules_proto_grpc_example_protos//:greeter_grpc",
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
    ],
)"""

DOC_TEMPLATE_COMPILE_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "greeter_{{ rule.name | replace("_compile", "") }}",
    extra_protoc_files = ["template.txt"],
    options = {
        "@rules_proto_grpc_{{ lang.name }}//:template_plugin": [
            "$(location template.txt),greeter.txt",
        ],
    },
    protos = [
        "@rules_proto_grpc_example_protos//:greeter_grpc",
        "@rules_proto_grpc_example_protos//:person_proto",
        "@rules_proto_grpc_example_protos//:place_proto",
        "@rules_proto_grpc_example_protos//:thing_proto",
    ],
)"""


def doc_rule(format: str, display: str) -> Rule:
    return Rule(
        name=f"doc_{format}_compile",
        kind="doc",
        doc=f"Generates {display} protobuf documentation file",
        attrs=compile_rule_attrs(),
        implementation=PROTO_COMPILE_RULE_TEMPLATE,
        build_example=DOC_COMPILE_EXAMPLE_TEMPLATE,
        plugins=(f"//:{format}_plugin",),
    )


def make_doc() -> Language:
    return Language(
        name="doc",
        display_name="Documentation",
        notes="""Rules for generating protobuf Docbook, HTML, JSON and Markdown documentation with `protoc-gen-doc <https://github.com/pseudomuto/protoc-gen-doc>`_""",
        rules=(
            doc_rule("docbook", "Docbook XML"),
            doc_rule("html", "HTML"),
            doc_rule("json", "JSON"),
            doc_rule("markdown", "Markdown"),
            Rule(
                name="doc_template_compile",
                kind="doc",
                doc="Generates documentation file using Go template file",
                attrs=compile_rule_attrs(),
                implementation=PROTO_COMPILE_RULE_TEMPLATE,
                build_example=DOC_TEMPLATE_COMPILE_EXAMPLE_TEMPLATE,
                plugins=("//:template_plugin",),
                # Template path separators differ on Windows
                skip_test_platforms=("windows",),
            ),
        ),
    )
