"""Attributes, templates and snippets shared by the language builders."""

from __future__ import annotations

from .spec import Attr, CommonFields

COMMON_FIELDS = CommonFields(
    compile_args_forwarding="""**{
    k: v
    for (k, v) in kwargs.items()
    if k in proto_compile_attrs.keys() or
       k in bazel_build_rule_common_attrs
},  # Forward args""",
    library_args_forwarding="""**{
    k: v
    for (k, v) in kwargs.items()
    if k in bazel_build_rule_common_attrs
},  # Forward Bazel common args""",
)


PROTO_COMPILE_RULE_TEMPLATE = """load(
    "@rules_proto_grpc//:defs.bzl",
    "ProtoPluginInfo",
    "proto_compile_attrs",
    "proto_compile_impl",
    "proto_compile_toolchains",
)

# Create compile rule
{{ rule.name }} = rule(
    implementation = proto_compile_impl,
    attrs = dict(
        proto_compile_attrs,
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
)"""


PROTO_COMPILE_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "person_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:person_proto"],
)

{{ rule.name }}(
    name = "place_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:place_proto"],
)

{{ rule.name }}(
    name = "thing_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:thing_proto"],
)"""


GRPC_COMPILE_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "greeter_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:greeter_grpc"],
)"""


PROTO_LIBRARY_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "person_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:person_proto"],
    deps = ["place_{{ lang.name }}_{{ rule.kind }}"],
)

{{ rule.name }}(
    name = "place_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:place_proto"],
    deps = ["thing_{{ lang.name }}_{{ rule.kind }}"],
)

{{ rule.name }}(
    name = "thing_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:thing_proto"],
)"""


GRPC_LIBRARY_EXAMPLE_TEMPLATE = """load("@rules_proto_grpc_{{ lang.name }}//:defs.bzl", "{{ rule.name }}")

{{ rule.name }}(
    name = "greeter_{{ lang.name }}_{{ rule.kind }}",
    protos = ["@rules_proto_grpc_example_protos//:greeter_grpc"],
)"""


def compile_rule_attrs() -> tuple[Attr, ...]:
    """Attributes accepted by every ``*_compile`` rule."""
    return (
        Attr(
            name="protos",
            type="label_list",
            mandatory=True,
            doc="List of labels that provide the ``ProtoInfo`` provider (such as ``proto_library`` from ``rules_proto``)",
        ),
        Attr(
            name="options",
            type="string_list_dict",
            default="[]",
            doc="Extra options to pass to plugins, as a dict of plugin label -> list of strings. The key * can be used exclusively to apply to all plugins",
        ),
        Attr(
            name="verbose",
            type="int",
            default="0",
            doc="The verbosity level. Supported values and results are 0: Show nothing, 1: Show command, 2: Show command and sandbox after running protoc, 3: Show command and sandbox before and after running protoc, 4. Show env, command, expected outputs and sandbox before and after running protoc",
        ),
        Attr(
            name="prefix_path",
            type="string",
            default='""',
            doc="Path to prefix to the generated files in the output directory",
        ),
        Attr(
            name="extra_protoc_args",
            type="string_list",
            default="[]",
            doc="A list of extra command line arguments to pass directly to protoc, not as plugin options",
        ),
        Attr(
            name="extra_protoc_files",
            type="label_list",
            default="[]",
            doc="List of labels that provide extra files to be available during protoc execution",
        ),
        Attr(
            name="output_mode",
            type="string",
            default="PREFIXED",
            doc="The output mode for the target. PREFIXED (the default) will output to a directory named by the target within the current package root, NO_PREFIX will output directly to the current package. Using NO_PREFIX may lead to conflicting writes",
        ),
    )


def library_rule_attrs(underlying_rule: str) -> tuple[Attr, ...]:
    """Attributes of a ``*_library`` macro wrapping ``underlying_rule``."""
    return compile_rule_attrs() + (
        Attr(
            name="deps",
            type="label_list",
            default="[]",
            doc=f"List of labels to pass as deps attr to underlying ``{underlying_rule}`` rule",
        ),
    )


def passthrough_attr(name: str, type: str, underlying_rule: str) -> Attr:
    """An attr forwarded unchanged to the wrapped rule."""
    return Attr(
        name=name,
        type=type,
        doc=f"Passed through to the ``{name}`` attr of the underlying ``{underlying_rule}`` rule",
    )
