"""Per-language outputs: rule files, defs.bzl, docs page and example projects."""

from __future__ import annotations

from rulegen.lib.config import MODULE_VERSION_PLACEHOLDER, REPO_URL
from rulegen.lib.writer import LineWriter, Output
from rulegen.registry import CommonFields, Language, Rule, rule_context


def write_language_rules(output: Output, lang: Language, common: CommonFields) -> None:
    for rule in lang.rules:
        write_language_rule(output, lang, rule, common)


def write_language_rule(
    output: Output, lang: Language, rule: Rule, common: CommonFields
) -> None:
    """Write ``modules/<lang>/<rule>.bzl``."""
    data = rule_context(lang, rule, common)
    out = LineWriter()
    out.template('"""Generated definition of {{ rule.name }}."""', data)
    out.blank()
    out.template(rule.implementation, data)
    out.blank()
    output.write(out, "modules", lang.name, f"{rule.name}.bzl")


def write_language_defs(output: Output, lang: Language) -> None:
    """Write ``modules/<lang>/defs.bzl`` re-exporting every rule of the language.

    Loads are sorted so the file is stable regardless of declaration order;
    the export block keeps the declared order.
    """
    out = LineWriter()
    out.write('"""%s protobuf and grpc rules."""', lang.name)
    out.blank()

    for rule_name in sorted(rule.name for rule in lang.rules):
        out.write('load(":%s.bzl", _%s = "%s")', rule_name, rule_name, rule_name)
    for def_name in sorted(lang.extra_defs):
        out.write(
            'load("%s", _%s = "%s")  # buildifier: disable=same-origin-load # buildifier: disable=out-of-order-load',
            lang.extra_defs[def_name],
            def_name,
            def_name,
        )
    out.blank()

    out.write("# Export %s rules", lang.name)
    for rule in lang.rules:
        out.write("%s = _%s", rule.name, rule.name)
    out.blank()

    if lang.aliases:
        out.write("# Aliases")
        for alias in sorted(lang.aliases):
            out.write("%s = _%s", alias, lang.aliases[alias])
        out.blank()

    if lang.extra_defs:
        out.write("# Extra defs")
        for def_name in sorted(lang.extra_defs):
            out.write("%s = _%s", def_name, def_name)
        out.blank()

    output.write(out, "modules", lang.name, "defs.bzl")


def write_language_docs(output: Output, lang: Language, common: CommonFields) -> None:
    """Write the reStructuredText reference page ``docs/lang/<lang>.rst``."""
    out = LineWriter()

    out.write(":author: rules_proto_grpc")
    out.write(":description: rules_proto_grpc Bazel rules for %s", lang.display_name)
    out.write(
        ":keywords: Bazel, Protobuf, gRPC, Protocol Buffers, Rules, Build, Starlark, %s",
        lang.display_name,
    )
    out.blank()
    out.blank()

    out.write(lang.display_name)
    out.write("=" * len(lang.display_name))
    out.blank()

    if lang.notes:
        out.template(lang.notes, {"lang": lang})
        out.blank()

    out.write(".. list-table:: Rules")
    out.write("   :widths: 1 2")
    out.write("   :header-rows: 1")
    out.blank()
    out.write("   * - Rule")
    out.write("     - Description")
    for rule in lang.rules:
        out.write("   * - `%s`_", rule.name)
        out.write("     - %s", rule.doc)
    out.blank()

    for rule in lang.rules:
        _write_rule_section(out, lang, rule, common)

    output.write(out, "docs", "lang", f"{lang.name}.rst")


def _write_rule_section(
    out: LineWriter, lang: Language, rule: Rule, common: CommonFields
) -> None:
    out.write(".. _%s:", rule.name)
    out.blank()
    out.write(rule.name)
    out.write("-" * len(rule.name))
    out.blank()

    if rule.experimental:
        out.write(
            ".. warning:: This rule is experimental. It may not work correctly or may change in future releases!"
        )
        out.blank()
    out.write(rule.doc)
    out.blank()

    out.write("Example")
    out.write("*******")
    out.blank()
    out.write(
        "Full example project can be found `here <%s/tree/master/examples/%s/%s>`__",
        REPO_URL,
        lang.name,
        rule.name,
    )
    out.blank()
    out.write("``BUILD.bazel``")
    out.write("^^^^^^^^^^^^^^^")
    out.blank()
    out.write(".. code-block:: python")
    out.blank()
    out.template(rule.build_example, rule_context(lang, rule, common), "   ")
    out.blank()

    # Attributes keep their declared order
    out.write("Attributes")
    out.write("**********")
    out.blank()
    out.write(".. list-table:: Attributes for %s", rule.name)
    out.write("   :widths: 1 1 1 1 4")
    out.write("   :header-rows: 1")
    out.blank()
    out.write("   * - Name")
    out.write("     - Type")
    out.write("     - Mandatory")
    out.write("     - Default")
    out.write("     - Description")
    for attr in rule.attrs:
        out.write("   * - ``%s``", attr.name)
        out.write("     - ``%s``", attr.type)
        out.write("     - %s", "true" if attr.mandatory else "false")
        if attr.default:
            out.write("     - ``%s``", attr.default)
        else:
            out.write("     - ")
        out.write("     - %s", attr.doc)
    out.blank()

    if rule.plugins:
        out.write("Plugins")
        out.write("*******")
        out.blank()
        for plugin in rule.plugins:
            out.write(
                "- `@rules_proto_grpc_%s%s <%s/blob/master/modules/%s/BUILD.bazel>`__",
                lang.name,
                plugin,
                REPO_URL,
                lang.name,
            )
        out.blank()


def write_language_examples(
    output: Output, lang: Language, common: CommonFields
) -> None:
    """Write an example Bazel project under ``examples/<lang>/<rule>`` per rule."""
    for rule in lang.rules:
        example_dir = ("examples", *lang.name.split("/"), rule.name)

        # Empty WORKSPACE marks the Bazel workspace root
        output.write(LineWriter(), *example_dir, "WORKSPACE")
        output.write(example_module_bazel(lang), *example_dir, "MODULE.bazel")

        out = LineWriter()
        out.template(rule.build_example, rule_context(lang, rule, common))
        out.blank()
        output.write(out, *example_dir, "BUILD.bazel")


def example_module_bazel(lang: Language) -> LineWriter:
    """MODULE.bazel for an example project of ``lang``.

    Every rules_proto_grpc module the example needs is pinned to the
    checkout with local_path_override.
    """
    # +2 for the examples/ and rule directories
    root_path = "../" * (lang.path_depth + 2)
    modules = [("rules_proto_grpc", "core"), ("rules_proto_grpc_example_protos", "example_protos")]
    modules.append((f"rules_proto_grpc_{lang.name}", lang.name))
    modules.extend((f"rules_proto_grpc_{dep}", dep) for dep in lang.depends_on)

    out = LineWriter()
    for module_name, _ in modules:
        out.write('bazel_dep(name = "%s", version = "%s")', module_name, MODULE_VERSION_PLACEHOLDER)

    for module_name, module_dir in modules:
        out.blank()
        out.write("local_path_override(")
        out.write('    module_name = "%s",', module_name)
        out.write('    path = "%smodules/%s",', root_path, module_dir)
        out.write(")")

    if lang.module_extra_lines:
        out.blank()
        out.write(lang.module_extra_lines)

    out.blank()
    return out
