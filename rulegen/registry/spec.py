"""Registry models - languages, their rules and rule attributes.

All models are frozen: the registry is assembled once at startup by the
per-language builders and only read afterwards.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Attr(BaseModel):
    """A single attribute of a rule, as shown in the docs."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # e.g. "label_list", "string_list_dict"
    mandatory: bool = False
    default: str = ""  # empty when the attr has no default
    doc: str = ""


class Rule(BaseModel):
    """A templated build rule for one language."""

    model_config = ConfigDict(frozen=True)

    name: str  # e.g. "cpp_grpc_library"
    kind: str = "proto"  # e.g. "proto", "grpc", "doc"
    doc: str = ""
    attrs: tuple[Attr, ...] = ()
    implementation: str = Field(description="Jinja template for the .bzl file")
    build_example: str = Field(description="Jinja template for the example BUILD file")
    experimental: bool = False
    is_test: bool = False
    plugins: tuple[str, ...] = ()  # labels relative to the language module
    skip_test_platforms: tuple[str, ...] = ()  # platform names or "all"


class Language(BaseModel):
    """A target ecosystem and the rules generated for it."""

    model_config = ConfigDict(frozen=True)

    name: str  # module path segment, may contain "/"
    display_name: str
    rules: tuple[Rule, ...] = ()
    depends_on: tuple[str, ...] = ()
    aliases: dict[str, str] = Field(default_factory=dict)
    extra_defs: dict[str, str] = Field(default_factory=dict)
    notes: str | None = None
    module_extra_lines: str = ""
    platforms: tuple[str, ...] = ("linux", "windows", "macos")

    @model_validator(mode="after")
    def check_rule_names(self) -> "Language":
        """Rule names key the rule files and load() statements."""
        seen: set[str] = set()
        for rule in self.rules:
            if rule.name in seen:
                raise ValueError(
                    f"Duplicate rule '{rule.name}' in language '{self.name}'"
                )
            seen.add(rule.name)

        for alias, target in self.aliases.items():
            if target not in seen:
                raise ValueError(
                    f"Alias '{alias}' targets unknown rule '{target}' in language '{self.name}'"
                )
        return self

    @property
    def path_depth(self) -> int:
        """Number of path segments in the language name."""
        return len(self.name.split("/"))


class CommonFields(BaseModel):
    """Read-only snippets available to every rule template as ``common``."""

    model_config = ConfigDict(frozen=True)

    compile_args_forwarding: str
    library_args_forwarding: str


def rule_context(
    lang: Language, rule: Rule, common: CommonFields
) -> dict[str, Any]:
    """Template variables for rendering a rule's templates."""
    return {"lang": lang, "rule": rule, "common": common}
