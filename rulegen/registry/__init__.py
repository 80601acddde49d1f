"""Language registry - the static description of every generated rule."""

from rulegen.registry.buf import make_buf
from rulegen.registry.c import make_c
from rulegen.registry.common import COMMON_FIELDS
from rulegen.registry.cpp import make_cpp
from rulegen.registry.doc import make_doc
from rulegen.registry.go import make_go
from rulegen.registry.grpc_gateway import make_grpc_gateway
from rulegen.registry.python import make_python
from rulegen.registry.spec import Attr, CommonFields, Language, Rule, rule_context


def make_languages() -> list[Language]:
    """Build every language. The order here is the order of combined outputs."""
    return [
        make_buf(),
        make_c(),
        make_cpp(),
        make_doc(),
        make_go(),
        make_grpc_gateway(),
        make_python(),
    ]


__all__ = [
    "Attr",
    "COMMON_FIELDS",
    "CommonFields",
    "Language",
    "Rule",
    "make_languages",
    "rule_context",
]
