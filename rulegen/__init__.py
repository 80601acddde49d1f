"""rulegen - generator for the rules_proto_grpc ruleset.

Walks the language registry and renders rule files, docs, example
projects and CI configuration into a repository checkout.
"""

from ._version import __version__

__all__ = ["__version__"]
