"""CLI commands"""

from .generate import generate_command

__all__ = ["generate_command"]
