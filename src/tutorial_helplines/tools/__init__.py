"""Generator tool implementations."""

from .generate import generate_help

__all__ = ["generate_help"]
