"""Build-info assembly."""

from buildinfo.builder.builder import BuildInfoBuilder

__all__ = ["BuildInfoBuilder"]
