"""Reporting exports."""
from .builder import serialize_definition, serialize_result
from .writer import ElementWriter, MarkupWriter, cdata, escape, format_duration

__all__ = [
    "ElementWriter",
    "MarkupWriter",
    "cdata",
    "escape",
    "format_duration",
    "serialize_definition",
    "serialize_result",
]
