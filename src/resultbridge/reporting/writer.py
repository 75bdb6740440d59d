"""In-memory markup writer that keeps attributes ahead of element content.

Each element moves through three phases: attributes, content, closed. Writing
an attribute once content has begun, or writing through an element that is
not the innermost open one, raises :class:`WriterStateError`. Text containing
characters XML 1.0 does not allow raises :class:`ContractViolationError`.
"""
from __future__ import annotations

import enum
import re
from typing import Any, List, Optional

from resultbridge.core.errors import ContractViolationError, WriterStateError

CDATA_START = "<![CDATA["
CDATA_END = "]]>"

# Anything outside the XML 1.0 Char production.
_INVALID_CHARACTER = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

# Parsers normalize these to spaces inside attribute values.
_ATTRIBUTE_WHITESPACE = {"\n": "&#xA;", "\r": "&#xD;", "\t": "&#x9;"}


def escape(text: str) -> str:
    """Replace markup-significant characters with their named entities."""
    return (
        text.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def cdata(text: str) -> str:
    """Wrap ``text`` in a CDATA section, splitting any embedded terminator."""
    return CDATA_START + text.replace(CDATA_END, "]]" + CDATA_END + CDATA_START + ">") + CDATA_END


def format_duration(seconds: float) -> str:
    # Format specs never consult the process locale.
    return f"{seconds:.6f}"


def _check_characters(text: str, where: str) -> str:
    match = _INVALID_CHARACTER.search(text)
    if match:
        raise ContractViolationError(
            f"{where} contains character U+{ord(match.group()):04X}, which XML 1.0 does not allow"
        )
    return text


class _Phase(enum.Enum):
    ATTRIBUTES = "attributes"
    CONTENT = "content"
    CLOSED = "closed"


class MarkupWriter:
    """Builds a single-rooted markup fragment with no XML declaration."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._stack: List[ElementWriter] = []
        self._root: Optional[ElementWriter] = None

    def element(self, name: str) -> "ElementWriter":
        if self._root is not None:
            raise WriterStateError(f"fragment already has root <{self._root.name}>, cannot add <{name}>")
        self._root = ElementWriter(self, name)
        return self._root

    def getvalue(self) -> str:
        if self._stack:
            raise WriterStateError(f"element <{self._stack[-1].name}> is still open")
        return "".join(self._parts)

    def _write(self, text: str) -> None:
        self._parts.append(text)


class ElementWriter:
    """One open element; use as a context manager to close it automatically."""

    def __init__(self, document: MarkupWriter, name: str) -> None:
        self.name = name
        self._document = document
        self._phase = _Phase.ATTRIBUTES
        document._write("<" + name)
        document._stack.append(self)

    def __enter__(self) -> "ElementWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.end()
        return False

    def attribute(self, name: str, value: Any) -> "ElementWriter":
        if self._phase is not _Phase.ATTRIBUTES:
            raise WriterStateError(
                f"cannot write attribute '{name}' on <{self.name}> once it is {self._phase.value}"
            )
        text = _check_characters(str(value), f"attribute '{name}' of <{self.name}>")
        encoded = escape(text)
        for char, reference in _ATTRIBUTE_WHITESPACE.items():
            encoded = encoded.replace(char, reference)
        self._document._write(f' {name}="{encoded}"')
        return self

    def element(self, name: str) -> "ElementWriter":
        self._begin_content()
        return ElementWriter(self._document, name)

    def cdata(self, text: str) -> "ElementWriter":
        _check_characters(text, f"text of <{self.name}>")
        self._begin_content()
        self._document._write(cdata(text))
        return self

    def cdata_element(self, name: str, text: str) -> None:
        with self.element(name) as child:
            child.cdata(text)

    def end(self) -> None:
        self._require_innermost("close")
        if self._phase is _Phase.ATTRIBUTES:
            self._document._write(" />")
        else:
            self._document._write(f"</{self.name}>")
        self._phase = _Phase.CLOSED
        self._document._stack.pop()

    def _begin_content(self) -> None:
        self._require_innermost("write content into")
        if self._phase is _Phase.ATTRIBUTES:
            self._document._write(">")
            self._phase = _Phase.CONTENT

    def _require_innermost(self, action: str) -> None:
        if self._phase is _Phase.CLOSED:
            raise WriterStateError(f"cannot {action} <{self.name}>: element is closed")
        stack = self._document._stack
        if stack[-1] is not self:
            raise WriterStateError(f"cannot {action} <{self.name}> while <{stack[-1].name}> is open")
