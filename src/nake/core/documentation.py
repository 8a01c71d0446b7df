"""
Documentation comment parsing

Task documentation arrives as an XML fragment (``<summary>...</summary>``
optionally followed by ``<param>`` elements, possibly wrapped in a
``<member>`` element). The fragment is parsed with defusedxml since it comes
from user-authored script files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from defusedxml import DefusedXmlException, ElementTree

# Marker the compiler leaves in place of a comment it could not parse
BADLY_FORMED_MARKER = "Badly formed XML"

_FRAGMENT_ROOT = "doc"


@dataclass(frozen=True)
class DocumentationComment:
    """Result of parsing a documentation fragment."""

    summary: Optional[str]
    had_parse_error: bool
    full_fragment: str

    @property
    def is_malformed(self) -> bool:
        return self.had_parse_error or BADLY_FORMED_MARKER in self.full_fragment


def parse(fragment: Optional[str]) -> DocumentationComment:
    """
    Parse a documentation fragment.

    Never raises on bad markup; callers inspect ``is_malformed`` instead.
    """
    text = fragment or ""
    if not text.strip():
        return DocumentationComment(summary=None, had_parse_error=False, full_fragment=text)

    try:
        root = ElementTree.fromstring(f"<{_FRAGMENT_ROOT}>{text}</{_FRAGMENT_ROOT}>")
    except (ElementTree.ParseError, DefusedXmlException):
        return DocumentationComment(summary=None, had_parse_error=True, full_fragment=text)

    summary_element = root.find(".//summary")
    summary = None
    if summary_element is not None:
        summary = " ".join("".join(summary_element.itertext()).split())
    return DocumentationComment(summary=summary, had_parse_error=False, full_fragment=text)
