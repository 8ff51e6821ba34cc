"""Read-only query access to a parsed HTML subtree.

A form only needs two things from the document it was found in: finding
descendants by expression, and reading attributes while telling an absent
attribute apart from an empty one. ``Selection`` names that capability so
forms never depend on a concrete parser type.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lxml import etree, html
from lxml.html import HtmlElement

from formsurf.exc import ParseError, SelectorError


@runtime_checkable
class Selection(Protocol):
    """A borrowed, read-only node of a parsed document."""

    @property
    def tag(self) -> str: ...

    def find(self, expr: str) -> list[Selection]: ...

    def attr(self, name: str) -> str | None: ...


class HtmlSelection:
    """Selection over an lxml HTML element, queried with XPath."""

    def __init__(self, element: HtmlElement) -> None:
        self._element = element

    @property
    def element(self) -> HtmlElement:
        return self._element

    @property
    def tag(self) -> str:
        return self._element.tag

    def find(self, expr: str) -> list[HtmlSelection]:
        """Evaluate an XPath expression relative to this node.

        Only element results are returned, in document order. Text and
        attribute results are dropped.

        Raises:
            SelectorError: If the expression is not valid XPath.
        """
        try:
            result = self._element.xpath(expr)
        except etree.XPathError as exc:
            raise SelectorError(f"Invalid expression: {expr}", expr) from exc
        if not isinstance(result, list):
            return []
        return [HtmlSelection(el) for el in result if isinstance(el, HtmlElement)]

    def attr(self, name: str) -> str | None:
        return self._element.get(name)

    @classmethod
    def from_string(cls, text: str | bytes) -> HtmlSelection:
        """Parse markup into a selection rooted at the document element.

        Raises:
            ParseError: If the markup is empty or cannot be parsed.
        """
        if text is None or not len(text):
            raise ParseError("Cannot parse empty document.")
        try:
            return cls(html.fromstring(text))
        except ValueError as ve:
            if isinstance(text, str) and "encoding declaration" in str(ve):
                return cls.from_string(text.encode("utf-8"))
            raise ParseError(f"Cannot parse document: {ve}") from ve
        except (etree.ParserError, etree.ParseError) as exc:
            raise ParseError(f"Cannot parse document: {exc}") from exc

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HtmlSelection):
            return self._element is other._element
        return NotImplemented

    def __hash__(self) -> int:
        return hash(id(self._element))

    def __repr__(self) -> str:
        return "<HtmlSelection(%s)>" % self._element.tag
