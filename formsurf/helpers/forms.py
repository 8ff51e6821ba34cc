"""HTML form discovery utilities.

This module provides helper functions for locating forms in parsed HTML
documents and turning them into ``Form`` objects ready to fill in and
submit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml.html import HtmlElement

from formsurf.logic.form import Form
from formsurf.logic.selection import HtmlSelection, Selection

if TYPE_CHECKING:
    from formsurf.logic.events import Dispatcher

Document = Selection | HtmlElement | str | bytes


def ensure_selection(html: Document) -> Selection:
    """Wrap markup or an lxml element as a selection.

    Raises:
        ParseError: If markup is given and cannot be parsed.
    """
    if isinstance(html, HtmlElement):
        return HtmlSelection(html)
    if isinstance(html, (str, bytes)):
        return HtmlSelection.from_string(html)
    return html


def extract_form(
    html: Document, xpath: str, dispatcher: Dispatcher | None = None
) -> Form | None:
    """Build the form found at an XPath location of a document.

    Args:
        html: Document containing the form.
        xpath: XPath expression to locate the form element.
        dispatcher: Dispatcher the form submits to.

    Returns:
        The first matching form, or None if nothing matches.

    Example:
        >>> form = extract_form(html, './/form[@id="login"]')
        >>> form.action.url
        '/login'
        >>> form.fields.to_dict()
        {'username': '', 'csrf_token': 'abc123'}
    """
    selection = ensure_selection(html)
    for found in selection.find(xpath):
        return Form(found, dispatcher=dispatcher)
    return None


def extract_forms(html: Document, dispatcher: Dispatcher | None = None) -> list[Form]:
    """Build every form of a document, in document order.

    A form that is the document root itself is included.
    """
    selection = ensure_selection(html)
    if selection.tag == "form":
        return [Form(selection, dispatcher=dispatcher)]
    return [Form(found, dispatcher=dispatcher) for found in selection.find(".//form")]
