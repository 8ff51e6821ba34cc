import pytest
from lxml import html

from formsurf.exc import ParseError, SelectorError
from formsurf.logic.selection import HtmlSelection, Selection


def test_is_selection(page):
    assert isinstance(page, Selection)
    assert isinstance(page.element, html.HtmlElement)


def test_attr_presence():
    sel = HtmlSelection.from_string('<input name="q" value="">')
    assert sel.attr("name") == "q"
    assert sel.attr("value") == ""
    assert sel.attr("type") is None


def test_find_document_order(page):
    forms = page.find(".//form")
    assert [f.attr("id") for f in forms] == ["login", "search", "plain"]


def test_find_drops_non_elements(page):
    assert page.find(".//form/@id") == []
    assert page.find("count(.//form)") == []


def test_find_relative(page):
    login = page.find('.//form[@id="login"]')[0]
    assert len(login.find(".//input")) == 4


def test_invalid_expression(page):
    with pytest.raises(SelectorError) as exc:
        page.find(".//form[")
    assert exc.value.expr == ".//form["


@pytest.mark.parametrize("markup", ["", b""])
def test_empty_document(markup):
    with pytest.raises(ParseError):
        HtmlSelection.from_string(markup)


def test_equality():
    element = html.fromstring("<form></form>")
    assert HtmlSelection(element) == HtmlSelection(element)
    assert len({HtmlSelection(element), HtmlSelection(element)}) == 1


def test_tag(page):
    assert page.tag == "html"
    assert [f.tag for f in page.find(".//form")] == ["form", "form", "form"]


def test_xhtml_with_encoding_declaration():
    sel = HtmlSelection.from_string(
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml"><body>'
        '<form action="/s"><input type="text" name="q" value="café"></form>'
        "</body></html>"
    )
    assert sel.find(".//input")[0].attr("value") == "café"
