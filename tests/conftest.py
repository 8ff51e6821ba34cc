import pytest

from formsurf.helpers.forms import extract_form
from formsurf.logic.selection import HtmlSelection

SEARCH_PAGE = """
<html>
  <body>
    <form id="login" action="/login" method="post">
      <input type="text" name="username" value="">
      <input type="password" name="password">
      <input type="hidden" name="csrf_token" value="abc123">
      <input type="submit" name="login" value="Log in">
    </form>
    <form id="search" action="search?lang=en#results">
      <input type="text" name="q" value="surf">
      <input type="checkbox" name="tag" value="news">
      <input type="checkbox" name="tag" value="blogs">
      <input name="untyped" value="dropped">
      <input type="text" value="nameless">
      <button type="submit" name="go" value="1">Go</button>
      <button type="submit" name="lucky">Lucky</button>
    </form>
    <form id="plain" method="get">
      <input type="text" name="page" value="2">
    </form>
  </body>
</html>
"""


@pytest.fixture(scope="session")
def search_page():
    return SEARCH_PAGE


@pytest.fixture(scope="module")
def page(search_page):
    return HtmlSelection.from_string(search_page)


@pytest.fixture(scope="function")
def login_form(page):
    return extract_form(page, './/form[@id="login"]')


@pytest.fixture(scope="function")
def search_form(page):
    return extract_form(page, './/form[@id="search"]')


@pytest.fixture(scope="function")
def plain_form(page):
    return extract_form(page, './/form[@id="plain"]')


@pytest.fixture(scope="session")
def httpbin_url(httpbin):
    """Provide httpbin URL from pytest-httpbin fixture.

    pytest-httpbin automatically starts a local httpbin server in a separate
    thread - no Docker required.
    """
    return httpbin.url
