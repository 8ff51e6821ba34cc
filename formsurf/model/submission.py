"""Navigation intent produced by submitting a form."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from furl import furl
from pydantic import BaseModel, Field
from requests import Request

if TYPE_CHECKING:
    from werkzeug.datastructures import MultiDict

    from formsurf.logic.form import Submittable

QUERY_METHODS = ("GET", "HEAD")


class Submission(BaseModel):
    """Where a submitted form navigates to and what it sends."""

    method: str = Field(default="GET")
    url: str = Field(default="")
    payload: list[tuple[str, str]] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def in_query(self) -> bool:
        return self.method in QUERY_METHODS

    @classmethod
    def from_form(
        cls,
        form: Submittable,
        payload: MultiDict[str, str],
        base_url: str | None = None,
    ) -> Submission:
        """Resolve a form submission against the URL of its page.

        An empty action resolves to the base URL itself.
        """
        action = form.action.url
        url = furl(base_url).join(action).url if base_url else action
        return cls(
            method=form.method or "GET",
            url=url,
            payload=list(payload.items(multi=True)),
        )

    def to_request(self) -> Request:
        """Build the HTTP request a browser would send.

        Query methods replace the query string of the target with the
        payload, all other methods send it as a form-encoded body.
        """
        if self.in_query:
            url = urlsplit(self.url)._replace(query="", fragment="").geturl()
            return Request(self.method, url, params=self.payload)
        url = urlsplit(self.url)._replace(fragment="").geturl()
        return Request(self.method, url, data=self.payload)
