"""Submission sink that sends forms over HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anystore.logging import get_logger
from requests import Response, Session

from formsurf.core import settings
from formsurf.model.submission import Submission

if TYPE_CHECKING:
    from werkzeug.datastructures import MultiDict

    from formsurf.logic.form import Submittable

log = get_logger(__name__)


class HttpSink:
    """Send submitted forms with a ``requests`` session.

    Register an instance as the ``submit`` handler of a form or of a
    dispatcher shared by the forms of a page. Transport errors are raised
    as ``requests`` raises them.

    Example:
        >>> sink = HttpSink("https://example.com/search")
        >>> form.on("submit", sink)
        >>> response = form.submit()
    """

    def __init__(self, base_url: str | None = None, session: Session | None = None):
        self.base_url = base_url
        self.session = session or self.reset()
        self.last_submission: Submission | None = None

    def reset(self) -> Session:
        self.session = Session()
        self.session.headers["User-Agent"] = settings.user_agent
        return self.session

    def __call__(
        self, form: Submittable, payload: MultiDict[str, str]
    ) -> Response:
        submission = Submission.from_form(form, payload, base_url=self.base_url)
        self.last_submission = submission
        prepared = self.session.prepare_request(submission.to_request())
        log.info("Submitting form", method=prepared.method, url=prepared.url)
        return self.session.send(prepared, timeout=settings.http_timeout)

    def __repr__(self) -> str:
        return "<HttpSink(%s)>" % self.base_url
