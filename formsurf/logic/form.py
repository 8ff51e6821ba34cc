"""HTML form model.

A ``Form`` is built once from the subtree of a ``<form>`` element. It keeps
the form's method, action, field values and submit buttons, lets callers
overwrite field values, and hands the assembled payload to whoever listens
for the ``submit`` event on its dispatcher.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from anystore.logging import get_logger
from furl import furl
from werkzeug.datastructures import ImmutableMultiDict, MultiDict

from formsurf.exc import ElementNotFound, InvalidFormValue
from formsurf.logic.events import Dispatcher, Event, Handler
from formsurf.logic.selection import Selection

log = get_logger(__name__)

DEFAULT_METHOD = "GET"
CONTROLS = ".//input | .//button"
SUBMIT_TYPE = "submit"


@runtime_checkable
class Submittable(Protocol):
    """An element that may be submitted, such as a form."""

    @property
    def method(self) -> str: ...

    @property
    def action(self) -> furl: ...

    def input(self, name: str, value: str) -> None: ...

    def click(self, button: str) -> Any: ...

    def submit(self) -> Any: ...

    def find(self, expr: str) -> list[Selection]: ...

    def on(self, event: Event | str, handler: Handler) -> Handler: ...


def serialize_form(
    selection: Selection,
) -> tuple[MultiDict[str, str], MultiDict[str, str]]:
    """Split the controls of a form into field values and button values.

    Only controls carrying both a ``name`` and a ``type`` attribute count.
    Submit controls become buttons (valueless ones with an empty string),
    every other control becomes a field if it has a ``value``.
    """
    fields: MultiDict[str, str] = MultiDict()
    buttons: MultiDict[str, str] = MultiDict()
    for control in selection.find(CONTROLS):
        name = control.attr("name")
        type_ = control.attr("type")
        if name is None or type_ is None:
            continue
        value = control.attr("value")
        if type_ == SUBMIT_TYPE:
            buttons.add(name, value if value is not None else "")
        elif value is not None:
            fields.add(name, value)
    return fields, buttons


def form_attributes(selection: Selection) -> tuple[str, furl]:
    """Return the uppercased method and the parsed action of a form."""
    method = selection.attr("method")
    if method is None:
        method = DEFAULT_METHOD
    action = selection.attr("action") or ""
    try:
        parsed = furl(action)
    except ValueError:
        log.debug("Unparseable form action", action=action)
        parsed = furl()
    return method.upper(), parsed


class Form:
    """A form element at the time it was parsed.

    Field values can be changed with ``input``; everything else is fixed at
    construction. Submitting dispatches ``Event.SUBMIT`` with the form and
    the payload to the form's dispatcher and returns what the handlers
    return.

    Example:
        >>> form = Form(HtmlSelection.from_string(markup))
        >>> form.on("submit", lambda form, payload: print(payload))
        >>> form.input("q", "lxml")
        >>> form.submit()
    """

    def __init__(
        self, selection: Selection, dispatcher: Dispatcher | None = None
    ) -> None:
        self.selection = selection
        self.dispatcher = dispatcher or Dispatcher()
        self._fields, buttons = serialize_form(selection)
        self._buttons: ImmutableMultiDict[str, str] = ImmutableMultiDict(buttons)
        self._method, self._action = form_attributes(selection)
        log.debug(
            "Parsed form",
            method=self._method,
            action=self._action.url,
            fields=len(self._fields),
            buttons=len(self._buttons),
        )

    @property
    def method(self) -> str:
        """The form method, eg. "GET" or "POST"."""
        return self._method

    @property
    def action(self) -> furl:
        """The form action, possibly relative."""
        return self._action

    @property
    def fields(self) -> ImmutableMultiDict[str, str]:
        """The current field values, read only. Use ``input`` to change them."""
        return ImmutableMultiDict(self._fields)

    @property
    def buttons(self) -> ImmutableMultiDict[str, str]:
        return self._buttons

    def values(self) -> MultiDict[str, str]:
        """A copy of the current field values."""
        return self._fields.copy()

    def on(self, event: Event | str, handler: Handler) -> Handler:
        return self.dispatcher.on(event, handler)

    def input(self, name: str, value: str) -> None:
        """Set the value of an existing field, replacing all its values.

        Raises:
            ElementNotFound: If the form has no field with that name.
        """
        if name not in self._fields:
            raise ElementNotFound(name)
        self._fields.setlist(name, [value])

    def click(self, button: str) -> Any:
        """Submit the form by clicking the button with the given name.

        Raises:
            InvalidFormValue: If the form has no button with that name.
        """
        if button not in self._buttons:
            raise InvalidFormValue(button)
        return self._send(button, self._buttons.getlist(button)[0])

    def submit(self) -> Any:
        """Submit the form.

        Clicks the first button of the form in document order, or submits
        without any button when the form has none.
        """
        for name in self._buttons:
            return self.click(name)
        return self._send()

    def find(self, expr: str) -> list[Selection]:
        """Return the elements of the form matching the expression."""
        return self.selection.find(expr)

    def _send(self, button_name: str = "", button_value: str = "") -> Any:
        payload = self._fields.copy()
        if button_name:
            payload.setlist(button_name, [button_value])
        log.debug(
            "Submitting form",
            method=self._method,
            action=self._action.url,
            button=button_name or None,
        )
        return self.dispatcher.do(Event.SUBMIT, self, payload)

    def __repr__(self) -> str:
        return "<Form(%s,%s)>" % (self._method, self._action.url)
