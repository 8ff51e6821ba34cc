class FormsurfException(Exception):
    """Base exception class."""

    pass


class ElementNotFound(FormsurfException):
    """A form field could not be found."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("No input found with name '%s'." % name)


class InvalidFormValue(FormsurfException):
    """A form does not contain the requested button."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "Form does not contain a button with the name '%s'." % name
        )


class ParseError(FormsurfException):
    """An error while parsing an HTML document."""

    pass


class SelectorError(FormsurfException):
    """Raised when a selector expression cannot be evaluated."""

    def __init__(self, message: str, expr: str | None = None):
        self.expr = expr
        super().__init__(message)
