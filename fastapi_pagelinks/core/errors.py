"""Pagination link errors."""


class PaginationError(Exception):
    """Base class for errors raised while resolving pages or building links."""


class InvalidPageObjectError(PaginationError, ValueError):
    """No usable page object could be located in the rendering context."""


class AmbiguousPageObjectError(InvalidPageObjectError):
    """More than one page object is exposed as a request attribute."""

    def __init__(self, attribute_names: list[str] | None = None) -> None:
        self.attribute_names = list(attribute_names or [])
        super().__init__("More than one Page object found on request!")


class MissingPageObjectError(InvalidPageObjectError):
    """Neither the context, the page expression nor the request hold a page."""

    def __init__(self) -> None:
        super().__init__("Invalid or not present Page object found on request!")


class UnsupportedRequestEnvironmentError(PaginationError, NotImplementedError):
    """The request does not expose scheme, server name or port."""

    def __init__(self) -> None:
        super().__init__(
            "Request scheme, server name or port are null in this environment. "
            "Cannot compute request URL"
        )
