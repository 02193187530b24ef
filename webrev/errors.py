"""Exception hierarchy for webrev."""


class WebrevError(Exception):
    """Base error for webrev operations."""

    pass


class MalformedPatchError(WebrevError):
    """A patch body line has no recognized prefix."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Unexpected content on line {line_number}: {line!r}")


class ComparisonError(WebrevError):
    """A comparison source could not be loaded."""

    pass


class ViewNotAvailableError(WebrevError):
    """The requested view does not apply to the file's status."""

    pass
