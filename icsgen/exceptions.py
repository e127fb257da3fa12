"""Exception hierarchy for calendar generation."""


class IcsError(Exception):
    """Base exception for calendar generation."""

    pass


class InvalidArgumentError(IcsError, ValueError):
    """Required argument missing or invalid at construction time."""

    pass


class InvalidPropertyError(IcsError, ValueError):
    """Property or parameter name is empty or malformed."""

    pass


class DocumentError(IcsError):
    """Calendar description could not be read or validated."""

    pass
