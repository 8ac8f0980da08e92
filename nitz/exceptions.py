"""Exceptions for nitz library."""


class NitzError(Exception):
    """Base exception for all nitz errors."""


class NitzParseError(NitzError):
    """Exception raised when parsing a NITZ string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the field that could not be decoded,
    useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the NitzParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class ZoneLookupError(NitzError):
    """Exception raised when the country time zone table can't be used.

    This indicates a problem with the bundled data (e.g. a zone id that is
    not known to the system or tzdata package) rather than a problem with
    the signals received from the network.
    """
