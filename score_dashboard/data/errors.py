from __future__ import annotations


class FetchError(Exception):
    """Base class for a failed fetch cycle. The message is shown to the user as-is."""

    kind = "fetch"


class TransportError(FetchError):
    """The request failed, returned a non-success HTTP status, or the body was not JSON."""

    kind = "transport"


class ApplicationError(FetchError):
    """The request succeeded but the payload status was not OK or the shape was unexpected."""

    kind = "application"
