"""
Failure taxonomy for calls to the generative model.

Every failure reaching the session is an ICPServiceError; `kind` tells them
apart for logging and the API status code, `message` is what the user sees.
"""
from models.state import ErrorKind


class ICPServiceError(Exception):
    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ICPServiceError):
    """Required credential missing. Raised before any network attempt."""
    kind = ErrorKind.CONFIGURATION


class EmptyResponseError(ICPServiceError):
    """The call succeeded but returned no usable text."""
    kind = ErrorKind.EMPTY_RESPONSE


class MalformedResponseError(ICPServiceError):
    """Text came back but is not valid JSON or does not match the schema."""
    kind = ErrorKind.MALFORMED_RESPONSE


class TransportError(ICPServiceError):
    """The SDK call itself failed (network, quota, server error)."""
    kind = ErrorKind.TRANSPORT
