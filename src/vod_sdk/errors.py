class VodError(Exception):
    """Base class for errors surfaced by the VOD client.

    Every error carries the HTTP status code of the step that produced it.
    Callers should branch on the exception type, not on the code.
    """

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(VodError, ValueError):
    """Bad input or an API contract violation. Nothing was sent."""


class ApiError(VodError):
    """The API answered with an error code embedded in its response."""

    def __init__(self, message, status_code=400, code=None, request_id=None):
        super().__init__(message, status_code)
        self.code = code
        self.request_id = request_id


class TransportError(VodError):
    """Non-200 response or network failure."""


class StorageError(VodError):
    """Object storage accepted the request but rejected the upload."""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code)
        self.payload = payload


class InvariantViolation(RuntimeError):
    """A condition the library guarantees did not hold. Not recoverable."""
