class UrlParamsError(Exception):
    """Base exception for all errors raised while building URL parameters."""


class ExternError(UrlParamsError):
    """
    Wraps a lower-level failure: a sink that cannot be written to, or a
    buffer that cannot be converted to text.

    The original exception is kept in `error` and chained as `__cause__`.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


class UnsupportedError(UrlParamsError):
    """
    Raised for a shape a flat parameter list cannot express: a bare top level
    value, a nested struct, a map key that is not a string, etc.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CustomError(UrlParamsError):
    """Raised by a value's own `serialize()` hook. Propagated unchanged."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
