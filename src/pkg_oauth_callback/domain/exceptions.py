from .entities import ErrorCallback


class CallbackError(Exception):
    """Base class for callback handling errors."""
    pass


class CallbackNotRecognizedError(CallbackError):
    """Raised when a fragment is neither a token grant nor an error callback."""
    pass


class AuthorizationDeniedError(CallbackError):
    """Raised when the identity provider returned an error callback."""

    def __init__(self, callback: ErrorCallback) -> None:
        self.callback = callback
        message = callback.error or "authorization failed"
        if callback.description:
            message = f"{message}: {callback.description}"
        super().__init__(message)


class InvalidTokenError(CallbackError):
    """Raised when a token in the callback is not a decodable JWT."""
    pass
