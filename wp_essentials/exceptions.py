"""Custom exceptions for the essentials hook pipeline."""


class EssentialsError(Exception):
    """Base exception for all wp-essentials errors."""

    pass


class InvalidHookError(EssentialsError):
    """Raised when a callback cannot be registered on an extension point."""

    pass


class RequestTerminated(EssentialsError):
    """Raised by a callback to halt the current request immediately.

    The reason is for server-side logs only and is never sent to the client.
    """

    def __init__(self, reason: str = "terminated") -> None:
        super().__init__(reason)
        self.reason = reason
