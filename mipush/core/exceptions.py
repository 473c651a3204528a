"""Exceptions raised by the push helper."""


class PushError(Exception):
    """Base exception for all push errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidTargetError(PushError, ValueError):
    """Raised when the send options name no supported target."""

    def __init__(self, valid_keys: list[str]) -> None:
        self.valid_keys = valid_keys
        super().__init__(
            "Invalid message target, expected one of: " + "/".join(valid_keys),
            status_code=400,
        )


class PushRequestError(PushError):
    """Raised when the push service rejects a request or cannot be reached."""

    def __init__(
        self, message: str, status_code: int | None = None, code: int | None = None
    ) -> None:
        self.code = code
        super().__init__(message, status_code=status_code)


class InvalidMessageError(PushError, ValueError):
    """Raised when a message body cannot be sent as given."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)
