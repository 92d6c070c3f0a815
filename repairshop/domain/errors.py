"""Domain error codes for the repair shop."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_NOT_FOUND = "STORE_NOT_FOUND"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StoreNotFoundError(DomainError):
    """Raised when the requesting user is not attached to a store."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_NOT_FOUND,
            message="User store not found",
        )
        self.user_id = user_id
