from typing import Any


class AfroMessageError(Exception):
    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


class ConfigurationError(AfroMessageError):
    pass


class ValidationError(AfroMessageError, ValueError):
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, operation)
        self.errors = errors or []


class ApiError(AfroMessageError):
    """Raised when the HTTP call fails or the server reply is unusable."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message or "Unknown error", operation)
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return (
            f"<ApiError operation={self.operation} status_code={self.status_code} "
            f"message={self.message}>"
        )
