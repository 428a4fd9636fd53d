"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class UnauthenticatedError(AppError):
    """Raised when a request carries no verifiable identity."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized: missing or invalid token"):
        super().__init__(message, code="UNAUTHENTICATED")


# Trading errors


class InvalidQuantityError(AppError):
    """Raised when a trade quantity is not a positive whole number."""

    def __init__(self, quantity: object):
        super().__init__(
            f"Quantity must be a positive whole number, got {quantity!r}",
            code="INVALID_QUANTITY",
        )


class StockNotFoundError(AppError):
    """Raised when no usable quote exists for a symbol."""

    status_code = 404

    def __init__(self, symbol: str, reason: str = ""):
        message = f"Stock not found: {symbol}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="STOCK_NOT_FOUND")


class InsufficientBalanceError(AppError):
    """Raised when a purchase costs more than the available cash."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient balance: requested {requested}, available {available}",
            code="INSUFFICIENT_BALANCE",
        )


class InsufficientSharesError(AppError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


# Market data errors


class ConfigurationError(AppError):
    """Raised when a required external credential is not configured."""

    status_code = 503

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class UpstreamRateLimitedError(AppError):
    """Raised when the quote provider rate-limits us and no fallback exists."""

    status_code = 503

    def __init__(self, symbol: str):
        super().__init__(
            f"Quote provider rate limit reached for {symbol}",
            code="UPSTREAM_RATE_LIMITED",
        )


class UpstreamInvalidResponseError(AppError):
    """Raised when the quote provider returns an unusable payload."""

    status_code = 502

    def __init__(self, symbol: str):
        super().__init__(
            f"Invalid response from quote provider for {symbol}",
            code="UPSTREAM_INVALID_RESPONSE",
        )


class UpstreamUnavailableError(AppError):
    """Raised when the quote provider cannot be reached."""

    status_code = 502

    def __init__(self, symbol: str, detail: str = ""):
        message = f"Quote provider unavailable for {symbol}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, code="UPSTREAM_UNAVAILABLE")


# AI tutor errors


class TutorUnavailableError(AppError):
    """Raised when the AI tutor backend fails or returns nothing usable."""

    status_code = 502

    def __init__(self, detail: str = ""):
        message = "AI tutor unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, code="TUTOR_UNAVAILABLE")


# Persistence errors


class StorageUnavailableError(AppError):
    """Raised when the record store cannot be read or written."""

    status_code = 503

    def __init__(self, operation: str, detail: str = ""):
        message = f"Storage unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, code="STORAGE_UNAVAILABLE")
