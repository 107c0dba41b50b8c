"""
Domain exceptions for the application.

Services raise these instead of fastapi.HTTPException to avoid coupling
the service layer to the web framework. A global exception handler in
main.py translates them into the JSON failure envelope.
"""

from typing import Optional


class AppError(Exception):
    """Base application error with an HTTP-equivalent status code."""

    def __init__(self, message: str, status_code: int = 400, details: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed input (400)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InsufficientFundsError(AppError):
    """BUY order value exceeds the available balance (400)."""

    def __init__(
        self,
        message: str = "Insufficient balance",
        available: Optional[float] = None,
        required: Optional[float] = None,
    ):
        self.available = available
        self.required = required
        super().__init__(message, status_code=400)


class UnknownSymbolError(AppError):
    """No price supplied and the symbol is not in the price table (400)."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown symbol '{symbol}' and no price supplied", status_code=400)


class AuthenticationError(AppError):
    """Bearer credential present but unusable (401)."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, status_code=401)


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class InternalError(AppError):
    """Unexpected fault (500). Carries diagnostic detail for the demo dashboard."""

    def __init__(self, message: str = "Something went wrong!", details: Optional[str] = None):
        super().__init__(message, status_code=500, details=details)
