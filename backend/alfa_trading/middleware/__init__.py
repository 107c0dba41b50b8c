"""Custom middleware for FastAPI application"""

from .rate_limit import RateLimitMiddleware

__all__ = ["RateLimitMiddleware"]
