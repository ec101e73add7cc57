"""
Exceptions raised while handling an analysis request.

Each exception carries the HTTP status it maps to and optional details
that are echoed back in the JSON error body.
"""

from typing import Any, Dict, Optional


class SwimAnalyzerError(Exception):
    """
    Base exception for the swim yardage API.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.message}
        if self.details:
            content["details"] = self.details
        return content


class BadRequestError(SwimAnalyzerError):
    """Missing or blank workout text, or an unreadable body."""

    status_code = 400


class UnauthorizedError(SwimAnalyzerError):
    """Missing or mismatched credential."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MethodNotAllowedError(SwimAnalyzerError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class UpstreamError(SwimAnalyzerError):
    """The text-generation provider failed in a way retrying will not fix."""

    status_code = 500


class UpstreamUnavailableError(UpstreamError):
    """The text-generation provider stayed unavailable through every retry."""

    def __init__(
        self,
        message: str = "LLM provider temporarily unavailable",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
