"""AI client management for the swim yardage API."""
from .client_factory import AIClientFactory, AIRequestContext
from .retry import (
    create_retrying,
    is_retryable_error,
    retry_sync_call,
)

__all__ = [
    "AIClientFactory",
    "AIRequestContext",
    "create_retrying",
    "is_retryable_error",
    "retry_sync_call",
]
