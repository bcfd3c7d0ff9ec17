"""Core error types."""

from boxkeeper.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
]
