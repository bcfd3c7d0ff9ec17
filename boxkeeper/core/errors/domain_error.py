"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for error VALUES. They flow through the
application layer inside ``Failure`` results and are never raised. Raised
conditions live in ``boxkeeper.domain.errors`` as exceptions and are turned
into DomainError values at the handler boundary.

Usage:
    from boxkeeper.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from boxkeeper.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
