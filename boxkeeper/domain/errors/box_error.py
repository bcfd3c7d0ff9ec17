"""Box error values returned by application handlers.

Usage:
    from boxkeeper.domain.errors import BoxError
    from boxkeeper.core.result import Failure

    return Failure(error=BoxError(
        code=ErrorCode.BOX_NOT_FOUND,
        message="Box not found",
        details={"box_id": str(box_id)},
    ))
"""

from dataclasses import dataclass

from boxkeeper.core.errors import DomainError
from boxkeeper.domain.errors.exceptions import BoxkeeperError


@dataclass(frozen=True, slots=True, kw_only=True)
class BoxError(DomainError):
    """Box or item operation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context (identifiers as strings).
    """

    @classmethod
    def from_exception(
        cls, exc: BoxkeeperError, details: dict[str, str] | None = None
    ) -> "BoxError":
        """Convert a raised domain exception into an error value.

        Args:
            exc: Exception raised by a domain service or adapter.
            details: Optional extra context.

        Returns:
            BoxError with the exception's code and message.
        """
        return cls(code=exc.code, message=str(exc), details=details)
