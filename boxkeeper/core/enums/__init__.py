"""Core enums shared across layers."""

from boxkeeper.core.enums.environment import Environment
from boxkeeper.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
