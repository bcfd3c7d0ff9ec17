"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention and are carried
both by raised exceptions (``BoxkeeperError``) and by error values returned
in ``Failure`` results (``BoxError``).
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_TITLE = "invalid_title"

    # Resource errors
    BOX_NOT_FOUND = "box_not_found"
    ITEM_NOT_FOUND = "item_not_found"

    # Identifier errors
    IDENTIFIER_SPACE_EXHAUSTED = "identifier_space_exhausted"
    IDENTIFIER_CHECK_FAILED = "identifier_check_failed"
    IDENTIFIER_ALREADY_REGISTERED = "identifier_already_registered"

    # Event errors
    ENVELOPE_DESERIALIZATION_FAILED = "envelope_deserialization_failed"
