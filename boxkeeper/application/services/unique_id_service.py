"""Unique identifier service.

Draws candidates from an identifier generator and returns the first one the
store reports as free.

Architecture:
    - Application service (no I/O of its own)
    - Generator and "is taken" check injected as callables/protocols
    - Bounded retries: gives up with IdentifierSpaceExhausted instead of
      looping forever on a saturated or misbehaving store

The check-then-register sequence is not atomic. The repository's ``add`` is
the authoritative uniqueness guard; this service only makes collisions rare.

Usage:
    >>> box_ids = UniqueIdService(
    ...     generator=RandomIdentifierGenerator(),
    ...     is_taken=repository.box_id_taken,
    ...     identifier_type=BoxId,
    ...     logger=logger,
    ... )
    >>> box_id = box_ids.next_unique_id()
"""

from collections.abc import Callable

from boxkeeper.domain.errors import IdentifierSpaceExhausted, PredicateFailure
from boxkeeper.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)
from boxkeeper.domain.protocols.logger_protocol import LoggerProtocol
from boxkeeper.domain.value_objects.identifiers import Identifier

DEFAULT_MAX_ATTEMPTS = 100


class UniqueIdService[I: Identifier]:
    """Hands out identifiers that are not yet taken.

    Attributes:
        identifier_type: Nominal identifier class produced (BoxId, ItemId).
        max_attempts: Upper bound on candidates drawn per call.
    """

    def __init__(
        self,
        *,
        generator: IdentifierGeneratorProtocol,
        is_taken: Callable[[I], bool],
        identifier_type: type[I],
        logger: LoggerProtocol,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Initialize service with its collaborators.

        Args:
            generator: Source of raw 64-bit candidates.
            is_taken: Pure read answering "is this identifier stored?".
            identifier_type: Identifier class wrapping each candidate.
            logger: Logger for retries and failures.
            max_attempts: Candidates to try before giving up.

        Raises:
            ValueError: If max_attempts is lower than 1.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._generator = generator
        self._is_taken = is_taken
        self._logger = logger
        self.identifier_type = identifier_type
        self.max_attempts = max_attempts

    def next_unique_id(self) -> I:
        """Return an identifier the store does not know yet.

        Returns:
            Fresh identifier of ``identifier_type``.

        Raises:
            IdentifierSpaceExhausted: Every one of ``max_attempts`` candidates
                was taken.
            PredicateFailure: The "is taken" check raised; the original
                exception is chained.
        """
        kind = self.identifier_type.__name__
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.identifier_type(self._generator.next())
            try:
                taken = self._is_taken(candidate)
            except Exception as e:
                self._logger.error(
                    "identifier_check_failed",
                    error=e,
                    identifier_type=kind,
                    candidate=str(candidate),
                    attempt=attempt,
                )
                raise PredicateFailure(candidate, str(e)) from e

            if not taken:
                return candidate

            self._logger.debug(
                "identifier_taken",
                identifier_type=kind,
                candidate=str(candidate),
                attempt=attempt,
            )

        self._logger.error(
            "identifier_space_exhausted",
            identifier_type=kind,
            attempts=self.max_attempts,
        )
        raise IdentifierSpaceExhausted(kind, self.max_attempts)
