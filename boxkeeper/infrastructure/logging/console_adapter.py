"""structlog-backed logger for boxkeeper.

``ConsoleAdapter.from_settings`` is the normal entry point. It reads the
environment and level from ``Settings`` and binds the application name, so
every line written by a handler, the identifier service or the envelope
transport carries ``app``.

Rendering:
    - testing/ci: one JSON object per line; ``exc_info`` tracebacks are
      flattened into an ``exception`` field
    - development/production: colored console output

The adapter satisfies LoggerProtocol structurally and does not inherit it.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from boxkeeper.core.config import Settings

_COMMON_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _renderers(use_json: bool) -> list[structlog.types.Processor]:
    if use_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Writes structured log lines to stdout.

    Args:
        use_json: One JSON object per line instead of console output.
        level: Lowest level written. Unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=[*_COMMON_PROCESSORS, *_renderers(use_json)],
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def from_settings(cls, settings: Settings) -> ConsoleAdapter:
        """Adapter for the configured environment and level, bound to ``app``.

        Args:
            settings: Application settings (environment, log_level, app_name).

        Returns:
            ConsoleAdapter: JSON output under testing/ci, console otherwise.
        """
        adapter = cls(use_json=settings.use_json_logs, level=settings.log_level)
        return adapter.bind(app=settings.app_name)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation. ``error`` adds error_type and error_message."""
        self._logger.error(message, **_with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Same as ``error`` at critical level."""
        self._logger.critical(message, **_with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter that adds ``context`` to every line.

        The receiver is unchanged, so a handler can bind ``box_id`` without
        leaking it into the shared application logger.
        """
        bound = object.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
