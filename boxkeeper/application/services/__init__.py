"""Application services."""

from boxkeeper.application.services.unique_id_service import UniqueIdService

__all__ = ["UniqueIdService"]
