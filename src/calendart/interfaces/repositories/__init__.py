"""Repository interfaces for participations and permissions, and related errors."""

from .errors import (
    ParticipationNotFoundError,
    PermissionAlreadyExistsError,
    PermissionNotFoundError,
    RepositoryError,
)
from .participation_repository import ParticipationRepository
from .permission_repository import PermissionRepository

__all__ = [
    "ParticipationRepository",
    "PermissionRepository",
    "RepositoryError",
    "ParticipationNotFoundError",
    "PermissionAlreadyExistsError",
    "PermissionNotFoundError",
]
