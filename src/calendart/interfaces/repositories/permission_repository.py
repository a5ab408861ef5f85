"""Interface for a store of permissions."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendart.domain.entities import Permission, User
    from calendart.interfaces.collaborators import Calendar


class PermissionRepository(abc.ABC):
    """Interface for a store of permissions.

    This store enforces at most one permission per (user, calendar) pair.
    """

    @abc.abstractmethod
    def add(self, permission: Permission) -> None:
        """Store a permission.

        Idempotent if the very same permission is already stored.

        Args:
            permission (Permission): The permission to store.

        Raises:
            PermissionAlreadyExistsError: If another permission is already stored
                for the same user and calendar.
        """

    @abc.abstractmethod
    def get(self, user: User, calendar: Calendar) -> Permission | None:
        """Lookup the permission of `user` on `calendar`.

        Returns:
            Permission | None: The permission if found, otherwise None.
        """

    @abc.abstractmethod
    def remove(self, permission: Permission) -> None:
        """Drop a permission from the store.

        Args:
            permission (Permission): The permission to drop.

        Raises:
            PermissionNotFoundError: If the permission is not stored.
        """

    @abc.abstractmethod
    def for_user(self, user: User) -> list[Permission]:
        """Permissions held by `user`, in insertion order."""

    @abc.abstractmethod
    def for_calendar(self, calendar: Calendar) -> list[Permission]:
        """Permissions given on `calendar`, in insertion order."""
