"""In-memory implementations of the repository interfaces."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from calendart.interfaces.repositories import (
    ParticipationNotFoundError,
    ParticipationRepository,
    PermissionAlreadyExistsError,
    PermissionNotFoundError,
    PermissionRepository,
)

if TYPE_CHECKING:
    from calendart.domain.entities import Participation, Permission, User
    from calendart.interfaces.collaborators import Calendar, Event

logger = logging.getLogger(__name__)


class InMemoryParticipationRepository(ParticipationRepository):
    """In-memory implementation of the ParticipationRepository interface.

    This implementation is intended for testing and development purposes only.
    It does not persist data.
    """

    def __init__(self) -> None:
        self._participations: list[Participation] = []

    def __len__(self) -> int:
        return len(self._participations)

    def add(self, participation: Participation) -> None:
        if participation in self._participations:
            logger.debug("Participation %r already stored; noop", participation)
            return  # idempotent
        self._participations.append(participation)
        logger.debug("Stored participation %r", participation)

    def remove(self, participation: Participation) -> None:
        if participation not in self._participations:
            raise ParticipationNotFoundError(
                participation.user.email, participation.event.key
            )
        self._participations.remove(participation)
        logger.debug("Dropped participation %r", participation)

    def find(self, user: User, event: Event) -> list[Participation]:
        return [
            p
            for p in self._participations
            if p.user is user and p.event.key == event.key
        ]

    def for_user(self, user: User) -> list[Participation]:
        return [p for p in self._participations if p.user is user]

    def for_event(self, event: Event) -> list[Participation]:
        return [p for p in self._participations if p.event.key == event.key]


class InMemoryPermissionRepository(PermissionRepository):
    """In-memory implementation of the PermissionRepository interface.

    This implementation is intended for testing and development purposes only.
    It does not persist data.
    """

    def __init__(self) -> None:
        # (user, calendar key): permission
        self._permissions: dict[tuple[User, Hashable], Permission] = {}

    def __len__(self) -> int:
        return len(self._permissions)

    def add(self, permission: Permission) -> None:
        slot = (permission.user, permission.calendar.key)
        if (existing := self._permissions.get(slot)) is not None:
            if existing is not permission:
                raise PermissionAlreadyExistsError(*self._describe(permission))
            logger.debug("Permission %r already stored; noop", permission)
            return  # idempotent
        self._permissions[slot] = permission
        logger.debug("Stored permission %r", permission)

    def get(self, user: User, calendar: Calendar) -> Permission | None:
        return self._permissions.get((user, calendar.key))

    def remove(self, permission: Permission) -> None:
        slot = (permission.user, permission.calendar.key)
        if self._permissions.get(slot) is not permission:
            raise PermissionNotFoundError(*self._describe(permission))
        del self._permissions[slot]
        logger.debug("Dropped permission %r", permission)

    def for_user(self, user: User) -> list[Permission]:
        return [p for (owner, _), p in self._permissions.items() if owner is user]

    def for_calendar(self, calendar: Calendar) -> list[Permission]:
        return [
            p for (_, key), p in self._permissions.items() if key == calendar.key
        ]

    @staticmethod
    def _describe(permission: Permission) -> tuple[str, Hashable]:
        return permission.user.email, permission.calendar.key
