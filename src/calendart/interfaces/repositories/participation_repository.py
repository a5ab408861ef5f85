"""Interface for a store of participations."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendart.domain.entities import Participation, User
    from calendart.interfaces.collaborators import Event


class ParticipationRepository(abc.ABC):
    """Interface for a store of participations.

    The repository owns the participations it holds. It is the way to find the
    participations of a user: the user itself only knows its events.
    Removing a participation does not unlink the event from the user.
    """

    @abc.abstractmethod
    def add(self, participation: Participation) -> None:
        """Store a participation.

        Idempotent if the very same participation is already stored. Several
        participations may link the same user and event.

        Args:
            participation (Participation): The participation to store.
        """

    @abc.abstractmethod
    def remove(self, participation: Participation) -> None:
        """Drop a participation from the store.

        Args:
            participation (Participation): The participation to drop.

        Raises:
            ParticipationNotFoundError: If the participation is not stored.
        """

    @abc.abstractmethod
    def find(self, user: User, event: Event) -> list[Participation]:
        """Participations linking `user` to `event`, in insertion order."""

    @abc.abstractmethod
    def for_user(self, user: User) -> list[Participation]:
        """Participations of `user`, in insertion order."""

    @abc.abstractmethod
    def for_event(self, event: Event) -> list[Participation]:
        """Participations in `event`, in insertion order."""
