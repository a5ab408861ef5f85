"""Entity representing a user of a calendar provider."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendart.interfaces.collaborators import Event


class User:
    """A user, and the events it is involved in.

    Events are tracked by their identity `key`, so the same event is never
    held twice even if a provider hands out several objects for it. The user
    does not own the events nor the participations linking it to them.
    """

    def __init__(self, name: str, email: str) -> None:
        self._name = name
        self._email = email
        self._events: dict[Hashable, Event] = {}

    def __repr__(self) -> str:
        return f"User(name={self._name!r}, email={self._email!r})"

    @property
    def name(self) -> str:
        """The user's display name."""
        return self._name

    @property
    def email(self) -> str:
        """The user's email address."""
        return self._email

    @property
    def events(self) -> tuple[Event, ...]:
        """Snapshot of the events this user is involved in, in insertion order."""
        return tuple(self._events.values())

    def has_event(self, event: Event) -> bool:
        """Whether `event` is among this user's events."""
        return event.key in self._events

    def add_event(self, event: Event) -> User:
        """Link `event` to this user. Idempotent.

        Returns:
            This user, to allow chaining.
        """
        self._events.setdefault(event.key, event)
        return self

    def remove_event(self, event: Event) -> User:
        """Unlink `event` from this user. Removing an unknown event is a no-op.

        Returns:
            This user, to allow chaining.
        """
        self._events.pop(event.key, None)
        return self
