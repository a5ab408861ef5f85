"""Identity contracts for provider events and calendars.

The domain never looks inside an event or a calendar: it only needs to know
whether two objects stand for the same thing. Providers expose that through a
hashable `key` (a remote id, a URL, or ``id(self)`` for reference identity);
they satisfy these protocols structurally, without inheriting from them.
"""

from collections.abc import Hashable
from typing import Protocol, runtime_checkable

# pylint: disable=too-few-public-methods


@runtime_checkable
class Event(Protocol):
    """Anything that can be identified as a calendar event."""

    @property
    def key(self) -> Hashable:
        """Identity of the event. Equal keys mean the same event."""
        ...  # pylint: disable=unnecessary-ellipsis


@runtime_checkable
class Calendar(Protocol):
    """Anything that can be identified as a calendar."""

    @property
    def key(self) -> Hashable:
        """Identity of the calendar. Equal keys mean the same calendar."""
        ...  # pylint: disable=unnecessary-ellipsis
