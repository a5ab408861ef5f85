"""Entity representing the participation of a user in an event."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from calendart.domain.errors import InvalidStatusError
from calendart.domain.utils import utc_now
from calendart.domain.value_objects import ParticipationStatus, Role

if TYPE_CHECKING:
    from calendart.interfaces.clock import Clock
    from calendart.interfaces.collaborators import Event

    from .user import User

# pylint: disable=too-many-arguments


class Participation:
    """Invitation, answer and role of one user for one event.

    The event and the user are fixed at construction; the status, the role and
    the answer time may change afterwards. Creating a participation links the
    event to the user.
    """

    def __init__(
        self,
        event: Event,
        user: User,
        role: int = Role.PARTICIPANT,
        status: int = ParticipationStatus.TENTATIVE,
        *,
        clock: Clock | None = None,
    ) -> None:
        """Invite `user` to `event`.

        Args:
            event: The event the user is invited to.
            user: The invited user. `event` is added to its events.
            role: Bitmask of `Role` flags. Not validated.
            status: Initial answer, TENTATIVE unless stated otherwise.
            clock: Source of the current time. Defaults to the system UTC clock.

        Raises:
            InvalidStatusError: If `status` is not a known participation status.
                The user is left untouched in that case.
        """
        self._clock = clock
        self._event = event
        self._user = user
        self._invited_at: datetime = self._now()
        self._answered_at: datetime | None = None
        self._role: int = Role.PARTICIPANT
        self._status = ParticipationStatus.TENTATIVE

        self.set_role(role)
        self.set_status(status)

        user.add_event(event)

    def __repr__(self) -> str:
        return (
            f"Participation(event={self._event!r}, user={self._user!r}, "
            f"role={self._role!r}, status={self._status.name})"
        )

    # --- Identity ---

    @property
    def event(self) -> Event:
        """The event this participation is about."""
        return self._event

    @property
    def user(self) -> User:
        """The participating user."""
        return self._user

    @property
    def invited_at(self) -> datetime:
        """When the invitation was created."""
        return self._invited_at

    # --- Answer ---

    @property
    def answered_at(self) -> datetime | None:
        """When the user answered, or None if it has not answered yet."""
        return self._answered_at

    def has_answered(self) -> bool:
        """Whether the user has answered this invitation."""
        return self._answered_at is not None

    def set_answered_at(self, date: datetime | None = None) -> Participation:
        """Record when the user answered.

        The status is left as is: a participation may be answered and still
        tentative.

        Args:
            date: Answer time. Defaults to now.

        Returns:
            This participation, to allow chaining.
        """
        self._answered_at = date if date is not None else self._now()
        return self

    # --- Role ---

    @property
    def role(self) -> int:
        """Bitmask of the roles held in the event."""
        return self._role

    @role.setter
    def role(self, value: int) -> None:
        self.set_role(value)

    def set_role(self, role: int) -> Participation:
        """Replace the role bitmask. Any integer is accepted."""
        self._role = role
        return self

    def has_role(self, role: int) -> bool:
        """Whether every bit of `role` is part of the current role."""
        return self._role & role == role

    # --- Status ---

    @property
    def status(self) -> ParticipationStatus:
        """The current answer to the invitation."""
        return self._status

    @status.setter
    def status(self, value: int) -> None:
        self.set_status(value)

    def set_status(self, status: int) -> Participation:
        """Change the answer to the invitation.

        Any status may follow any other.

        Args:
            status: A `ParticipationStatus` member or its integer value.

        Returns:
            This participation, to allow chaining.

        Raises:
            InvalidStatusError: If `status` is not one of the available
                statuses. The current status is kept.
        """
        self._status = self._parse_status(status)
        return self

    @staticmethod
    def get_available_statuses() -> tuple[ParticipationStatus, ...]:
        """The statuses a participation may take, from declined to accepted."""
        return (
            ParticipationStatus.DECLINED,
            ParticipationStatus.TENTATIVE,
            ParticipationStatus.ACCEPTED,
        )

    @classmethod
    def _parse_status(cls, value: object) -> ParticipationStatus:
        available = cls.get_available_statuses()
        if isinstance(value, int) and not isinstance(value, bool):
            for status in available:
                if value == status:
                    return status
        raise InvalidStatusError(value, available)

    # --- Internal Helpers ---

    def _now(self) -> datetime:
        return self._clock.now() if self._clock is not None else utc_now()
