"""Errors raised by the repositories."""

from collections.abc import Hashable


class RepositoryError(Exception):
    """Base class for repository errors."""


class ParticipationNotFoundError(RepositoryError):
    """Raised when removing a participation the repository does not hold.

    Attributes:
        user_email (str): Email of the participation's user.
        event_key (Hashable): Key of the participation's event.
    """

    def __init__(self, user_email: str, event_key: Hashable):
        super().__init__(
            f"No such participation of '{user_email}' in event '{event_key}'."
        )
        self.user_email = user_email
        self.event_key = event_key


class PermissionAlreadyExistsError(RepositoryError):
    """Raised when adding a second permission for the same user and calendar.

    Attributes:
        user_email (str): Email of the permission's user.
        calendar_key (Hashable): Key of the permission's calendar.
    """

    def __init__(self, user_email: str, calendar_key: Hashable):
        super().__init__(
            f"A permission of '{user_email}' on calendar '{calendar_key}' "
            "already exists."
        )
        self.user_email = user_email
        self.calendar_key = calendar_key


class PermissionNotFoundError(RepositoryError):
    """Raised when removing a permission the repository does not hold.

    Attributes:
        user_email (str): Email of the permission's user.
        calendar_key (Hashable): Key of the permission's calendar.
    """

    def __init__(self, user_email: str, calendar_key: Hashable):
        super().__init__(
            f"No such permission of '{user_email}' on calendar '{calendar_key}'."
        )
        self.user_email = user_email
        self.calendar_key = calendar_key
