"""Entity representing the rights of a user on a calendar."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

from calendart.domain.value_objects import (
    CAPABILITY_NAMES,
    Capability,
    resolve_capability,
)

if TYPE_CHECKING:
    from calendart.interfaces.collaborators import Calendar

    from .user import User


class Permission:
    """Bitmask of the capabilities granted to a user on a calendar.

    Flags may be given as raw bits or by name (``"read"``, ``"write"``, case
    insensitive). Raw bits are never validated, so adapters can define extra
    capability bits; they can also make them addressable by name by extending
    `CAPABILITIES`::

        class SharingPermission(Permission):
            SHARE = 0b100
            CAPABILITIES = {**Permission.CAPABILITIES, "share": SHARE}
    """

    CAPABILITIES: ClassVar[Mapping[str, int]] = CAPABILITY_NAMES
    """Lower-cased capability names accepted by `grant`, `revoke` and `is_granted`."""

    def __init__(
        self, calendar: Calendar, user: User, mask: int = Capability.NOPE
    ) -> None:
        self._calendar = calendar
        self._user = user
        self._mask = int(mask)

    def __repr__(self) -> str:
        return (
            f"Permission(calendar={self._calendar!r}, user={self._user!r}, "
            f"mask={self._mask:#04b})"
        )

    @property
    def calendar(self) -> Calendar:
        """The calendar the rights apply to."""
        return self._calendar

    @property
    def user(self) -> User:
        """The user holding the rights."""
        return self._user

    @property
    def mask(self) -> int:
        """The current capability bitmask."""
        return self._mask

    def grant(self, flag: int | str) -> Permission:
        """Add the bits of `flag` to the mask.

        Raises:
            UnknownCapabilityError: If `flag` is an unknown capability name.
        """
        self._mask |= self._resolve(flag)
        return self

    def revoke(self, flag: int | str) -> Permission:
        """Clear the bits of `flag` from the mask.

        Raises:
            UnknownCapabilityError: If `flag` is an unknown capability name.
        """
        self._mask &= ~self._resolve(flag)
        return self

    def is_granted(self, flag: int | str) -> bool:
        """Whether `flag` names at least one bit and every one of them is set.

        Asking for no capability at all (`NOPE`, 0) is never granted.

        Raises:
            UnknownCapabilityError: If `flag` is an unknown capability name.
        """
        bits = self._resolve(flag)
        return bits != 0 and self._mask & bits == bits

    def _resolve(self, flag: int | str) -> int:
        return resolve_capability(flag, self.CAPABILITIES)
