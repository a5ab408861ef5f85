"""Module including value objects used across the domain layer."""

from collections.abc import Mapping
from enum import IntEnum, IntFlag

from calendart.domain.errors import UnknownCapabilityError


class ParticipationStatus(IntEnum):
    """Answer given by a user to an event invitation."""

    DECLINED = -1
    TENTATIVE = 0
    ACCEPTED = 1


class Role(IntFlag):
    """Roles a user may hold in an event. Roles combine as bits."""

    PARTICIPANT = 0b01
    MANAGER = 0b10


class Capability(IntFlag):
    """Rights a user may be granted on a calendar."""

    NOPE = 0b00  # No rights. At all.
    READ = 0b01
    WRITE = 0b10


CAPABILITY_NAMES: Mapping[str, int] = {
    "nope": Capability.NOPE,
    "read": Capability.READ,
    "write": Capability.WRITE,
}
"""Lower-cased capability names and the bits they stand for."""


def resolve_capability(
    flag: int | str, names: Mapping[str, int] = CAPABILITY_NAMES
) -> int:
    """Turn a capability flag or name into its integer bits.

    Args:
        flag: Either raw bits (any integer, `Capability` members included) or
            a case-insensitive capability name such as ``"read"``.
        names: Table of lower-cased names to bits to resolve names against.

    Returns:
        The integer bits for `flag`. Integers are returned unchanged.

    Raises:
        UnknownCapabilityError: If `flag` is a name missing from `names`.
        TypeError: If `flag` is neither an integer nor a string.
    """
    if isinstance(flag, str):
        try:
            return int(names[flag.strip().lower()])
        except KeyError as e:
            raise UnknownCapabilityError(flag, names) from e
    if isinstance(flag, bool) or not isinstance(flag, int):
        raise TypeError(f"Capability flag must be an int or a name, got {flag!r}")
    return int(flag)
