"""Domain-layer error definitions."""

from collections.abc import Iterable

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                   Participation related errors
# ============================================================================


class InvalidStatusError(DomainError, ValueError):
    """Raised when a participation is given a status outside the allowed set."""

    def __init__(self, value: object, allowed: Iterable[int]) -> None:
        self.value = value
        self.allowed = tuple(int(status) for status in allowed)
        super().__init__(
            f'Status not recognized ; had "{value}", expected one of '
            + ", ".join(f'"{status}"' for status in self.allowed)
        )


# ============================================================================
#                   Permission related errors
# ============================================================================


class UnknownCapabilityError(DomainError, ValueError):
    """Raised when a capability name does not resolve to a known flag."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = tuple(sorted(known))
        super().__init__(
            f"Unknown capability '{name}'; expected one of: {', '.join(self.known)}."
        )
