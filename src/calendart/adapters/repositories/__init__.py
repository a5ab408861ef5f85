"""Repository adapters."""

from .in_memory import InMemoryParticipationRepository, InMemoryPermissionRepository

__all__ = ["InMemoryParticipationRepository", "InMemoryPermissionRepository"]
