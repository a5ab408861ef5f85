"""Domain layer for CALENDART.

Contains the entities (users, participations, permissions), the value objects
they are built from, and the domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `calendart.adapters`.
"""
