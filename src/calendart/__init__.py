"""CALENDART

A small in-memory domain model for calendar entities. It links users to the
events they take part in and to the calendars they may read or write, and is
meant to be extended by provider-specific adapters.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
