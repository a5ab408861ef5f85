"""Ports the CALENDART domain relies on.

Providers plug their own events, calendars, clocks and storage in by
implementing the contracts defined here.
"""
