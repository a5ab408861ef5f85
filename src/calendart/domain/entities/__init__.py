"""Entities package.

All entities are defined in this package. They are re-exported here to provide
a single, convenient import path.
"""

from .participation import Participation
from .permission import Permission
from .user import User

__all__ = ["Participation", "Permission", "User"]
