"""Account bootstrap used by authenticated scenarios.

Re-exports
----------
- :class:`AccountService`
- DTOs: :class:`Credentials`, :class:`RegisteredUser`
"""

from __future__ import annotations

from .accounts import AccountService
from .dto import Credentials, RegisteredUser

__all__ = ["AccountService", "Credentials", "RegisteredUser"]
