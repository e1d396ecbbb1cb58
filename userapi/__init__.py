"""Helper library for the user-management service test suite.

Expose the pieces scenarios reach for so callers can
``from userapi import UserApiClient`` without traversing the package structure.
"""

from __future__ import annotations

from .client import UserApiClient, json_headers, user_path
from .fanout import run_concurrently, with_blank
from .services import AccountService, Credentials, RegisteredUser

__all__ = [
    "AccountService",
    "Credentials",
    "RegisteredUser",
    "UserApiClient",
    "json_headers",
    "run_concurrently",
    "user_path",
    "with_blank",
]
