# userapi/services/dto.py
from __future__ import annotations

from dataclasses import dataclass

from userapi.client import auth_header


@dataclass(frozen=True, slots=True)
class Credentials:
    """
    Login input.

    :param email: Email the user registered with.
    :type email: str
    :param password: Raw password.
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RegisteredUser:
    """
    A fixture user that exists on the service and holds a fresh token.

    :param id: Identifier assigned by the service.
    :param email: Registered email.
    :param name: Registered display name.
    :param password: Raw password, kept to log in again if needed.
    :param access_token: Bearer credential from ``POST /session``.
    """

    id: int
    email: str
    name: str
    password: str
    access_token: str

    @property
    def credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password)

    @property
    def auth_header(self) -> dict[str, str]:
        return auth_header(self.access_token)
