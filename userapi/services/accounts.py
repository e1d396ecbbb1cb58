# userapi/services/accounts.py
from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import requests
from marshmallow import Schema, ValidationError

from userapi.client import UserApiClient
from userapi.core.errors import ContractViolation, UnexpectedStatus
from userapi.schemas import SessionSchema, UserSchema
from userapi.services.dto import Credentials, RegisteredUser

log = logging.getLogger(__name__)


def require(response: requests.Response, expected: int) -> requests.Response:
    """
    Return ``response`` if it carries ``expected``, otherwise raise.

    :raises UnexpectedStatus: When the status differs.
    """
    if response.status_code != expected:
        raise UnexpectedStatus.from_response(response, int(expected))
    return response


def load_body(response: requests.Response, schema: Schema) -> dict[str, Any]:
    """
    Validate the JSON body of ``response`` against ``schema``.

    :raises ContractViolation: When the body is not JSON or does not match.
    """
    try:
        body = response.json()
    except ValueError as exc:
        raise ContractViolation(
            "Response body is not JSON",
            errors={"_body": [response.text[:200]]},
            status_code=response.status_code,
        ) from exc
    try:
        return schema.load(body)
    except ValidationError as exc:
        raise ContractViolation(
            f"{type(schema).__name__} mismatch",
            errors=exc.messages,
            status_code=response.status_code,
        ) from exc


class AccountService:
    """
    Bootstrap fixture users for authenticated scenarios.

    The steps here are preconditions, not checks: when the service answers
    them unexpectedly the failure is raised as an :class:`ApiError` subclass
    so it reads as a setup error.

    :param client: Client used for every request; :meth:`authenticate`
        mutates its credentials.
    """

    def __init__(self, client: UserApiClient) -> None:
        self.client = client

    def register(self, payload: dict[str, Any]) -> int:
        """
        Create a user and return the id the service assigned.

        :param payload: ``{email, name, password}``.
        :returns: New user id.
        :raises UnexpectedStatus: Unless the service answers ``201``.
        :raises ContractViolation: When the body is not a user.
        """
        response = require(self.client.create_user(payload), HTTPStatus.CREATED)
        user = load_body(response, UserSchema())
        log.debug("Registered fixture user id=%s", user["id"])
        return user["id"]

    def obtain_token(self, credentials: Credentials) -> str:
        """
        Log in and return the access token.

        :raises UnexpectedStatus: Unless the service answers ``200``.
        :raises ContractViolation: When ``accessToken`` is missing.
        """
        response = require(
            self.client.login(credentials.email, credentials.password),
            HTTPStatus.OK,
        )
        return load_body(response, SessionSchema())["access_token"]

    def authenticate(self, access_token: str) -> None:
        self.client.authenticate(access_token)

    def setup_user(self, payload: dict[str, Any], *, authenticate: bool = True) -> RegisteredUser:
        """
        Create a user, log it in and (by default) authenticate the client as it.

        :param payload: ``{email, name, password}``.
        :param authenticate: Attach the token to :attr:`client`.
        :returns: The registered user with its fresh token.
        """
        user_id = self.register(payload)
        credentials = Credentials(email=payload["email"], password=payload["password"])
        token = self.obtain_token(credentials)
        if authenticate:
            self.authenticate(token)
        return RegisteredUser(
            id=user_id,
            email=credentials.email,
            name=payload["name"],
            password=credentials.password,
            access_token=token,
        )
