"""Thin HTTP client for the user-management service under test."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from userapi.core.config import BaseConfig, get_config
from userapi.core.errors import ServiceUnavailable
from userapi.core.logger import REQUEST_ID_HEADER, new_request_id

log = logging.getLogger(__name__)


def auth_header(access_token: str) -> dict[str, str]:
    """Return the ``Authorization`` header carrying ``access_token``."""

    return {"Authorization": f"Bearer {access_token}"}


def json_headers(auth_token: str | None = None) -> dict[str, str]:
    """Return standard JSON headers.

    Parameters
    ----------
    auth_token:
        Optional bearer token to include.

    Returns
    -------
    dict[str, str]
        HTTP headers dictionary.
    """

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if auth_token:
        headers.update(auth_header(auth_token))
    return headers


def user_path(user_id: int | str) -> str:
    """Return the resource path of a single user."""

    return f"/users/{user_id}"


class UserApiClient:
    """
    Send requests to the user service and hand back the raw responses.

    The client never raises on HTTP status: scenarios assert on whatever the
    service answers. Only transport failures raise, as
    :class:`~userapi.core.errors.ServiceUnavailable`.

    Once :meth:`authenticate` is called, every following request of this
    client carries the bearer token.

    :param base_url: Service root; defaults to the active config's ``BASE_URL``.
    :param timeout: Per-request timeout in seconds.
    :param session: Pre-built :class:`requests.Session` to reuse.
    :param config: Settings class; defaults to :func:`get_config`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
        config: type[BaseConfig] | None = None,
    ) -> None:
        cfg = config or get_config()
        self.base_url = (base_url or cfg.BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(json_headers())

    # ------------------------------------------------------------------ #
    # Credentials
    # ------------------------------------------------------------------ #

    @property
    def access_token(self) -> str | None:
        header = self.session.headers.get("Authorization")
        if not header or not header.startswith("Bearer "):
            return None
        return header[len("Bearer ") :]

    def authenticate(self, access_token: str) -> None:
        """Attach ``access_token`` to every following request."""

        self.session.headers.update(auth_header(access_token))

    def clear_auth(self) -> None:
        self.session.headers.pop("Authorization", None)

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        """
        Send one request and return the response whatever its status.

        :param method: HTTP verb.
        :param path: Path relative to ``base_url``.
        :param json: Optional JSON-serializable body.
        :returns: The service response.
        :raises ServiceUnavailable: On connection errors and timeouts.
        """
        method = method.upper()
        request_id = new_request_id()
        started = time.perf_counter()
        try:
            response = self.session.request(
                method,
                self.url(path),
                json=json,
                headers={REQUEST_ID_HEADER: request_id},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            log.error(
                "Request failed: %s %s",
                method,
                path,
                extra={"method": method, "path": path, "request_id": request_id},
            )
            raise ServiceUnavailable(f"{method} {self.url(path)} failed: {exc}") from exc

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log.info(
            "%s %s -> %s",
            method,
            path,
            response.status_code,
            extra={
                "method": method,
                "path": path,
                "status": response.status_code,
                "elapsed_ms": elapsed_ms,
                "request_id": request_id,
            },
        )
        return response

    # ------------------------------------------------------------------ #
    # Endpoints
    # ------------------------------------------------------------------ #

    def create_user(self, payload: dict[str, Any]) -> requests.Response:
        return self.request("POST", "/users", json=payload)

    def login(self, email: str, password: str) -> requests.Response:
        return self.request("POST", "/session", json={"email": email, "password": password})

    def update_user(self, user_id: int | str, payload: dict[str, Any]) -> requests.Response:
        return self.request("PATCH", user_path(user_id), json=payload)

    def delete_user(self, user_id: int | str) -> requests.Response:
        return self.request("DELETE", user_path(user_id))

    def ping(self) -> bool:
        """Return ``True`` when anything answers HTTP on ``base_url``."""

        try:
            self.request("GET", "/")
        except ServiceUnavailable:
            return False
        return True

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> UserApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
