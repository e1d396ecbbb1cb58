"""Client-side errors raised while bootstrapping scenarios against the service.

Scenario checks never raise these: a scenario that gets the wrong status is a
plain assertion failure. These types cover the steps a scenario *depends on*
(registering a fixture user, logging in, reaching the service at all) so that
a broken precondition reads as a setup error rather than a failed check.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import requests
from marshmallow import ValidationError

from userapi.schemas import ProblemSchema

log = logging.getLogger(__name__)


def _http_status_to_code(status_code: int | None) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        415: "unsupported_media_type",
        422: "unprocessable_entity",
        429: "too_many_requests",
        500: "internal_server_error",
        502: "bad_gateway",
        503: "service_unavailable",
    }
    if status_code is None:
        return "error"
    return mapping.get(status_code, "error")


def problem_detail(response: requests.Response) -> str | None:
    """
    Extract a human-readable error summary from a response body.

    Understands RFC 7807 bodies (``detail``/``title``) as well as the common
    ``{"message": ...}`` shape. Non-JSON bodies fall back to the raw text.

    :param response: Response returned by the service.
    :returns: Summary string, or ``None`` for an empty body.
    """
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or None
    if not isinstance(body, dict):
        return str(body)
    try:
        problem = ProblemSchema().load(body)
    except ValidationError:
        return str(body)
    return problem.get("detail") or problem.get("message") or problem.get("title") or str(body)


class ApiError(Exception):
    """
    Represent a failure talking to the user service.

    Parameters
    ----------
    message : str
        Human-readable description.
    status_code : int | None, optional
        HTTP status received, ``None`` when no response was obtained.
    code : str | None, optional
        Machine-readable identifier, typically snake_case. Derived from
        ``status_code`` when omitted.
    details : dict[str, Any] | None, optional
        Optional structured context (schema messages, expected status...).

    Attributes
    ----------
    message : str
        Error summary.
    status_code : int | None
        HTTP status code received from the service.
    code : str
        Stable machine-readable identifier.
    details : dict[str, Any]
        Arbitrary context specific to the error instance.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code) if status_code is not None else None
        self.code = code or _http_status_to_code(self.status_code)
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} [{self.status_code} {self.code}]"


class UnexpectedStatus(ApiError):
    """A bootstrap request got a status other than the one it requires."""

    @classmethod
    def from_response(cls, response: requests.Response, expected: int) -> UnexpectedStatus:
        """
        Build the error from the offending response.

        :param response: Response returned by the service.
        :param expected: Status code the caller required.
        :returns: Populated error instance (not raised).
        """
        request = response.request
        method = request.method if request is not None else "?"
        url = request.path_url if request is not None else response.url
        detail = problem_detail(response)
        try:
            phrase = HTTPStatus(expected).phrase
        except ValueError:
            phrase = "expected"
        message = f"{method} {url} returned {response.status_code}, expected {expected} {phrase}"
        if detail:
            message = f"{message}: {detail}"
        log.warning(
            "Unexpected status: %s",
            message,
            extra={"method": method, "path": url, "status": response.status_code},
        )
        return cls(
            message,
            status_code=response.status_code,
            details={"expected": expected, "detail": detail},
        )


class ContractViolation(ApiError):
    """A response body does not match the schema the contract promises."""

    def __init__(self, message: str, errors: Any, status_code: int | None = None) -> None:
        super().__init__(
            message,
            status_code=status_code,
            code="contract_violation",
            details={"errors": errors},
        )


class ServiceUnavailable(ApiError):
    """The service could not be reached at the transport level."""

    def __init__(self, message: str = "User service unreachable") -> None:
        super().__init__(message, code="service_unavailable")
