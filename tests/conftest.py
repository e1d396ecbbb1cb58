"""Global pytest fixtures for the user service test suite."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any, Callable

import pytest
import responses

from userapi.client import UserApiClient
from userapi.core.config import BaseConfig, TestingConfig, get_config
from userapi.core.logger import configure_logging

from tests.factories.user import UserPayloadFactory, UserUpdateFactory
from tests.helpers.stub_service import StubUserService


def pytest_configure(config: pytest.Config) -> None:
    """Install JSON logging when the active settings ask for it."""

    settings = get_config()
    if settings.LOG_JSON:
        configure_logging(settings.LOG_LEVEL)


@pytest.fixture(scope="session")
def settings() -> type[BaseConfig]:
    """Settings selected by ``APP_ENV`` for the live target."""

    return get_config()


@pytest.fixture()
def stub_service() -> Generator[StubUserService, None, None]:
    """Serve the in-memory user service for the duration of one test.

    Yields
    ------
    StubUserService
        Store whose routes answer every ``requests`` call to
        ``TestingConfig.BASE_URL``. Calls to any other host raise
        ``ConnectionError``.
    """

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield StubUserService(TestingConfig.BASE_URL).register(rsps)


@pytest.fixture()
def stub_client(stub_service: StubUserService) -> Generator[UserApiClient, None, None]:
    """Client bound to :func:`stub_service`."""

    client = UserApiClient(stub_service.base_url, config=TestingConfig)
    yield client
    client.close()


@pytest.fixture()
def user_data() -> dict[str, str]:
    """Fresh ``{email, name, password}`` creation payload."""

    return UserPayloadFactory()


@pytest.fixture()
def update_data() -> dict[str, str]:
    """Valid ``{name, password}`` update payload."""

    return UserUpdateFactory()


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
