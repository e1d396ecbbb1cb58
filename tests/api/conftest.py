"""Fixtures running the scenario set against the stub and the live service.

Every scenario runs twice: once against :class:`StubUserService` (always) and
once against ``settings.BASE_URL`` (marked ``live``; skipped when nothing
answers there unless ``REQUIRE_SERVICE`` is set).
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from userapi.client import UserApiClient
from userapi.core.config import BaseConfig, TestingConfig
from userapi.services import AccountService, RegisteredUser

from tests.factories.user import UserPayloadFactory


@pytest.fixture(scope="session")
def live_service(settings: type[BaseConfig]) -> str:
    """Probe the live service once per session and return its base URL."""

    with UserApiClient(config=settings) as probe:
        reachable = probe.ping()
    if not reachable:
        message = f"user service not reachable at {settings.BASE_URL}"
        if settings.REQUIRE_SERVICE:
            pytest.fail(message)
        pytest.skip(message)
    return settings.BASE_URL


@pytest.fixture(params=["stub", pytest.param("live", marks=pytest.mark.live)])
def api_client(request: pytest.FixtureRequest, settings: type[BaseConfig]) -> Generator[UserApiClient, None, None]:
    """Client pointed at the current target."""

    if request.param == "stub":
        stub = request.getfixturevalue("stub_service")
        client = UserApiClient(stub.base_url, config=TestingConfig)
    else:
        client = UserApiClient(request.getfixturevalue("live_service"), config=settings)
    yield client
    client.close()


@pytest.fixture()
def accounts(api_client: UserApiClient) -> AccountService:
    return AccountService(api_client)


@pytest.fixture()
def registered_user(accounts: AccountService) -> RegisteredUser:
    """A freshly created user whose token ``api_client`` now sends."""

    return accounts.setup_user(UserPayloadFactory())


@pytest.fixture()
def sentinel_id(settings: type[BaseConfig]) -> int:
    """Id that belongs to no fixture user."""

    return settings.SENTINEL_USER_ID
