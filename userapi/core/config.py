"""Suite settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'local' | 'ci' | 'testing'

# Load a local .env when present (no-op otherwise)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, ``default`` when unset or blank."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


def env_float(name: str, default: float) -> float:
    """Parse a float from an environment variable, ``default`` when unset or blank."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return float(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    BASE_URL: str
        Root URL of the user service under test.
    REQUEST_TIMEOUT: float
        Per-request timeout in seconds handed to ``requests``.
    SENTINEL_USER_ID: int
        Identifier assumed not to exist nor belong to a fixture user.
    FANOUT_WORKERS: int
        Thread pool size for concurrent sub-checks.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    LOG_JSON: bool
        When ``True`` the pytest session installs the JSON stdout handler.
    REQUIRE_SERVICE: bool
        Fail live scenarios instead of skipping them when the service is down.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    BASE_URL = os.getenv("USER_API_BASE_URL", "http://localhost:8080")
    REQUEST_TIMEOUT = env_float("USER_API_TIMEOUT", 10.0)

    # Scenario knobs
    SENTINEL_USER_ID = env_int("USER_API_SENTINEL_ID", 9999)
    FANOUT_WORKERS = env_int("USER_API_FANOUT_WORKERS", 4)

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = env_bool("LOG_JSON", False)

    REQUIRE_SERVICE = env_bool("USER_API_REQUIRE_SERVICE", False)


class LocalConfig(BaseConfig):
    """Configuration for running the suite against a developer's local service.

    Notes
    -----
    Live scenarios are skipped when nothing answers on ``BASE_URL``.
    """


class CIConfig(BaseConfig):
    """Configuration for pipelines where the service is expected to be up.

    Notes
    -----
    - An unreachable service fails the run instead of skipping it.
    - Allows slower cold starts with a larger request timeout.
    """

    REQUIRE_SERVICE = True
    REQUEST_TIMEOUT = env_float("USER_API_TIMEOUT", 30.0)


class TestingConfig(BaseConfig):
    """Configuration for the helper library's own unit tests.

    Notes
    -----
    Points at a non-routable host so that only ``responses``-mocked calls
    can succeed.
    """

    __test__ = False  # not a pytest test class

    BASE_URL = os.getenv("TEST_USER_API_BASE_URL", "http://users.test")
    REQUEST_TIMEOUT = 2.0
    LOG_JSON = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "local": LocalConfig,
    "ci": CIConfig,
    "testing": TestingConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Settings class consumed by the client and the pytest fixtures.

    Notes
    -----
    Falls back to :class:`LocalConfig` when ``APP_ENV`` is unset or unknown.
    """
    name = os.getenv(ENV_VAR, "local").strip().lower()
    return CONFIG_MAP.get(name, LocalConfig)
