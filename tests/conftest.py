"""Global pytest fixtures for RZL Utils."""

import pytest

from rzl_utils import config

ENV_VARS = (
    config.BASE_URL_ENV,
    config.PORT_FE_ENV,
    config.BACKEND_API_URL_ENV,
    config.PORT_BE_ENV,
    config.LOG_PATH_ENV,
    config.FLIGHT_RECORDER_CAPACITY_ENV,
    config.LOGGER_LEVELS_ENV,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without the RZL_* variables of the calling shell."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
