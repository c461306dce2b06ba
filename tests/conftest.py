from __future__ import annotations

# Standard Library Imports
import logging

# Third Party Imports
import pytest

# marsdate Imports
from marsdate.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from marsdate.common.logger import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the behavior config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        BehavioralConfig.resetConfig()
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.resetConfig()


@pytest.fixture(autouse=True)
def _resetPackageLogger() -> None:
    """Drop handlers the command line tool attached, as they hold a captured stream."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

