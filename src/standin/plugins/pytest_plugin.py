"""pytest plugin exposing stand-ins as fixtures.

Registered through the ``pytest11`` entry point, so installing the
distribution is enough:

    def test_checkout(anything):
        cart = Cart(payment=anything.gateway, mailer=anything.mailer)
        assert cart.total() == 0
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from standin import __version__
from standin.config.logging import configure_logging
from standin.config.settings import StandInSettings
from standin.domain.stand_in import StandIn, create_stand_in

logger = logging.getLogger(__name__)

SETTINGS_KEY = pytest.StashKey[StandInSettings]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("standin", "universal stand-ins")
    group.addoption(
        "--standin-verbose",
        action="store_true",
        default=None,
        help="Log every spawned stand-in at DEBUG level.",
    )
    group.addoption(
        "--standin-log-json",
        action="store_true",
        default=None,
        help="Render standin log records as JSON lines.",
    )


def pytest_configure(config: pytest.Config) -> None:
    settings = StandInSettings.load(
        config.rootpath,
        verbose=config.getoption("standin_verbose"),
        log_json=config.getoption("standin_log_json"),
    )
    config.stash[SETTINGS_KEY] = settings
    if settings.wants_logging:
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        logger.debug("standin logging configured from %s", settings.config_path)


def pytest_report_header(config: pytest.Config) -> str | None:
    settings = config.stash.get(SETTINGS_KEY, None)
    if settings is None or not settings.wants_logging:
        return None
    mode = "json" if settings.log_json else "console"
    return f"standin {__version__}: logging {mode}"


@pytest.fixture
def anything() -> StandIn:
    """A fresh stand-in for the requesting test."""
    return create_stand_in()


@pytest.fixture
def stand_in_factory() -> Callable[[], StandIn]:
    """The stand-in factory, for tests that need several independent stand-ins."""
    return create_stand_in
