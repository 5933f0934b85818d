"""Error-kind guards for tests that mix stand-ins with real assertions.

A stand-in never raises, so inside a test the only legitimate failure is an
assertion. These helpers tell an assertion failure apart from any other
error the code under test might raise.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class UnexpectedError(Exception):
    """A non-assertion error surfaced while exercising code with stand-ins.

    The original error is kept as ``__cause__``.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"{type(error).__name__}: {error}")
        self.error = error


def is_assertion_error(error: object) -> bool:
    """Return True if *error* is an assertion failure.

    Accepts anything: non-exceptions, exception classes and ``None`` all
    return False.
    """
    return isinstance(error, AssertionError)


def ensure_assertion_error(error: BaseException) -> None:
    """Re-raise *error* unchanged if it is an assertion failure.

    Any other error is wrapped in :class:`UnexpectedError`.
    """
    if is_assertion_error(error):
        raise error
    logger.debug("Wrapping non-assertion error: %s", type(error).__name__)
    raise UnexpectedError(error) from error
