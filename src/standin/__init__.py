"""standin — a universal stand-in for tests.

``create_stand_in()`` (alias ``anything()``) returns a value that can be read,
called, constructed, iterated, compared and coerced without ever raising, so
the only failures a test produces are the assertions its author wrote.
"""

from standin.domain.stand_in import StandIn, anything, create_stand_in
from standin.guards import UnexpectedError, ensure_assertion_error, is_assertion_error
from standin.serialization import StandInEncoder, dumps, is_representable

__version__ = "0.1.0"

__all__ = [
    "StandIn",
    "StandInEncoder",
    "UnexpectedError",
    "anything",
    "create_stand_in",
    "dumps",
    "ensure_assertion_error",
    "is_assertion_error",
    "is_representable",
]
