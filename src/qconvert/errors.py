import logging
from typing import Type


logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """Base class for failed conversion preconditions."""


class RangeError(ConversionError):
    """A sequence is too long to decode into a native integer."""


class InvalidArgumentError(ConversionError):
    """A value is outside the domain the conversion accepts."""


class BitOverflowError(ConversionError, OverflowError):
    """A value does not fit into the requested number of bits."""


def fact(condition: bool, error: Type[ConversionError], message: str) -> None:
    """
    Raise `error(message)` unless `condition` holds.
    """
    if not condition:
        logger.debug("%s: %s", error.__name__, message)
        raise error(message)
