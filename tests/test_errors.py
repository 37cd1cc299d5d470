import logging

import pytest

from qconvert.errors import (
    BitOverflowError,
    ConversionError,
    InvalidArgumentError,
    RangeError,
    fact,
)


def test_fact_passes_silently():
    assert fact(True, RangeError, "unused") is None


def test_fact_raises_given_error():
    with pytest.raises(InvalidArgumentError, match="bad value"):
        fact(False, InvalidArgumentError, "bad value")


def test_fact_logs_before_raising(caplog):
    with caplog.at_level(logging.DEBUG, logger="qconvert.errors"):
        with pytest.raises(RangeError):
            fact(False, RangeError, "too long")
    assert "RangeError: too long" in caplog.text


def test_hierarchy():
    assert issubclass(ConversionError, ValueError)
    for err in (RangeError, InvalidArgumentError, BitOverflowError):
        assert issubclass(err, ConversionError)
    assert issubclass(BitOverflowError, OverflowError)
