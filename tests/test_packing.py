import numpy as np

from qconvert._utils.packing import pack_le, unpack_le


def test_pack_le_weights():
    mask = np.array([False, True, False, True], dtype=np.bool_)
    assert pack_le(mask) == 10


def test_pack_le_empty():
    assert pack_le(np.zeros(0, dtype=np.bool_)) == 0


def test_pack_le_top_bit_stays_positive():
    mask = np.ones(63, dtype=np.bool_)
    assert pack_le(mask) == 2**63 - 1


def test_unpack_le_reports_rest():
    out, rest = unpack_le(13, 2)
    assert out.tolist() == [True, False]
    assert rest == 3


def test_unpack_le_exact_fit():
    out, rest = unpack_le(13, 4)
    assert out.tolist() == [True, False, True, True]
    assert rest == 0


def test_unpack_le_zero_width():
    out, rest = unpack_le(0, 0)
    assert out.shape == (0,) and out.dtype == np.bool_
    assert rest == 0
