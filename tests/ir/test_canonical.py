import pytest

from tenet.ir.canonical import canonicalize
from tenet.ir.errors import LabelReferenceError
from tenet.ir.operation import Contraction


def test_canonicalize():
    op = Contraction([0, 1], [[7, 8], [8, 9]], [7, 9], 2)
    canon = canonicalize(op)

    assert canon.get_inputs() == [0, 1]
    assert canon.get_subscripts() == [[0, 1], [1, 2]]
    assert canon.get_outdims() == [0, 2]
    assert canon.get_output() == 2


def test_canonicalize_unchanged():
    op = Contraction([0, 1], [[7, 8], [8, 9]], [7, 9], 2)
    canonicalize(op)
    assert op.get_subscripts() == [[7, 8], [8, 9]]


def test_idempotent():
    op = Contraction([4, 2, 6], [[31, 12, 5], [5, 40], [12, 3]], [3, 40, 31], 7)
    canon = canonicalize(op)

    assert canon.get_subscripts() == [[0, 1, 2], [2, 3], [1, 4]]
    assert canon.get_outdims() == [4, 3, 0]
    assert canonicalize(canon) == canon


def test_history_independent():
    op1 = Contraction([0, 1], [[7, 8], [8, 9]], [7, 9], 2)
    op2 = Contraction([0, 1], [[100, 5], [5, 42]], [100, 42], 2)
    assert canonicalize(op1) == canonicalize(op2)


def test_outdims_order():
    op = Contraction([0, 1], [[7, 8], [8, 9]], [9, 7], 2)
    assert canonicalize(op).get_outdims() == [2, 0]


def test_trace():
    op = Contraction([0], [[4, 4, 5]], [5], 1)
    canon = canonicalize(op)

    assert canon.get_subscripts() == [[0, 0, 1]]
    assert canon.get_outdims() == [1]


def test_unknown_outdim():
    op = Contraction([0, 1], [[7, 8], [8, 9]], [7, 3], 2)

    with pytest.raises(LabelReferenceError) as excinfo:
        canonicalize(op)

    assert str(
        excinfo.value) == "Contraction output label 3 never appeared in the input subscripts"
