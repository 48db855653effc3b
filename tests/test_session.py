import logging

import pytest

from tenet.ir.errors import DuplicateOutputError, NoOutputError, StructuralError
from tenet.ir.operation import Contraction, QRSplit, Transposition
from tenet.ir.program import Program
from tenet.session import Session


def test_add_tensor():
    session = Session()

    assert session.add_tensor(2) == 0
    assert session.add_tensor(3) == 1
    assert session.get_rank(1) == 3


def test_add_tensor_negative():
    with pytest.raises(StructuralError) as excinfo:
        Session().add_tensor(-1)

    assert str(
        excinfo.value) == "Rank of a tensor must be non-negative; given -1"


def test_matmul():
    session = Session()
    a = session.add_tensor(2)
    b = session.add_tensor(2)

    assert session.append_contraction(
        [[a, b]], {a: [10, 11], b: [11, 12]}) == [2]
    assert session.get_rank(2) == 2

    code = "import numpy as np\n" + \
           "\n" + \
           "\n" + \
           "def f(T0, T1):\n" + \
           "    T2 = np.einsum(T0, (0, 1), T1, (1, 2), (0, 2))\n" + \
           "    return T2\n"
    assert session.regenerate() == code
    assert session.get_code() == code


def test_merged_groups():
    session = Session()
    a, b, c = [session.add_tensor(2) for _ in range(3)]

    groups = [[b, c], [a, b]]
    subscripts = {a: [1, 2], b: [2, 3], c: [3, 4]}
    assert session.append_contraction(groups, subscripts) == [3]

    op = Contraction([0, 1, 2], [[0, 1], [1, 2], [2, 3]], [0, 3], 3)
    assert session.get_program() == Program([op])


def test_disjoint_groups():
    session = Session()
    a, b, c, d = [session.add_tensor(2) for _ in range(4)]

    subscripts = {a: [0, 1], b: [1, 2], c: [3, 4], d: [4, 5]}
    assert session.append_contraction([[c, d], [a, b]], subscripts) == [4, 5]

    ops = [Contraction([2, 3], [[0, 1], [1, 2]], [0, 2], 4),
           Contraction([0, 1], [[0, 1], [1, 2]], [0, 2], 5)]
    assert session.get_program() == Program(ops)


def test_contraction_to_scalar():
    session = Session()
    a = session.add_tensor(2)
    b = session.add_tensor(2)

    session.append_contraction([[a, b]], {a: [0, 1], b: [0, 1]})
    assert session.get_rank(2) == 0


def test_contraction_missing_subscripts():
    session = Session()
    a, b, c, d = [session.add_tensor(2) for _ in range(4)]

    with pytest.raises(StructuralError) as excinfo:
        session.append_contraction(
            [[a, b], [c, d]], {a: [0, 1], b: [1, 2], c: [3, 4]})

    assert str(excinfo.value) == "No subscripts given for tensor T3"

    # The whole edit is discarded
    assert len(session.get_program()) == 0
    assert session.add_tensor(1) == 4


def test_contraction_rank_mismatch():
    session = Session()
    a = session.add_tensor(2)
    b = session.add_tensor(2)

    with pytest.raises(StructuralError) as excinfo:
        session.append_contraction([[a, b]], {a: [0, 1, 2], b: [1, 3]})

    assert str(
        excinfo.value) == "Tensor T0 has 2 dimensions, but is used with 3"


def test_contraction_unknown_tensor():
    session = Session()
    a = session.add_tensor(2)

    with pytest.raises(StructuralError) as excinfo:
        session.append_contraction([[a, 9]], {a: [0, 1], 9: [1, 2]})

    assert str(excinfo.value) == "Unknown tensor T9"


def test_transposition():
    session = Session()
    a = session.add_tensor(3)

    assert session.append_transposition(a, [2, 0, 1]) == 1
    assert session.get_rank(1) == 3
    assert session.get_program() == Program([Transposition(0, [2, 0, 1], 1)])


def test_transposition_identity():
    session = Session()
    a = session.add_tensor(3)

    assert session.append_transposition(a, [0, 1, 2]) == a
    assert len(session.get_program()) == 0


def test_transposition_invalid():
    session = Session()
    a = session.add_tensor(2)

    with pytest.raises(StructuralError) as excinfo:
        session.append_transposition(a, [1, 0, 2])

    assert str(
        excinfo.value) == "Tensor T0 has 2 dimensions, but is used with 3"


def test_qr_split():
    session = Session()
    a = session.add_tensor(3)

    assert session.append_qr_split(a, 2) == (1, 2)
    assert session.get_rank(1) == 3
    assert session.get_rank(2) == 2
    assert session.get_program() == Program([QRSplit(0, 3, 2, 1, 2)])


def test_qr_split_invalid():
    session = Session()
    a = session.add_tensor(3)

    with pytest.raises(StructuralError):
        session.append_qr_split(a, 3)

    assert len(session.get_program()) == 0


def test_split():
    session = Session()
    a = session.add_tensor(3)

    assert session.append_split(a, [1, 2, 0], 1) == (2, 3)

    ops = [Transposition(0, [1, 2, 0], 1), QRSplit(1, 3, 1, 2, 3)]
    assert session.get_program() == Program(ops)


def test_split_invalid():
    session = Session()
    a = session.add_tensor(3)

    with pytest.raises(StructuralError):
        session.append_split(a, [1, 2, 0], 0)

    assert len(session.get_program()) == 0
    assert session.add_tensor(1) == 1


def test_regenerate_no_output():
    session = Session()

    with pytest.raises(NoOutputError):
        session.regenerate()

    assert session.get_code() is None


def test_regenerate_failure_keeps_code():
    session = Session(name="g")
    a = session.add_tensor(2)
    session.append_transposition(a, [1, 0])
    code = session.regenerate()

    session.get_program().append(Transposition(0, [1, 0], 1))
    with pytest.raises(DuplicateOutputError):
        session.regenerate()

    assert session.get_code() == code
    assert code.splitlines()[3] == "def g(T0):"


def test_reset():
    session = Session()
    a = session.add_tensor(2)
    session.append_transposition(a, [1, 0])
    session.regenerate()

    session.reset()

    assert len(session.get_program()) == 0
    assert session.get_code() is None
    assert session.add_tensor(2) == 0


def test_logging(caplog):
    session = Session()
    a = session.add_tensor(2)

    with caplog.at_level(logging.DEBUG, logger="tenet.session"):
        session.append_transposition(a, [1, 0])

    assert "Appended T1 = transpose(T0, [1, 0])" in caplog.text


def test_split_identity_rank_mismatch():
    session = Session()
    a = session.add_tensor(3)

    with pytest.raises(StructuralError) as excinfo:
        session.append_split(a, [0, 1], 1)

    assert str(
        excinfo.value) == "Tensor T0 has 3 dimensions, but is used with 2"
    assert len(session.get_program()) == 0


def test_direct_append_ids():
    session = Session()
    a = session.add_tensor(2)

    session.get_program().append(Transposition(a, [1, 0], 5))

    assert session.add_tensor(1) == 6
    assert session.append_transposition(a, [1, 0]) == 7
