import pytest
from sympy import Min, Symbol

from tenet.ir.errors import LabelReferenceError, ShapeMismatchError, StructuralError
from tenet.ir.operation import Contraction, QRSplit, Transposition
from tenet.ir.program import Program
from tenet.ir.shape import ShapeInference


def test_contraction():
    program = Program([Contraction([0, 1], [[0, 1], [1, 2]], [0, 2], 2)])
    shapes = ShapeInference(program, {0: [2, 3], 1: [3, 4]})

    assert shapes.get_shape(2) == (2, 4)


def test_contraction_outdims_order():
    program = Program([Contraction([0, 1], [[0, 1], [1, 2]], [2, 0], 2)])
    shapes = ShapeInference(program, {0: [2, 3], 1: [3, 4]})

    assert shapes.get_shape(2) == (4, 2)


def test_contraction_mismatch():
    program = Program([Contraction([0, 1], [[0, 1], [1, 2]], [0, 2], 2)])

    with pytest.raises(ShapeMismatchError) as excinfo:
        ShapeInference(program, {0: [2, 3], 1: [5, 4]})

    assert str(excinfo.value) == "Dimension 1 of T1 has extent 5, expected 3"


def test_contraction_symbolic():
    program = Program([Contraction([0, 1], [[0, 1], [1, 2]], [0, 2], 2)])
    shapes = ShapeInference(program, {0: ["m", "k"], 1: ["k", "n"]})

    assert shapes.get_shape(2) == (Symbol("m"), Symbol("n"))


def test_contraction_unknown_outdim():
    program = Program([Contraction([0], [[0, 1]], [5], 1)])

    with pytest.raises(LabelReferenceError) as excinfo:
        ShapeInference(program, {0: [2, 3]})

    assert str(
        excinfo.value) == "Contraction output label 5 never appeared in the input subscripts"


def test_transposition():
    program = Program([Transposition(0, [2, 0, 1], 1)])
    shapes = ShapeInference(program, {0: [2, 3, 4]})

    assert shapes.get_shape(1) == (4, 2, 3)


def test_fresh_symbols():
    program = Program([Transposition(0, [1, 0], 1)])
    shapes = ShapeInference(program)

    assert shapes.get_shape(0) == (Symbol("d0_0"), Symbol("d0_1"))
    assert shapes.get_shape(1) == (Symbol("d0_1"), Symbol("d0_0"))


def test_qr_split():
    op = QRSplit(0, 3, 2, 1, 2)
    shapes = ShapeInference(Program([op]), {0: [2, 3, 4]})

    assert shapes.get_matrix_shape(op) == (6, 4)
    assert shapes.get_shape(1) == (2, 3, 4)
    assert shapes.get_shape(2) == (4, 4)


def test_qr_split_wide():
    op = QRSplit(0, 3, 1, 1, 2)
    shapes = ShapeInference(Program([op]), {0: [2, 3, 4]})

    assert shapes.get_matrix_shape(op) == (2, 12)
    assert shapes.get_shape(1) == (2, 2)
    assert shapes.get_shape(2) == (2, 3, 4)


def test_qr_split_symbolic():
    a, b, c = Symbol("a"), Symbol("b"), Symbol("c")

    op = QRSplit(0, 3, 2, 1, 2)
    shapes = ShapeInference(Program([op]), {0: ["a", "b", "c"]})

    assert shapes.get_matrix_shape(op) == (a * b, c)
    assert shapes.get_shape(1) == (a, b, Min(a * b, c))
    assert shapes.get_shape(2) == (Min(a * b, c), c)


def test_rank_mismatch():
    program = Program([Transposition(0, [1, 0], 1)])

    with pytest.raises(StructuralError) as excinfo:
        ShapeInference(program, {0: [2]})

    assert str(
        excinfo.value) == "Tensor T0 has 1 dimensions, but is used with 2"


def test_bad_extent():
    program = Program([Transposition(0, [1, 0], 1)])

    with pytest.raises(ValueError) as excinfo:
        ShapeInference(program, {0: [2.5, 3]})

    assert str(
        excinfo.value) == "Unable to use 2.5 with type <class 'float'> as an extent"


def test_get_shape_unknown():
    shapes = ShapeInference(Program([Transposition(0, [1, 0], 1)]))

    with pytest.raises(KeyError):
        shapes.get_shape(3)
