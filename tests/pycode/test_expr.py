from tenet.pycode import *


def test_eaccess():
    access = EAccess(EVar("A"), EVar("i"))
    assert access.gen() == "A[i]"


def test_ebinop():
    binop = EBinOp(EVar("a"), OAdd(), EVar("b"))
    assert binop.gen() == "a + b"


def test_efield():
    field = EField("T3", "shape")
    assert field.gen() == "T3.shape"


def test_efunc():
    func = EFunc("np.einsum", [AJust(EVar("x")), AJust(EVar("y"))])
    assert func.gen() == "np.einsum(x, y)"


def test_efunc_no_args():
    func = EFunc("foo", [])
    assert func.gen() == "foo()"


def test_eint():
    int_ = EInt(5)
    assert int_.gen() == "5"


def test_emethod():
    method = EMethod(EVar("foo"), "bar", [AJust(EVar("x")), AJust(EVar("y"))])
    assert method.gen() == "foo.bar(x, y)"


def test_eslice():
    assert ESlice(None, EInt(2)).gen() == ":2"
    assert ESlice(EInt(2), None).gen() == "2:"
    assert ESlice(EInt(1), EInt(3)).gen() == "1:3"
    assert ESlice(None, None).gen() == ":"


def test_eslice_access():
    access = EAccess(EField("T3", "shape"), ESlice(None, EInt(2)))
    assert access.gen() == "T3.shape[:2]"


def test_estring():
    string = EString("y")
    assert string.gen() == "\"y\""


def test_etuple_empty():
    tuple_ = ETuple([])
    assert tuple_.gen() == "()"


def test_etuple_one_elem():
    tuple_ = ETuple([EVar("x")])
    assert tuple_.gen() == "(x,)"


def test_etuple():
    tuple_ = ETuple([EVar("x"), EVar("y"), EVar("z")])
    assert tuple_.gen() == "(x, y, z)"


def test_evar():
    var = EVar("x")
    assert var.gen() == "x"
