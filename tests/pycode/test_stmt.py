from tenet.pycode import *


def test_sassign():
    assign = SAssign(AVar("x"), EVar("y"))
    assert assign.gen(2) == "        x = y"


def test_sassign_comment():
    assign = SAssign(AVar("x"), EVar("y"), "shape: (2, 3)")
    assert assign.gen(1) == "    x = y  # shape: (2, 3)"


def test_sassign_tuple():
    assign = SAssign(ATuple([AVar("q"), AVar("r")]), EVar("y"))
    assert assign.gen(0) == "q, r = y"


def test_sblank():
    assert SBlank().gen(3) == ""


def test_sblock():
    block = SBlock([SAssign(AVar("x"), EVar("y")),
                   SAssign(AVar("a"), EVar("b"))])
    assert block.gen(2) == "        x = y\n        a = b"


def test_sblock_add_sblock():
    block1 = SBlock([SAssign(AVar("x"), EVar("y")),
                    SAssign(AVar("a"), EVar("b"))])
    block2 = SBlock([SAssign(AVar("z"), EVar("w")),
                    SAssign(AVar("c"), EVar("d"))])
    block1.add(block2)
    assert block1.gen(0) == "x = y\na = b\nz = w\nc = d"


def test_sblock_add_other():
    block = SBlock([SAssign(AVar("x"), EVar("y")),
                   SAssign(AVar("a"), EVar("b"))])
    assign = SAssign(AVar("z"), EVar("w"))
    block.add(assign)
    assert block.gen(0) == "x = y\na = b\nz = w"


def test_sfunc():
    stmt = SAssign(AVar("z"), EBinOp(EVar("x"), OAdd(), EVar("y")))
    func = SFunc("foo", [EVar("x"), EVar("y")],
                 SBlock([stmt, SReturn(EVar("z"))]))
    assert func.gen(
        1) == "    def foo(x, y):\n        z = x + y\n        return z"


def test_simport():
    assert SImport("numpy").gen(0) == "import numpy"
    assert SImport("numpy", "np").gen(1) == "    import numpy as np"


def test_sreturn():
    return_ = SReturn(ETuple([EVar("a"), EVar("b")]))
    assert return_.gen(1) == "    return (a, b)"
