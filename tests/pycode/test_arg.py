from tenet.pycode import *


def test_ajust():
    just = AJust(EVar("i"))
    assert just.gen() == "i"


def test_aparam():
    param = AParam("mode", EString("reduced"))
    assert param.gen() == "mode=\"reduced\""
