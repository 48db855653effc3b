import pytest
from lark.lexer import Token
from lark.tree import Tree

from tenet.parse.utils import ParseUtils


def test_find_subtree():
    tensor = Tree("tensor", [Token("TENSOR", "T3")])
    labels = Tree("labels", [Token("INT", "0"), Token("INT", "1")])
    tree = Tree("operand", [tensor, labels])
    assert ParseUtils.find_subtree(tree, "labels") == labels


def test_find_subtree_missing():
    tensor = Tree("tensor", [Token("TENSOR", "T3")])
    tree = Tree("operand", [tensor])

    with pytest.raises(ValueError) as excinfo:
        ParseUtils.find_subtree(tree, "labels")

    assert str(excinfo.value) == "No labels in " + repr(tree)


def test_next_str():
    tree = Tree("tensor", [Token("TENSOR", "T12")])
    assert ParseUtils.next_str(tree) == "T12"
