"""
MIT License

Copyright (c) 2021 University of Illinois

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

Parse the textual form of tensor network operations
"""

from lark import Lark
from lark.exceptions import LarkError
from lark.tree import Tree
from typing import List

from tenet.ir.errors import OperationParseError
from tenet.ir.operation import Contraction, Operation, QRSplit, Transposition
from tenet.parse.utils import ParseUtils


class OperationParser:
    """
    A simple parser for one operation per line, e.g.

        T2 = einsum(T0[0, 1], T1[1, 2] -> [0, 2])
        T3 = transpose(T2, [1, 0])
        T4, T5 = qr(T3, rank=2, left=1)
    """

    grammar = """
        ?start: einsum
              | transpose
              | qr

        einsum: tensor "=" "einsum" "(" operand ("," operand)* "->" labels ")"

        transpose: tensor "=" "transpose" "(" tensor "," labels ")"

        qr: tensor "," tensor "=" "qr" "(" tensor "," "rank" "=" INT "," "left" "=" INT ")"

        operand: tensor labels

        labels: "[" [INT ("," INT)*] "]"

        tensor: TENSOR

        TENSOR: /T[0-9]+/

        %import common.INT
        %import common.WS_INLINE

        %ignore WS_INLINE
    """
    parser = Lark(grammar)

    @staticmethod
    def parse(text: str) -> Operation:
        """
        Parse an operation
        """
        tree = OperationParser.parse_tree(text)

        if tree.data == "einsum":
            output = OperationParser.__tensor(tree.children[0])
            operands = tree.children[1:-1]
            inputs = [OperationParser.__tensor(ParseUtils.find_subtree(
                operand, "tensor")) for operand in operands]
            subscripts = [OperationParser.__labels(ParseUtils.find_subtree(
                operand, "labels")) for operand in operands]
            outdims = OperationParser.__labels(tree.children[-1])
            return Contraction(inputs, subscripts, outdims, output)

        elif tree.data == "transpose":
            output, input_ = [OperationParser.__tensor(
                child) for child in tree.children[:2]]
            perm = OperationParser.__labels(tree.children[2])
            return Transposition(input_, perm, output)

        elif tree.data == "qr":
            q_output, r_output, input_ = [OperationParser.__tensor(
                child) for child in tree.children[:3]]
            rank, left = [int(child) for child in tree.children[3:]]
            return QRSplit(input_, rank, left, q_output, r_output)

        else:
            raise ValueError(
                "Unknown operation: " +
                repr(tree))  # pragma: no cover

    @staticmethod
    def parse_tree(text: str) -> Tree:
        """
        Parse an operation into its lark parse tree
        """
        try:
            return OperationParser.parser.parse(text)
        except LarkError as err:
            raise OperationParseError(
                "Unable to parse operation: " + text) from err

    @staticmethod
    def __labels(tree: object) -> List[int]:
        """
        Get the integers of a labels (or permutation) subtree
        """
        if not isinstance(tree, Tree) or tree.data != "labels":
            raise ValueError("Unknown labels: " + repr(tree))

        return [int(tok) for tok in tree.children if tok is not None]

    @staticmethod
    def __tensor(tree: object) -> int:
        """
        Get the tensor ID of a tensor subtree
        """
        if not isinstance(tree, Tree) or tree.data != "tensor":
            raise ValueError("Unknown tensor: " + repr(tree))

        return int(ParseUtils.next_str(tree)[1:])
