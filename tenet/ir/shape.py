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

Symbolic shape arithmetic for the tensors of a program
"""

from sympy import Basic, Integer, Min, Mul, Symbol  # type: ignore
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from tenet.ir.errors import LabelReferenceError, ShapeMismatchError, StructuralError, UnsupportedOperationError
from tenet.ir.operation import Contraction, QRSplit, Transposition
from tenet.ir.program import Program

Shape = Tuple[Basic, ...]


class ShapeInference:
    """
    Propagate tensor shapes through a program

    Program inputs without a given shape get one fresh symbol per dimension,
    named d<tensor>_<axis>
    """

    def __init__(
            self,
            program: Program,
            shapes: Optional[Mapping[int, Sequence[Any]]] = None) -> None:
        """
        Construct the shapes of all tensors of the program
        """
        self.shapes: Dict[int, Shape] = {}
        if shapes is not None:
            for tid, shape in shapes.items():
                self.shapes[tid] = tuple(
                    ShapeInference.__extent(ext) for ext in shape)

        for op in program:
            if isinstance(op, Contraction):
                self.__contraction(op)

            elif isinstance(op, Transposition):
                shape = self.__lookup(op.get_input(), op.get_rank())
                self.shapes[op.get_output()] = tuple(
                    shape[i] for i in op.get_perm())

            elif isinstance(op, QRSplit):
                shape = self.__lookup(op.get_input(), op.get_rank())
                left = shape[:op.get_left()]
                right = shape[op.get_left():]

                bond = Min(Mul(*left), Mul(*right))
                self.shapes[op.get_q_output()] = left + (bond,)
                self.shapes[op.get_r_output()] = (bond,) + right

            else:
                raise UnsupportedOperationError(
                    "Unsupported operation: " + repr(op))

    def get_matrix_shape(self, op: QRSplit) -> Tuple[Basic, Basic]:
        """
        Get the shape of the matrix the input of a QRSplit is flattened into
        """
        shape = self.get_shape(op.get_input())
        return Mul(*shape[:op.get_left()]), Mul(*shape[op.get_left():])

    def get_shape(self, tid: int) -> Shape:
        """
        Get the shape of a tensor
        """
        if tid not in self.shapes:
            raise KeyError("Unknown tensor T" + str(tid))

        return self.shapes[tid]

    def __contraction(self, op: Contraction) -> None:
        """
        Compute the shape of the result of a contraction
        """
        extents: Dict[int, Basic] = {}
        for tid, subs in zip(op.get_inputs(), op.get_subscripts()):
            shape = self.__lookup(tid, len(subs))
            for label, ext in zip(subs, shape):
                if label not in extents:
                    extents[label] = ext
                    continue

                diff = extents[label] - ext
                if diff.is_number and diff != 0:
                    raise ShapeMismatchError(
                        "Dimension " + str(label) + " of T" + str(tid) +
                        " has extent " + str(ext) + ", expected " +
                        str(extents[label]))

        out: List[Basic] = []
        for label in op.get_outdims():
            if label not in extents:
                raise LabelReferenceError(
                    "Contraction output label " + str(label) +
                    " never appeared in the input subscripts")
            out.append(extents[label])

        self.shapes[op.get_output()] = tuple(out)

    def __lookup(self, tid: int, rank: int) -> Shape:
        """
        Get the shape of an operand, inventing one for unknown program inputs
        """
        if tid not in self.shapes:
            self.shapes[tid] = tuple(
                Symbol("d" + str(tid) + "_" + str(i)) for i in range(rank))

        shape = self.shapes[tid]
        if len(shape) != rank:
            raise StructuralError(
                "Tensor T" + str(tid) + " has " + str(len(shape)) +
                " dimensions, but is used with " + str(rank))

        return shape

    @staticmethod
    def __extent(ext: Any) -> Basic:
        """
        Build the sympy expression for a given extent
        """
        if isinstance(ext, Basic):
            return ext

        elif isinstance(ext, bool):
            raise ValueError("Unable to use " + str(ext) + " as an extent")

        elif isinstance(ext, int):
            return Integer(ext)

        elif isinstance(ext, str):
            return Symbol(ext)

        else:
            raise ValueError("Unable to use " + str(ext) +
                             " with type " + str(type(ext)) + " as an extent")
