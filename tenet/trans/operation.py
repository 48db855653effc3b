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

Translate a single tensor network operation into NumPy statements
"""

from typing import List, Optional

from tenet.ir.errors import UnsupportedOperationError
from tenet.ir.operation import Contraction, Operation, QRSplit, Transposition
from tenet.ir.shape import ShapeInference
from tenet.pycode import *
from tenet.trans.utils import TransUtils


class OperationTrans:
    """
    Generate the NumPy code for the operations of a program
    """

    def __init__(self, shape_inf: Optional[ShapeInference] = None) -> None:
        """
        Construct a new OperationTrans; with shape inference, every
        assignment is annotated with the shape it produces
        """
        self.shape_inf = shape_inf

    def translate(self, op: Operation) -> Statement:
        """
        Translate one operation
        """
        if isinstance(op, Contraction):
            return self.make_contraction(op)

        elif isinstance(op, Transposition):
            return self.make_transposition(op)

        elif isinstance(op, QRSplit):
            return self.make_qr_split(op)

        else:
            raise UnsupportedOperationError(
                "Unsupported operation: " + repr(op))

    def make_contraction(self, op: Contraction) -> Statement:
        """
        Make a call to np.einsum() in its sublist form:
        np.einsum(T0, (0, 1), T1, (1, 2), (0, 2))
        """
        args: List[Argument] = []
        for tid, subs in zip(op.get_inputs(), op.get_subscripts()):
            args.append(AJust(EVar(TransUtils.tensor_name(tid))))
            args.append(AJust(TransUtils.build_int_tuple(subs)))
        args.append(AJust(TransUtils.build_int_tuple(op.get_outdims())))

        einsum = TransUtils.build_np_call("einsum", args)
        return self.__assign(op.get_output(), einsum)

    def make_qr_split(self, op: QRSplit) -> Statement:
        """
        Make a call to np.linalg.qr(), reshaping the input into a matrix and
        the factors back into tensors if necessary
        """
        in_name = TransUtils.tensor_name(op.get_input())
        q_name = TransUtils.tensor_name(op.get_q_output())
        r_name = TransUtils.tensor_name(op.get_r_output())

        # Conventional QR decomposition of a matrix
        if op.get_rank() == 2:
            matrix: Expression = EVar(in_name)

        else:
            rows = TransUtils.build_np_call(
                "prod", [AJust(TransUtils.build_shape_slice(op.get_input(), None, op.get_left()))])
            cols = TransUtils.build_np_call(
                "prod", [AJust(TransUtils.build_shape_slice(op.get_input(), op.get_left(), None))])
            matrix = EMethod(EVar(in_name), "reshape",
                             [AJust(ETuple([rows, cols]))])

        qr = TransUtils.build_np_call(
            "linalg.qr", [AJust(matrix), AParam("mode", EString("reduced"))])
        factors = ATuple([AVar(q_name), AVar(r_name)])

        comment: Optional[str] = None
        if self.shape_inf is not None:
            rows_ext, cols_ext = self.shape_inf.get_matrix_shape(op)
            bond = self.shape_inf.get_shape(op.get_q_output())[-1]
            comment = "shapes: " + TransUtils.fmt_shape([rows_ext, bond]) + \
                ", " + TransUtils.fmt_shape([bond, cols_ext])

        code = SBlock([SAssign(factors, qr, comment)])

        # The Q factor gets back the leading dimensions and the new bond
        if op.get_left() > 1:
            bond_q = ETuple([EAccess(EField(q_name, "shape"), EInt(1))])
            shape_q = EBinOp(
                TransUtils.build_shape_slice(
                    op.get_input(), None, op.get_left()), OAdd(), bond_q)
            reshape_q = EMethod(EVar(q_name), "reshape", [AJust(shape_q)])
            code.add(self.__assign(op.get_q_output(), reshape_q))

        # The R factor gets the new bond and back the trailing dimensions
        if op.get_right() > 1:
            bond_r = ETuple([EAccess(EField(r_name, "shape"), EInt(0))])
            shape_r = EBinOp(
                bond_r, OAdd(), TransUtils.build_shape_slice(
                    op.get_input(), op.get_left(), None))
            reshape_r = EMethod(EVar(r_name), "reshape", [AJust(shape_r)])
            code.add(self.__assign(op.get_r_output(), reshape_r))

        return code

    def make_transposition(self, op: Transposition) -> Statement:
        """
        Make a call to np.transpose()
        """
        in_name = TransUtils.tensor_name(op.get_input())
        args = [AJust(EVar(in_name)),
                AJust(TransUtils.build_int_tuple(op.get_perm()))]

        transpose = TransUtils.build_np_call("transpose", args)
        return self.__assign(op.get_output(), transpose)

    def __assign(self, tid: int, expr: Expression) -> Statement:
        """
        Assign an expression to a tensor, annotated with its shape if known
        """
        comment: Optional[str] = None
        if self.shape_inf is not None:
            shape = self.shape_inf.get_shape(tid)
            comment = "shape: " + TransUtils.fmt_shape(shape)

        return SAssign(AVar(TransUtils.tensor_name(tid)), expr, comment)
