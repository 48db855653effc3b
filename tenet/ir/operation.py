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

Representation of the elementary tensor network operations

A program is a sequence of these operations. Tensors are immutable: every
operation consumes existing tensors and produces new ones, identified by fresh
integer IDs.
"""

import abc
from typing import Any, Iterable, List, Sequence, Tuple

from tenet.ir.errors import StructuralError


def _fmt_list(elems: Iterable[int]) -> str:
    return "[" + ", ".join([str(elem) for elem in elems]) + "]"


class Operation(metaclass=abc.ABCMeta):
    """
    Operation interface
    """

    @abc.abstractmethod
    def get_inputs(self) -> List[int]:
        """
        Get the IDs of the tensors consumed by this operation
        """
        raise NotImplementedError  # pragma: no cover

    @abc.abstractmethod
    def get_outputs(self) -> List[int]:
        """
        Get the IDs of the tensors produced by this operation
        """
        raise NotImplementedError  # pragma: no cover

    def __eq__(self, other: object) -> bool:
        """
        The == operator for operations
        """
        if isinstance(other, type(self)):
            return self.__key() == other.__key()
        return False

    def __hash__(self) -> int:
        """
        Hash the operation
        """
        return hash(repr(self))

    def __key(self) -> Iterable[Any]:
        """
        A tuple of all fields of an operation
        """
        return ()

    def __repr__(self) -> str:
        """
        A string representation of the operation for hashing
        """
        strs = [key if isinstance(key, str) else repr(key)
                for key in self.__key()]
        return "(" + type(self).__name__ + ", " + ", ".join(strs) + ")"


class Contraction(Operation):
    """
    A general tensor contraction, following the numpy.einsum convention

    Dimensions that share a subscript label and do not appear in outdims are
    summed over
    """

    def __init__(
            self,
            inputs: Sequence[int],
            subscripts: Sequence[Sequence[int]],
            outdims: Sequence[int],
            output: int) -> None:
        """
        Construct a new Contraction
        """
        if not inputs:
            raise StructuralError("Contraction requires at least one input")

        if len(inputs) != len(subscripts):
            raise StructuralError(
                "Inconsistent number of tensors for contraction: " +
                str(len(inputs)) + " inputs, " +
                str(len(subscripts)) + " subscript lists")

        if len(set(outdims)) != len(outdims):
            raise StructuralError(
                "Repeated contraction output label in " + _fmt_list(outdims))

        # A kept dimension must belong to exactly one input tensor
        for label in outdims:
            owners = [tid for tid, subs in zip(
                inputs, subscripts) if label in subs]
            if len(owners) > 1:
                raise StructuralError(
                    "Contraction output label " + str(label) +
                    " appears in several inputs: " +
                    ", ".join(["T" + str(tid) for tid in owners]))

        self.inputs = tuple(inputs)
        self.subscripts = tuple(tuple(subs) for subs in subscripts)
        self.outdims = tuple(outdims)
        self.output = output

    def get_inputs(self) -> List[int]:
        """
        Get the IDs of the tensors being contracted
        """
        return list(self.inputs)

    def get_outdims(self) -> List[int]:
        """
        Get the labels of the remaining dimensions, in output order
        """
        return list(self.outdims)

    def get_output(self) -> int:
        """
        Get the ID of the contracted tensor
        """
        return self.output

    def get_outputs(self) -> List[int]:
        """
        Get the IDs of the tensors produced by this operation
        """
        return [self.output]

    def get_subscripts(self) -> List[List[int]]:
        """
        Get the subscript labels of each input, one list per input
        """
        return [list(subs) for subs in self.subscripts]

    def _Operation__key(self) -> Iterable[Any]:
        """
        Iterable of fields of a Contraction
        """
        return self.inputs, self.subscripts, self.outdims, self.output

    def __str__(self) -> str:
        """
        The textual form of the Contraction
        """
        operands = ["T" + str(tid) + _fmt_list(subs)
                    for tid, subs in zip(self.inputs, self.subscripts)]
        return "T" + str(self.output) + " = einsum(" + \
            ", ".join(operands) + " -> " + _fmt_list(self.outdims) + ")"


class Transposition(Operation):
    """
    A general transposition, following the numpy.transpose convention
    """

    def __init__(self, input_: int, perm: Sequence[int], output: int) -> None:
        """
        Construct a new Transposition
        """
        for i in range(len(perm)):
            if i not in perm:
                raise StructuralError(
                    "Invalid permutation " + _fmt_list(perm) +
                    ": entry " + str(i) + " missing")

        self.input = input_
        self.perm = tuple(perm)
        self.output = output

    def get_input(self) -> int:
        """
        Get the ID of the tensor being transposed
        """
        return self.input

    def get_inputs(self) -> List[int]:
        """
        Get the IDs of the tensors consumed by this operation
        """
        return [self.input]

    def get_output(self) -> int:
        """
        Get the ID of the transposed tensor
        """
        return self.output

    def get_outputs(self) -> List[int]:
        """
        Get the IDs of the tensors produced by this operation
        """
        return [self.output]

    def get_perm(self) -> List[int]:
        """
        Get the permutation; dimension i of the output is dimension perm[i]
        of the input
        """
        return list(self.perm)

    def get_rank(self) -> int:
        """
        Get the number of dimensions of the input (and output) tensor
        """
        return len(self.perm)

    def _Operation__key(self) -> Iterable[Any]:
        """
        Iterable of fields of a Transposition
        """
        return self.input, self.perm, self.output

    def __str__(self) -> str:
        """
        The textual form of the Transposition
        """
        return "T" + str(self.output) + " = transpose(T" + \
            str(self.input) + ", " + _fmt_list(self.perm) + ")"


class QRSplit(Operation):
    """
    A QR decomposition of a tensor into two factors, without permuting its
    dimensions

    The leading `left` dimensions go to the Q factor, which gains a trailing
    bond dimension; the remaining ones go to the R factor, which gains a
    leading bond dimension
    """

    def __init__(
            self,
            input_: int,
            rank: int,
            left: int,
            q_output: int,
            r_output: int) -> None:
        """
        Construct a new QRSplit
        """
        if rank < 2:
            raise StructuralError(
                "Input tensor for QR splitting must have at least 2 dimensions; given " +
                str(rank))

        if left < 1:
            raise StructuralError(
                "Number of left dimensions for QR splitting must be at least 1; given " +
                str(left))

        if left >= rank:
            raise StructuralError(
                "Number of left dimensions for QR splitting must be smaller than " +
                str(rank) + "; given " + str(left))

        self.input = input_
        self.rank = rank
        self.left = left
        self.q_output = q_output
        self.r_output = r_output

    def get_input(self) -> int:
        """
        Get the ID of the tensor being split
        """
        return self.input

    def get_inputs(self) -> List[int]:
        """
        Get the IDs of the tensors consumed by this operation
        """
        return [self.input]

    def get_left(self) -> int:
        """
        Get the number of leading dimensions attributed to the Q factor
        """
        return self.left

    def get_right(self) -> int:
        """
        Get the number of trailing dimensions attributed to the R factor
        """
        return self.rank - self.left

    def get_outputs(self) -> List[int]:
        """
        Get the IDs of the Q and R factors, in that order
        """
        return [self.q_output, self.r_output]

    def get_q_output(self) -> int:
        """
        Get the ID of the Q factor
        """
        return self.q_output

    def get_r_output(self) -> int:
        """
        Get the ID of the R factor
        """
        return self.r_output

    def get_rank(self) -> int:
        """
        Get the number of dimensions of the input tensor
        """
        return self.rank

    def _Operation__key(self) -> Iterable[Any]:
        """
        Iterable of fields of a QRSplit
        """
        return self.input, self.rank, self.left, self.q_output, self.r_output

    def __str__(self) -> str:
        """
        The textual form of the QRSplit
        """
        return "T" + str(self.q_output) + ", T" + str(self.r_output) + \
            " = qr(T" + str(self.input) + ", rank=" + str(self.rank) + \
            ", left=" + str(self.left) + ")"
