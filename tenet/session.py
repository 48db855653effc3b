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

A compilation session: the boundary between a diagram editor and the compiler

The session owns the program being built, allocates tensor IDs and keeps the
rank of every tensor, so that each operation can be fully validated before it
is appended.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from tenet.ir.canonical import canonicalize
from tenet.ir.errors import StructuralError
from tenet.ir.grouping import merge_overlapping
from tenet.ir.operation import Contraction, Operation, QRSplit, Transposition
from tenet.ir.program import Program
from tenet.trans.codegen import NumPyCode

logger = logging.getLogger(__name__)


class Session:
    """
    Build a program one edit at a time and regenerate its code
    """

    def __init__(self, name: str = "f") -> None:
        """
        Construct an empty session; name is the name of the generated function
        """
        self.name = name
        self.program = Program()
        self.ranks: Dict[int, int] = {}
        self.count = 0
        self.code: Optional[str] = None

    def add_tensor(self, rank: int) -> int:
        """
        Register a new tensor that is not computed by the program (a program
        input), returning its ID
        """
        if rank < 0:
            raise StructuralError(
                "Rank of a tensor must be non-negative; given " + str(rank))

        tid = self.__next_id()
        self.ranks[tid] = rank
        self.count = tid + 1
        return tid

    def append_contraction(
            self,
            groups: Iterable[Iterable[int]],
            subscripts: Mapping[int, Sequence[int]]) -> List[int]:
        """
        Contract every group of joined tensors into a new tensor

        Overlapping groups are merged first. Legs joined together share a
        subscript label; every label that occurs only once in a group is kept,
        in order of appearance. Returns the IDs of the new tensors, one per
        merged group
        """
        ops: List[Tuple[Operation, List[int]]] = []
        next_id = self.__next_id()
        for group in merge_overlapping(groups):
            subs = []
            for tid in group:
                if tid not in subscripts:
                    raise StructuralError(
                        "No subscripts given for tensor T" + str(tid))
                self.__check_rank(tid, len(subscripts[tid]))
                subs.append(list(subscripts[tid]))

            counts = Counter([label for labels in subs for label in labels])
            outdims = [label for labels in subs for label in labels
                       if counts[label] == 1]

            op = canonicalize(Contraction(group, subs, outdims, next_id))
            ops.append((op, [len(outdims)]))
            next_id += 1

        for op, ranks in ops:
            self.__commit(op, ranks)

        return [op.get_outputs()[0] for op, _ in ops]

    def append_qr_split(self, tensor: int, left: int) -> Tuple[int, int]:
        """
        Split a tensor into a Q factor holding its first left dimensions and
        an R factor holding the rest, returning the IDs of both factors
        """
        return self.append_split(tensor, list(range(self.get_rank(tensor))), left)

    def append_split(
            self,
            tensor: int,
            perm: Sequence[int],
            left: int) -> Tuple[int, int]:
        """
        Transpose a tensor, then split it as in append_qr_split()
        """
        rank = self.get_rank(tensor)
        self.__check_rank(tensor, len(perm))

        ops: List[Tuple[Operation, List[int]]] = []
        next_id = self.__next_id()
        if not Session.__is_identity(perm):
            ops.append((Transposition(tensor, perm, next_id), [rank]))
            tensor = next_id
            next_id += 1

        split = QRSplit(tensor, rank, left, next_id, next_id + 1)
        ops.append((split, [left + 1, rank - left + 1]))

        for op, ranks in ops:
            self.__commit(op, ranks)

        return split.get_q_output(), split.get_r_output()

    def append_transposition(self, tensor: int, perm: Sequence[int]) -> int:
        """
        Transpose a tensor, returning the ID of the transposed tensor

        The identity permutation leaves the tensor as it is
        """
        self.__check_rank(tensor, len(perm))
        if Session.__is_identity(perm):
            logger.debug("Skipped identity transposition of T%d", tensor)
            return tensor

        op = Transposition(tensor, perm, self.__next_id())
        self.__commit(op, [len(perm)])
        return op.get_output()

    def get_code(self) -> Optional[str]:
        """
        Get the code of the last successful regeneration
        """
        return self.code

    def get_program(self) -> Program:
        """
        Get the program built so far
        """
        return self.program

    def get_rank(self, tensor: int) -> int:
        """
        Get the number of dimensions of a tensor
        """
        if tensor not in self.ranks:
            raise StructuralError("Unknown tensor T" + str(tensor))

        return self.ranks[tensor]

    def regenerate(self) -> str:
        """
        Regenerate the code of the whole program

        On failure the code of the last successful regeneration is kept
        """
        code = str(NumPyCode(self.program, name=self.name))
        self.code = code

        logger.debug(
            "Regenerated code for %d operations:\n%s", len(
                self.program), code)
        return code

    def reset(self) -> None:
        """
        Discard the program and all tensors
        """
        self.program.reset()
        self.ranks = {}
        self.count = 0
        self.code = None

    def __check_rank(self, tensor: int, rank: int) -> None:
        """
        Check that a tensor is used with the right number of dimensions
        """
        if self.get_rank(tensor) != rank:
            raise StructuralError(
                "Tensor T" + str(tensor) + " has " +
                str(self.get_rank(tensor)) +
                " dimensions, but is used with " + str(rank))

    def __commit(self, op: Operation, ranks: List[int]) -> None:
        """
        Append a validated operation and register its outputs
        """
        for tid, rank in zip(op.get_outputs(), ranks):
            self.ranks[tid] = rank
            self.count = max(self.count, tid + 1)

        self.program.append(op)
        logger.debug("Appended %s", op)

    def __next_id(self) -> int:
        """
        Get the next unused tensor ID, skipping tensors produced by operations
        appended to the program directly
        """
        return max([self.count] + [tid + 1 for tid in self.program.produced()])

    @staticmethod
    def __is_identity(perm: Sequence[int]) -> bool:
        """
        Returns true if the permutation leaves every dimension in place
        """
        return list(perm) == list(range(len(perm)))
