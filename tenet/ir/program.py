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

Top-level tensor network program representation
"""

from typing import Iterable, Iterator, Optional, Set, Tuple

from tenet.ir.errors import UnsupportedOperationError
from tenet.ir.operation import Operation


class Program:
    """
    An append-only sequence of tensor network operations
    """

    def __init__(self, ops: Optional[Iterable[Operation]] = None) -> None:
        """
        Construct a new Program, optionally from existing operations
        """
        self.ops: Tuple[Operation, ...] = ()
        if ops is not None:
            for op in ops:
                self.append(op)

    def append(self, op: Operation) -> None:
        """
        Append an operation to the end of the program
        """
        if not isinstance(op, Operation):
            raise UnsupportedOperationError(
                "Cannot append " + repr(op) + " to a program")

        self.ops += (op,)

    def get_operations(self) -> Tuple[Operation, ...]:
        """
        Get the operations of the program, in order
        """
        return self.ops

    def produced(self) -> Set[int]:
        """
        Get the IDs of all tensors produced by some operation
        """
        return {tid for op in self.ops for tid in op.get_outputs()}

    def reset(self) -> None:
        """
        Remove all operations
        """
        self.ops = ()

    def __eq__(self, other: object) -> bool:
        """
        The == operator for Programs
        """
        if isinstance(other, type(self)):
            return self.ops == other.ops
        return False

    def __iter__(self) -> Iterator[Operation]:
        """
        Iterate over the operations in order
        """
        return iter(self.ops)

    def __len__(self) -> int:
        """
        The number of operations
        """
        return len(self.ops)

    def __str__(self) -> str:
        """
        The textual form of the program, one operation per line
        """
        return "\n".join([str(op) for op in self.ops])
