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

Symbol table of a tensor network program
"""

from typing import Dict, List, Tuple

from tenet.ir.errors import DuplicateOutputError, NoOutputError, UnsupportedOperationError
from tenet.ir.operation import Contraction, Operation, QRSplit, Transposition
from tenet.ir.program import Program


class SymbolEntry:
    """
    Whether a tensor is an input and/or output of the whole program
    """

    def __init__(self, is_input: bool, is_output: bool) -> None:
        self.is_input = is_input
        self.is_output = is_output

    def get_is_input(self) -> bool:
        """
        Returns true if the tensor is a program input
        """
        return self.is_input

    def get_is_output(self) -> bool:
        """
        Returns true if the tensor is a program output
        """
        return self.is_output

    def __eq__(self, other: object) -> bool:
        """
        The == operator for SymbolEntries
        """
        if isinstance(other, type(self)):
            return (self.is_input, self.is_output) == \
                (other.is_input, other.is_output)
        return False

    def __repr__(self) -> str:
        """
        A string representation of the SymbolEntry
        """
        return "SymbolEntry(is_input=" + str(self.is_input) + \
            ", is_output=" + str(self.is_output) + ")"


class SymbolTable:
    """
    Classify every tensor of a program as a program input, a program output,
    or an intermediate, enforcing static single assignment
    """

    def __init__(self, program: Program) -> None:
        """
        Build the symbol table in a single pass over the program
        """
        self.entries: Dict[int, SymbolEntry] = {}

        for op in program:
            inputs, outputs = SymbolTable.__operands(op)

            for tid in inputs:
                if tid in self.entries:
                    # Consumed later, so not a program output
                    self.entries[tid].is_output = False
                else:
                    self.entries[tid] = SymbolEntry(True, False)

            for tid in outputs:
                if tid in self.entries:
                    raise DuplicateOutputError(
                        "Output tensor T" + str(tid) + " appeared previously")
                self.entries[tid] = SymbolEntry(False, True)

        if not self.get_outputs():
            raise NoOutputError("At least one output tensor expected")

    def get_entry(self, tid: int) -> SymbolEntry:
        """
        Get the entry of a tensor
        """
        if tid not in self.entries:
            raise KeyError("Unknown tensor T" + str(tid))

        return self.entries[tid]

    def get_inputs(self) -> List[int]:
        """
        Get the program inputs, in ascending order
        """
        return [tid for tid in self.get_tensors()
                if self.entries[tid].get_is_input()]

    def get_outputs(self) -> List[int]:
        """
        Get the program outputs, in ascending order
        """
        return [tid for tid in self.get_tensors()
                if self.entries[tid].get_is_output()]

    def get_tensors(self) -> List[int]:
        """
        Get all tensors of the program, in ascending order
        """
        return sorted(self.entries.keys())

    @staticmethod
    def __operands(op: Operation) -> Tuple[List[int], List[int]]:
        """
        Get the consumed and produced tensors of an operation
        """
        if isinstance(op, Contraction):
            return op.get_inputs(), [op.get_output()]

        elif isinstance(op, Transposition):
            return [op.get_input()], [op.get_output()]

        elif isinstance(op, QRSplit):
            return [op.get_input()], [op.get_q_output(), op.get_r_output()]

        else:
            raise UnsupportedOperationError(
                "Unsupported operation: " + repr(op))

    def __contains__(self, tid: object) -> bool:
        """
        The in operator for SymbolTables
        """
        return tid in self.entries

    def __eq__(self, other: object) -> bool:
        """
        The == operator for SymbolTables
        """
        if isinstance(other, type(self)):
            return self.entries == other.entries
        return False

    def __len__(self) -> int:
        """
        The number of tensors in the program
        """
        return len(self.entries)
