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

Translate a tensor network program into a NumPy function
"""

from typing import Any, Mapping, Optional, Sequence

from tenet.ir.program import Program
from tenet.ir.shape import ShapeInference
from tenet.ir.symtab import SymbolTable
from tenet.pycode import *
from tenet.trans.operation import OperationTrans
from tenet.trans.utils import TransUtils


class NumPyCode:
    """
    Translate a given program into the corresponding NumPy code

    The generated function takes the program inputs as parameters and
    returns the program outputs, both in ascending order of tensor ID
    """

    def __init__(
            self,
            program: Program,
            symtab: Optional[SymbolTable] = None,
            name: str = "f",
            shapes: Optional[Mapping[int, Sequence[Any]]] = None) -> None:
        """
        Perform the program to NumPy translation
        """
        self.program = program
        self.symtab = symtab if symtab is not None else SymbolTable(program)
        self.name = name

        shape_inf: Optional[ShapeInference] = None
        if shapes is not None:
            shape_inf = ShapeInference(program, shapes)
        self.op_trans = OperationTrans(shape_inf)

        self.code = SBlock([SImport("numpy", TransUtils.NP),
                            SBlank(), SBlank(), self.__make_func()])

    def get_code(self) -> Statement:
        """
        Get the generated module as a Python AST
        """
        return self.code

    def __make_func(self) -> Statement:
        """
        Generate the function definition
        """
        params = [EVar(TransUtils.tensor_name(tid))
                  for tid in self.symtab.get_inputs()]

        body = SBlock([])
        for op in self.program:
            body.add(self.op_trans.translate(op))

        outputs = [EVar(TransUtils.tensor_name(tid))
                   for tid in self.symtab.get_outputs()]
        if len(outputs) == 1:
            body.add(SReturn(outputs[0]))
        else:
            body.add(SReturn(ETuple(outputs)))

        return SFunc(self.name, params, body)

    def __str__(self) -> str:
        """
        Return the source text of the generated module
        """
        return self.code.gen(0) + "\n"
