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

Parse an input YAML describing a tensor network program
"""

from typing import Any, Dict, List, Optional

from tenet.ir.canonical import canonicalize
from tenet.ir.operation import Contraction
from tenet.ir.program import Program
from tenet.parse.operation import OperationParser
from tenet.parse.yaml import YamlParser


class Input:
    """
    Parse the input YAML for the compiler

    program:
        operations:
            - T2 = einsum(T0[7, 8], T1[8, 9] -> [7, 9])
    codegen:
        name: f
        shapes:
            0: [2, 3]
    """

    def __init__(self, yaml: Optional[dict]) -> None:
        """
        Read the YAML input
        """
        if yaml is None or "program" not in yaml.keys():
            raise ValueError("Input must contain a program")

        # Contractions are canonically relabeled before they are appended
        self.program = Program()
        for line in yaml["program"]["operations"]:
            op = OperationParser.parse(line)
            if isinstance(op, Contraction):
                op = canonicalize(op)
            self.program.append(op)

        codegen = yaml.get("codegen")
        if codegen is None:
            codegen = {}

        self.name: str = codegen.get("name", "f")

        self.shapes: Optional[Dict[int, List[Any]]] = None
        if "shapes" in codegen.keys():
            self.shapes = {int(tid): list(shape)
                           for tid, shape in codegen["shapes"].items()}

    @classmethod
    def from_file(cls, filename: str) -> "Input":
        """
        Construct a new Input from a YAML file
        """
        return cls(YamlParser.parse_file(filename))

    @classmethod
    def from_str(cls, string: str) -> "Input":
        """
        Construct a new Input from a string in the YAML format
        """
        return cls(YamlParser.parse_str(string))

    def get_name(self) -> str:
        """
        Get the name of the generated function
        """
        return self.name

    def get_program(self) -> Program:
        """
        Get the program
        """
        return self.program

    def get_shapes(self) -> Optional[Dict[int, List[Any]]]:
        """
        Get the shapes of the program inputs, if given
        """
        return self.shapes

    def __eq__(self, other: object) -> bool:
        """
        The == operator for Inputs
        """
        if isinstance(other, type(self)):
            return self.program == other.program and \
                self.name == other.name and \
                self.shapes == other.shapes
        return False
