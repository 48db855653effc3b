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

Python AST and code generation for statements
"""

from typing import List, Optional

from tenet.pycode.base import Assignable, Expression, Statement
from tenet.pycode.expr import EVar


class SAssign(Statement):
    """
    An assignment, optionally followed by a trailing comment
    """

    def __init__(
            self,
            assn: Assignable,
            expr: Expression,
            comment: Optional[str] = None) -> None:
        self.assn = assn
        self.expr = expr
        self.comment = comment

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SAssign
        """
        out = "    " * depth + self.assn.gen() + " = " + self.expr.gen()
        if self.comment is not None:
            out += "  # " + self.comment
        return out


class SBlank(Statement):
    """
    An empty line
    """

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SBlank

        Note: blank lines carry no indentation
        """
        return ""


class SBlock(Statement):
    """
    A block of statements
    """

    def __init__(self, stmts: List[Statement]) -> None:
        self.stmts = stmts

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SBlock
        """
        return "\n".join([s.gen(depth) for s in self.stmts])

    def add(self, stmt: Statement) -> None:
        """
        Add a statement onto the end of the SBlock, combine if the new
        statement is also an SBlock
        """
        if isinstance(stmt, SBlock):
            self.stmts.extend(stmt.stmts)
        else:
            self.stmts.append(stmt)


class SFunc(Statement):
    """
    A function definition
    """

    def __init__(self, name: str, args: List[EVar], body: Statement) -> None:
        self.name = name
        self.args = args
        self.body = body

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SFunc
        """
        args = ", ".join([arg.gen() for arg in self.args])
        header = "def " + self.name + "(" + args + "):\n"
        return "    " * depth + header + self.body.gen(depth + 1)


class SImport(Statement):
    """
    An import of a module, optionally under an alias
    """

    def __init__(self, module: str, alias: Optional[str] = None) -> None:
        self.module = module
        self.alias = alias

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SImport
        """
        out = "    " * depth + "import " + self.module
        if self.alias is not None:
            out += " as " + self.alias
        return out


class SReturn(Statement):
    """
    A return statement for the end of a function
    """

    def __init__(self, expr: Expression) -> None:
        self.expr = expr

    def gen(self, depth: int) -> str:
        """
        Generate the Python output for an SReturn
        """
        return "    " * depth + "return " + self.expr.gen()
