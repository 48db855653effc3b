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

Python AST and code generation for expressions
"""

from typing import Optional, Sequence

from tenet.pycode.base import Argument, Expression, Operator


class EAccess(Expression):
    """
    An access into a sequence or dictionary
    """

    def __init__(self, obj: Expression, ind: Expression) -> None:
        self.obj = obj
        self.ind = ind

    def gen(self) -> str:
        """
        Generate the Python code for an EAccess
        """
        return self.obj.gen() + "[" + self.ind.gen() + "]"


class EBinOp(Expression):
    """
    A Python binary operation
    """

    def __init__(
            self,
            expr1: Expression,
            op: Operator,
            expr2: Expression) -> None:
        self.expr1 = expr1
        self.op = op
        self.expr2 = expr2

    def gen(self) -> str:
        """
        Generate the Python code for an EBinOp
        """
        return self.expr1.gen() + " " + self.op.gen() + " " + self.expr2.gen()


class EField(Expression):
    """
    A Python object field access
    """

    def __init__(self, obj: str, field: str):
        self.obj = obj
        self.field = field

    def gen(self) -> str:
        """
        Generate the Python code for an EField
        """
        return self.obj + "." + self.field


class EFunc(Expression):
    """
    A Python function call
    """

    def __init__(self, name: str, args: Sequence[Argument]) -> None:
        self.name = name
        self.args = args

    def gen(self) -> str:
        """
        Generate the Python code for an EFunc
        """
        return self.name + \
            "(" + ", ".join([a.gen() for a in self.args]) + ")"


class EInt(Expression):
    """
    A Python integer
    """

    def __init__(self, int_: int) -> None:
        self.int = int_

    def gen(self) -> str:
        """
        Generate Python code for an EInt
        """
        return str(self.int)


class EMethod(Expression):
    """
    A Python method call
    """

    def __init__(self, obj: Expression, name: str,
                 args: Sequence[Argument]) -> None:
        self.obj = obj
        self.name = name
        self.args = args

    def gen(self) -> str:
        """
        Generate the Python code for an EMethod
        """
        return self.obj.gen() + "." + self.name + \
            "(" + ", ".join([a.gen() for a in self.args]) + ")"


class ESlice(Expression):
    """
    A slice used inside an access, e.g. the ":2" of "x[:2]"
    """

    def __init__(
            self,
            start: Optional[Expression],
            stop: Optional[Expression]) -> None:
        self.start = start
        self.stop = stop

    def gen(self) -> str:
        """
        Generate the Python code for an ESlice
        """
        start = "" if self.start is None else self.start.gen()
        stop = "" if self.stop is None else self.stop.gen()
        return start + ":" + stop


class EString(Expression):
    """
    A string in Python
    """

    def __init__(self, string: str) -> None:
        self.string = string

    def gen(self) -> str:
        """
        Generate the Python code for an EString
        """
        return "\"" + self.string + "\""


class ETuple(Expression):
    """
    A tuple in Python
    """

    def __init__(self, elems: Sequence[Expression]) -> None:
        self.elems = elems

    def gen(self) -> str:
        """
        Generate the Python code for this tuple
        """
        # A single element tuple in Python needs an extra trailing comma
        if len(self.elems) == 1:
            return "(" + self.elems[0].gen() + ",)"

        else:
            return "(" + ", ".join([elem.gen() for elem in self.elems]) + ")"


class EVar(Expression):
    """
    A Python variable
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def gen(self) -> str:
        """
        Generate the Python code for an EVar
        """
        return self.name
