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

Useful functions for generating NumPy code
"""

from typing import Any, Iterable, Optional, Sequence

from tenet.pycode import *


class TransUtils:
    """
    Different utilities for generating NumPy programs
    """

    # Module alias of the generated import
    NP = "np"

    @staticmethod
    def build_int_tuple(ints: Iterable[int]) -> Expression:
        """
        Build a tuple of integer literals
        """
        return ETuple([EInt(i) for i in ints])

    @staticmethod
    def build_np_call(name: str, args: Sequence[Argument]) -> Expression:
        """
        Build a call to a NumPy function, e.g. np.linalg.qr(...)
        """
        return EFunc(TransUtils.NP + "." + name, args)

    @staticmethod
    def build_shape_slice(
            tid: int,
            start: Optional[int],
            stop: Optional[int]) -> Expression:
        """
        Build a slice of the shape of a tensor, e.g. T3.shape[:2]
        """
        start_expr = None if start is None else EInt(start)
        stop_expr = None if stop is None else EInt(stop)
        shape = EField(TransUtils.tensor_name(tid), "shape")
        return EAccess(shape, ESlice(start_expr, stop_expr))

    @staticmethod
    def fmt_shape(shape: Sequence[Any]) -> str:
        """
        Format a shape the way Python prints tuples
        """
        if len(shape) == 1:
            return "(" + str(shape[0]) + ",)"
        return "(" + ", ".join([str(ext) for ext in shape]) + ")"

    @staticmethod
    def tensor_name(tid: int) -> str:
        """
        Get the variable name of a tensor
        """
        return "T" + str(tid)
