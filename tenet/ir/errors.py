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

Exceptions raised while building, validating and compiling a tensor network
program
"""


class TenetError(Exception):
    """
    Base class for all compiler errors
    """


class StructuralError(TenetError, ValueError):
    """
    A malformed operation, rejected at construction time
    """


class LabelReferenceError(TenetError, ValueError):
    """
    A contraction keeps an output label that no input carries
    """


class DuplicateOutputError(TenetError, ValueError):
    """
    A tensor is produced by more than one operation
    """


class NoOutputError(TenetError, ValueError):
    """
    A program without any output tensor
    """


class UnsupportedOperationError(TenetError, TypeError):
    """
    An operation kind the compiler does not know how to handle
    """


class ShapeMismatchError(TenetError, ValueError):
    """
    Two dimensions joined by a contraction have different extents
    """


class OperationParseError(TenetError, ValueError):
    """
    Text that does not describe a valid operation
    """
