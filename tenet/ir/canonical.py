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

Canonical relabeling of contraction subscripts
"""

from typing import Dict, List

from tenet.ir.errors import LabelReferenceError
from tenet.ir.operation import Contraction


def canonicalize(contraction: Contraction) -> Contraction:
    """
    Relabel the subscripts of a contraction with 0, 1, 2, ... in order of
    first appearance (inputs in order, dimensions of each input in order)

    Structurally equivalent contractions therefore become equal, whatever
    leg IDs they were built from
    """
    first_appearance: Dict[int, int] = {}

    subscripts: List[List[int]] = []
    for subs in contraction.get_subscripts():
        canon = []
        for label in subs:
            if label not in first_appearance:
                first_appearance[label] = len(first_appearance)
            canon.append(first_appearance[label])
        subscripts.append(canon)

    outdims = []
    for label in contraction.get_outdims():
        if label not in first_appearance:
            raise LabelReferenceError(
                "Contraction output label " + str(label) +
                " never appeared in the input subscripts")
        outdims.append(first_appearance[label])

    return Contraction(
        contraction.get_inputs(),
        subscripts,
        outdims,
        contraction.get_output())
