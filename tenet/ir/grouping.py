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

Merging of tensor groups that are joined simultaneously
"""

from typing import Iterable, List, Set


def merge_overlapping(groups: Iterable[Iterable[int]]) -> List[List[int]]:
    """
    Merge all groups sharing at least one tensor, transitively

    Every merged group is returned sorted, and the merged groups appear in the
    order of their first member group in the input
    """
    remaining: List[Set[int]] = [set(group) for group in groups]

    merged = []
    while remaining:
        union = remaining.pop(0)

        # An absorbed group can intersect groups skipped earlier, so rescan
        # until nothing changes
        changed = True
        while changed:
            changed = False
            rest = []
            for group in remaining:
                if union & group:
                    union |= group
                    changed = True
                else:
                    rest.append(group)
            remaining = rest

        merged.append(sorted(union))

    return merged
