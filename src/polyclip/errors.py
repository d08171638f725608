## polyclip exceptions
## Copyright (c) 2026 polyclip contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Exceptions raised by the clipping routines.

All of them derive from ``ValueError``: a clip call that fails was
handed input it cannot produce a valid polygon for, and nothing is
returned.  Parallel or near-parallel edges are not an error; they
simply contribute no intersection.
"""

from __future__ import annotations

from typing import Optional


class ClipError(ValueError):
    """Base class for clipping failures."""

    def __init__(self, message: str, role: Optional[str] = None):
        super().__init__(message)
        self.role = role


class InvalidPolygon(ClipError):
    """Input polygon is degenerate: too few points, non-finite
    coordinates, or an edge shared with the other polygon."""


class ClassificationInconsistency(ClipError):
    """Entry/exit labels along the subject contour do not alternate."""

    def __init__(self, message: str, labels: Optional[list] = None):
        super().__init__(message, role='subject')
        self.labels = list(labels) if labels else []


__all__ = [
    'ClipError',
    'InvalidPolygon',
    'ClassificationInconsistency',
]
