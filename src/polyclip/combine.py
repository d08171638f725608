## polyclip boolean operation support for simple 2D polygons
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

from copy import deepcopy

from polyclip.geom import polybbox, signed_area
from polyclip.weiler import OPERATIONS, clip


class Boolean:
    """Boolean operation on a subject and a clip polygon"""

    types = OPERATIONS

    def __repr__(self):
        return f"Boolean({self.type},{self.subject},{self.clip})"

    def __init__(self, type='intersection', subject=(), clip=(), *, config=None):
        if not type in self.types:
            raise ValueError('invalid type passed to Boolean(): {}'.format(type))
        self.__type = type
        self.__subject = deepcopy(list(subject))
        self.__clip = deepcopy(list(clip))
        self.__config = config
        self.__update = True
        self.__outline = []

    @property
    def type(self):
        return self.__type

    @property
    def subject(self):
        return deepcopy(self.__subject)

    @property
    def clip(self):
        return deepcopy(self.__clip)

    @property
    def update(self):
        return self.__update

    ## the result is computed on first access and cached until an
    ## operand is replaced
    @property
    def geom(self):
        if self.__update:
            self.__outline = clip(self.__subject, self.__clip, self.__type,
                                  config=self.__config)
            self.__update = False
        return deepcopy(self.__outline)

    def setSubject(self, pts):
        self.__subject = deepcopy(list(pts))
        self.__update = True

    def setClip(self, pts):
        self.__clip = deepcopy(list(pts))
        self.__update = True

    @property
    def area(self):
        """ net signed area of the result; clockwise hole rings subtract"""
        return sum(signed_area(ring) for ring in self.geom)

    @property
    def bbox(self):
        """ bounding box of the result, or ``None`` if the result is empty"""
        pts = [p for ring in self.geom for p in ring]
        if not pts:
            return None
        return polybbox(pts)
