## base class of drawable for polyclip results
## Copyright (c) 2020 Richard W. DeVaul
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

from polyclip.triangulator import split_holes, triangulate_polygon

## AutoCAD color index for the named colors we accept
colordict = {
    'red': 1,
    'yellow': 2,
    'green': 3,
    'aqua': 4,
    'blue': 5,
    'magenta': 6,
    'white': 7,
}

## Generic drawing functions -- assumed to use the current drawing pen
## (color, layer, etc.)

class Drawable:
    """Base class for polyclip drawables.

    A drawable accepts clip output, a list of point lists, through
    ``draw()``.  Subclasses override the pure virtual ``draw_line()``
    and ``draw_triangle()`` methods, and may override
    ``draw_polygon()`` when the target supports closed polylines.
    """

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_line(self, p1, p2):
        raise NotImplementedError('pure virtual draw_line called')

    def draw_triangle(self, p1, p2, p3):
        raise NotImplementedError('pure virtual draw_triangle called')

    def display(self):
        raise NotImplementedError('pure virtual display called')

    ## non-virtual utility drawing functions

    def draw_polygon(self, pts):
        n = len(pts)
        for i in range(n):
            self.draw_line(pts[i], pts[(i + 1) % n])

    def draw_fill(self, rings):
        for outer, holes in split_holes(rings):
            for tri in triangulate_polygon(outer, holes):
                self.draw_triangle(*tri)

    def draw(self, polygons):
        """draw a list of rings according to the current ``polystyle``"""
        if not isinstance(polygons, (list, tuple)):
            raise ValueError('bad polygon list passed to draw: {}'.format(polygons))
        if self.polystyle in ('fill', 'both'):
            self.draw_fill(polygons)
        if self.polystyle in ('lines', 'both'):
            for ring in polygons:
                self.draw_polygon(ring)

    def __init__(self):
        self.__linecolor = False
        self.__polystyle = 'lines'
        self.__layer = False
        self.__layerlist = [False, 'default']

    ## Various property functions

    @property
    def layerlist(self):
        return self.__layerlist

    def _set_layerlist(self, lst):
        self.__layerlist = lst

    @layerlist.setter
    def layerlist(self, lst):
        if isinstance(lst, list):
            self._set_layerlist(lst)
        else:
            raise ValueError('bad layer list ' + str(lst))

    @property
    def layer(self):
        return self.__layer

    def _set_layer(self, lyr):
        self.__layer = lyr

    @layer.setter
    def layer(self, lyr=False):
        if lyr in self.layerlist:
            self._set_layer(lyr)
        else:
            raise ValueError('bad layer: ' + str(lyr))

    @property
    def polystyle(self):
        return self.__polystyle

    @polystyle.setter
    def polystyle(self, pst):
        if pst in ['lines', 'fill', 'both']:
            self.__polystyle = pst
        else:
            raise ValueError('bad polystyle: ' + str(pst))

    @property
    def linecolor(self):
        return self.__linecolor

    @linecolor.setter
    def linecolor(self, color=False):
        if color is False or color in colordict or \
           (isinstance(color, int) and not isinstance(color, bool) and 0 < color < 256):
            self.__linecolor = color
        else:
            raise ValueError('bad linecolor: ' + str(color))

    def color_index(self, bylayer=256):
        """ current line color as an AutoCAD color index"""
        c = self.__linecolor
        if c is False:
            return bylayer
        if isinstance(c, str):
            return colordict[c]
        return c
