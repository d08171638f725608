## polyclip framework for dxf-rendered clip results using the ezdxf
## package.
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

import ezdxf

import polyclip.drawable as drawable

## class to provide dxf drawing functionality
class ezdxfDraw(drawable.Drawable):

    def __init__(self):
        super().__init__()

        # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
        # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.layers.new('SUBJECT', dxfattribs={'color': 5}) #blue
        self.__doc.layers.new('CLIP', dxfattribs={'color': 3}) #green
        self.__doc.layers.new('RESULT', dxfattribs={'color': 2}) #yellow
        self.__msp = self.__doc.modelspace()
        self.__filename = "polyclip-out"
        self.layerlist = [False, '0', 'SUBJECT', 'CLIP', 'RESULT']

    def __repr__(self):
        return 'an instance of ezdxfDraw'

    ## properties

    @property
    def doc(self):
        return self.__doc

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self, name):
        self.__filename = name

    @filename.setter
    def filename(self, name):
        if not isinstance(name, str):
            raise ValueError('bad (non-string) filename: ' + str(name))
        self._set_filename(name)

    def _attribs(self):
        layer = self.layer
        if layer == False:
            layer = '0'
        return {'layer': layer, 'color': self.color_index()}

    ## Overload virtual polyclip.drawable base class drawing methods

    def draw_line(self, p1, p2):
        self.__msp.add_line((p1[0], p1[1]), (p2[0], p2[1]),
                            dxfattribs=self._attribs())

    def draw_polygon(self, pts):
        self.__msp.add_lwpolyline([(p[0], p[1]) for p in pts], close=True,
                                  dxfattribs=self._attribs())

    def draw_triangle(self, p1, p2, p3):
        # 3DFACE takes four corners; repeating the last makes a triangle
        self.__msp.add_3dface([(p1[0], p1[1], 0), (p2[0], p2[1], 0),
                               (p3[0], p3[1], 0), (p3[0], p3[1], 0)],
                              dxfattribs=self._attribs())

    def display(self):
        self.__doc.saveas("{}.dxf".format(self.filename))
