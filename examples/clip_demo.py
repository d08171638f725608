## polyclip boolean operations example

from polyclip.combine import Boolean
from polyclip.geom import add, point

import math

def makeStar(center, rad=5.0, inner=2.0, points=5, phase=0.0):
    pts = []
    for i in range(points*2):
        ang = phase + (math.pi/points)*i
        r = rad if i%2 == 0 else inner
        pts.append(add(center, point(math.cos(ang)*r, math.sin(ang)*r)))
    return pts

def makeRect(w, h, center):
    x, y = center
    return [point(x-w/2, y-h/2), point(x+w/2, y-h/2),
            point(x+w/2, y+h/2), point(x-w/2, y+h/2)]

def geometry():
    star = makeStar(point(0, 0), phase=math.pi/2)
    rect = makeRect(8, 3, point(0, 0))

    b1 = Boolean('intersection', star, rect)
    b2 = Boolean('union', star, rect)
    b3 = Boolean('difference', star, rect)

    return star, rect, [b1, b2, b3]

def testAndDraw(dd):
    star, rect, booleans = geometry()

    for i, b in enumerate(booleans):
        offset = point(20*i, 0)
        dd.layer = 'SUBJECT'
        dd.draw([[add(p, offset) for p in star]])
        dd.layer = 'CLIP'
        dd.draw([[add(p, offset) for p in rect]])
        dd.layer = 'RESULT'
        dd.linecolor = i+1
        dd.polystyle = 'both'
        dd.draw([[add(p, offset) for p in ring] for ring in b.geom])
        dd.polystyle = 'lines'
        print("{}: {} polygon(s), area {:.3f}".format(b.type, len(b.geom), b.area))

    dd.display()

if __name__ == "__main__":
    import sys
    filename = "clip_demo-out"
    print("clip_demo.py -- polyclip boolean operations demonstration")
    if len(sys.argv) > 1:
        filename = sys.argv[1]
    from polyclip.ezdxf_drawable import ezdxfDraw
    dd = ezdxfDraw()
    dd.filename = filename
    print("rendering...")
    testAndDraw(dd)
    print("wrote {}.dxf".format(filename))
