#!/usr/bin/env python3
"""
Command line front end for polyclip.

Usage:
    python -m polyclip clip FILE.yaml [--operation OP] [--config CFG.yaml]
                                      [--output OUT.dxf] [--fill]
    python -m polyclip segment FILE.yaml

FILE.yaml for ``clip`` holds two point lists and an optional operation::

    subject: [[0, 0], [1, 0], [1, 1], [0, 1]]
    clip: [[0.5, 0.5], [1.5, 0.5], [1.5, 1.5], [0.5, 1.5]]
    operation: intersection

FILE.yaml for ``segment`` holds the segment and either an axis-aligned
box (Liang-Barsky) or a convex polygon (Cyrus-Beck)::

    segment: [[-1, 0.5], [2, 0.5]]
    box: [[0, 0], [1, 1]]

JSON input is accepted as well.  Results are printed as YAML.

Examples:
    # Print the intersection rings
    python -m polyclip clip squares.yaml

    # Write subject, clip and filled union to union.dxf
    python -m polyclip clip squares.yaml --operation union --output union.dxf --fill
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from polyclip.config import ClipConfig, load_config
from polyclip.geom import isgoodnum
from polyclip.lineclip import cyrus_beck, liang_barsky
from polyclip.weiler import OPERATIONS, clip

logger = logging.getLogger('polyclip')


def load_document(path):
    """Read a YAML (or JSON) mapping from ``path``."""
    with Path(path).open('r', encoding='utf-8') as fp:
        doc = yaml.safe_load(fp)
    if not isinstance(doc, dict):
        raise ValueError(f'{path}: expected a mapping at the top level')
    return doc


def point_pair(value, what):
    """Check that ``value`` is a list of two coordinate lists of equal length."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f'{what} must be a list of two points')
    for p in value:
        if not isinstance(p, (list, tuple)) or len(p) < 2 or \
           not all(isgoodnum(c) for c in p):
            raise ValueError(f'{what} points must be lists of at least two numbers: {p!r}')
    if len(value[0]) != len(value[1]):
        raise ValueError(f'{what} points differ in dimension')
    return value


def format_rings(rings):
    return yaml.safe_dump({'polygons': [[list(p) for p in ring] for ring in rings]},
                          sort_keys=False, default_flow_style=None)


def write_dxf(output, subject, clip_polygon, rings, fill=False):
    from polyclip.ezdxf_drawable import ezdxfDraw

    dd = ezdxfDraw()
    name = str(output)
    if name.lower().endswith('.dxf'):
        name = name[:-4]
    dd.filename = name
    dd.layer = 'SUBJECT'
    dd.draw([subject])
    dd.layer = 'CLIP'
    dd.draw([clip_polygon])
    dd.layer = 'RESULT'
    if fill:
        dd.polystyle = 'both'
    dd.draw(rings)
    dd.display()
    return f'{name}.dxf'


def cmd_clip(args):
    """Clip the subject polygon in a document by its clip polygon."""
    source_path = Path(args.file)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return 1

    try:
        doc = load_document(source_path)
        if args.config:
            config = load_config(args.config, use_env=True)
        else:
            config = ClipConfig.from_env()
        operation = args.operation or doc.get('operation', 'intersection')
        rings = clip(doc.get('subject'), doc.get('clip'), operation, config=config)
    except (ValueError, FileNotFoundError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info('%s of %s: %d polygon(s)', operation, source_path, len(rings))
    if args.output:
        written = write_dxf(args.output, doc['subject'], doc['clip'], rings, fill=args.fill)
        print(f"Wrote {written}")
    else:
        sys.stdout.write(format_rings(rings))
    return 0


def cmd_segment(args):
    """Clip the segment in a document by its box or convex polygon."""
    source_path = Path(args.file)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return 1

    try:
        doc = load_document(source_path)
        seg = point_pair(doc.get('segment'), 'segment')
        if 'box' in doc:
            box = point_pair(doc['box'], 'box')
            result = liang_barsky(seg[0], seg[1], box[0], box[1])
        elif 'polygon' in doc:
            result = cyrus_beck(seg[0], seg[1], doc['polygon'])
        else:
            raise ValueError('document needs either a box or a polygon')
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    out = None if result is None else [list(result[0]), list(result[1])]
    sys.stdout.write(yaml.safe_dump({'segment': out}, sort_keys=False,
                                    default_flow_style=None))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m polyclip',
        description='Weiler-Atherton polygon clipping and segment clipping',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log phase details to stderr')

    subparsers = parser.add_subparsers(dest='action', required=True)

    # clip command
    clip_parser = subparsers.add_parser('clip', help='Clip one polygon by another')
    clip_parser.add_argument('file', help='YAML/JSON document with subject and clip')
    clip_parser.add_argument('--operation', choices=OPERATIONS,
                             help='Boolean operation (default: from file, else intersection)')
    clip_parser.add_argument('-c', '--config', metavar='FILE',
                             help='YAML file with tolerance settings')
    clip_parser.add_argument('-o', '--output', metavar='FILE',
                             help='Write a DXF drawing instead of printing')
    clip_parser.add_argument('--fill', action='store_true',
                             help='Fill result polygons in the DXF output')

    # segment command
    seg_parser = subparsers.add_parser('segment', help='Clip a segment by a box or convex polygon')
    seg_parser.add_argument('file', help='YAML/JSON document with segment and box or polygon')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.action == 'clip':
        return cmd_clip(args)
    elif args.action == 'segment':
        return cmd_segment(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
