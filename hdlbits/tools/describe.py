"""Describe a bit vector: its digits in several bases, its reductions,
and its binary encoding.

    python -m hdlbits.tools.describe -b 16 -o 2 10 -x ff
    python -m hdlbits.tools.describe --decode 08000100ff
"""

import sys

from ..core import utils
from ..core.ops import OP, apply
from ..vector.bitvector import BitVector


_reductions = [
    ('&', OP.rand),
    ('~&', OP.rnand),
    ('|', OP.ror),
    ('~|', OP.rnor),
    ('^', OP.rxor),
    ('~^', OP.rxnor),
]


def describe_vector(x, bases=(2, 16)):
    """Collect the facts about x that explain_vector() prints.

    >>> d = describe_vector(BitVector(4, 0b1011), bases=(2, 10))
    >>> d['width'], d['digits'], d['reductions']['^']
    (4, [(2, '1011'), (10, '11')], 1)
    """
    descr = {
        'width': x.width,
        'digits': [(base, x.write(base)) for base in bases],
        'reductions': {},
        'encoding': x.to_bytes(),
    }
    for name, op in _reductions:
        descr['reductions'][name] = int(apply(op, x.copy()))
    return descr


def explain_vector(descr, show_encoding=False):
    lines = ['width: {:d}'.format(descr['width'])]
    for base, digits in descr['digits']:
        lines.append('  base {:<2d} {}'.format(base, digits))
    lines.append('reductions: ' + '  '.join('{}{:d}'.format(name, b)
                                            for name, b in descr['reductions'].items()))
    if show_encoding:
        lines.append('encoding: ' + descr['encoding'].hex())
    return '\n'.join(lines)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(prog='hdlbits.tools.describe')
    parser.add_argument('x', nargs='?', default=None,
                        help='digits to describe')
    parser.add_argument('-b', '--base', type=int, default=utils.DEFAULT_BASE,
                        help='base of the input digits')
    parser.add_argument('-w', '--width', type=int, default=None,
                        help='resize to this width after reading')
    parser.add_argument('-o', '--output', type=int, nargs='+', default=[2, 16],
                        help='bases to print the value in')
    parser.add_argument('-x', '--encoding', action='store_true',
                        help='show the binary encoding as hex')
    parser.add_argument('--decode', default=None,
                        help='describe the vector in this hex encoded binary encoding instead')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='print diagnostics to stderr')
    args = parser.parse_args(argv)

    if args.decode is not None:
        try:
            data = bytes.fromhex(args.decode)
        except ValueError:
            print('not a hex string: {}'.format(args.decode), file=sys.stderr)
            return 1
        try:
            x = BitVector.from_bytes(data)
        except utils.SerializationError as e:
            print('could not decode {}: {}'.format(args.decode, e), file=sys.stderr)
            return 1
        if args.verbose > 0:
            print('decoded {:d} bytes'.format(len(data)), file=sys.stderr)
    elif args.x is not None:
        x = BitVector().read(args.x, args.base)
        if args.verbose > 0:
            print('read {} in base {:d} as a {:d}-bit vector'.format(args.x, args.base, x.width),
                  file=sys.stderr)
    else:
        print('no input; nothing to do', file=sys.stderr)
        return 1

    if args.width is not None:
        x.resize(args.width)

    if args.verbose > 1:
        print(repr(x), file=sys.stderr)

    print(explain_vector(describe_vector(x, bases=args.output), show_encoding=args.encoding))
    return 0


if __name__ == '__main__':
    sys.exit(main())
