"""Binary and textual encodings of bit vectors.

The binary layout of one vector is:

    width   uint16, little endian
    length  uint16, little endian
    bytes   `length` bytes of magnitude, most significant byte first

Zero has length 0, so the smallest encoding is 4 bytes.

>>> from hdlbits import BitVector
>>> BitVector(12, 0x5a3).to_bytes()
b'\\x0c\\x00\\x02\\x00\\x05\\xa3'
>>> BitVector.from_bytes(b'\\x0c\\x00\\x02\\x00\\x05\\xa3')
BitVector(width=12, value=0x5a3)

The textual format is just the magnitude in some base. Reading text sets
the width to the bit length of what was read, and text that does not
parse reads as 0:

>>> x = BitVector(32, 7)
>>> x.read('ff', 16)
BitVector(width=8, value=0xff)
>>> x.read('not a number')
BitVector(width=1, value=0x0)
"""

import io
import struct

import gmpy2 as gmp

from ..core import utils
from ..core.storage import Storage, load


_header = struct.Struct('<HH')


def _read_token(fp):
    """Read one whitespace-delimited token from a text stream."""
    c = fp.read(1)
    while c and c.isspace():
        c = fp.read(1)
    chars = []
    while c and not c.isspace():
        chars.append(c)
        c = fp.read(1)
    return ''.join(chars)


def _digit_value(c, base):
    """Value of the digit c in base, or None if c is not a digit of that base.
    Letters are case-insensitive up to base 36; above that, upper case is
    10-35 and lower case is 36-61, as GMP reads them.
    """
    if '0' <= c <= '9':
        d = ord(c) - ord('0')
    elif 'A' <= c <= 'Z':
        d = ord(c) - ord('A') + 10
    elif 'a' <= c <= 'z':
        d = ord(c) - ord('a') + (36 if base > 36 else 10)
    else:
        return None
    if d < base:
        return d
    else:
        return None


def _digit_prefix(token, base):
    """The longest prefix of token made only of digits in base."""
    for i, c in enumerate(token):
        if _digit_value(c, base) is None:
            return token[:i]
    return token


class SerialOps(Storage):

    # binary

    def serialize(self, fp):
        """Write the binary encoding to a binary file object, returning the number of bytes written."""
        length = (self._val.bit_length() + 7) // 8
        data = int(self._val).to_bytes(length, 'big')
        fp.write(_header.pack(self._width, length))
        fp.write(data)
        return _header.size + length

    def deserialize(self, fp):
        """Replace this vector with one read from a binary file object, returning the number of bytes read."""
        header = fp.read(_header.size)
        if len(header) < _header.size:
            raise utils.SerializationError('expected a {:d} byte header, got {:d} bytes'
                                           .format(_header.size, len(header)))
        width, length = _header.unpack(header)
        if width == 0:
            raise utils.SerializationError('encoded width is 0')

        data = fp.read(length)
        if len(data) < length:
            raise utils.SerializationError('expected {:d} bytes of magnitude, got {:d} bytes'
                                           .format(length, len(data)))

        load(self._val, int.from_bytes(data, 'big'))
        self._width = width
        self.trim()
        return _header.size + length

    def to_bytes(self):
        fp = io.BytesIO()
        self.serialize(fp)
        return fp.getvalue()

    @classmethod
    def from_bytes(cls, data):
        x = cls()
        x.deserialize(io.BytesIO(data))
        return x

    # text

    def write(self, base=utils.DEFAULT_BASE):
        """The magnitude as a string of digits in base, with no prefix.

        >>> from hdlbits import BitVector
        >>> BitVector(16, 0xbeef).write(16)
        'beef'
        >>> BitVector(4, 5).write(2)
        '101'
        """
        utils.require(utils.MIN_BASE <= base <= utils.MAX_BASE,
                      'base must be between {:d} and {:d}, got {}', utils.MIN_BASE, utils.MAX_BASE, base)
        s = self._val.digits(base)
        # gmpy2 tags bases 2, 8 and 16 with a 0b/0o/0x prefix
        if base in (2, 8, 16) and s[:2].lower() in ('0b', '0o', '0x'):
            s = s[2:]
        return s

    def read(self, text, base=utils.DEFAULT_BASE):
        """Parse the longest run of digits in base at the start of text's first token.

        The width becomes the bit length of the parsed value (at least 1).
        Anything after the digits is ignored, so '7g' reads as 7 in base 16
        and '0xff' reads as 0. Text that starts with no digit at all, a
        negative number, or a value wider than MAX_WIDTH bits reads as 0.

        >>> from hdlbits import BitVector
        >>> BitVector().read('12', 2)
        BitVector(width=1, value=0x1)
        >>> BitVector().read('1_000', 10)
        BitVector(width=1, value=0x1)
        """
        utils.require(utils.MIN_BASE <= base <= utils.MAX_BASE,
                      'base must be between {:d} and {:d}, got {}', utils.MIN_BASE, utils.MAX_BASE, base)
        tokens = text.split(None, 1)
        digits = _digit_prefix(tokens[0], base) if tokens else ''
        # leading zeros do not change the value, and gmpy2 could take them for a prefix
        digits = digits.lstrip('0')
        if digits:
            value = gmp.mpz(digits, base)
        else:
            value = gmp.mpz(0)
        if value.bit_length() > utils.MAX_WIDTH:
            value = gmp.mpz(0)

        load(self._val, value)
        self._width = max(1, value.bit_length())
        return self

    def read_stream(self, fp, base=utils.DEFAULT_BASE):
        """As read(), but take the next token from a text file object."""
        return self.read(_read_token(fp), base)

    def write_stream(self, fp, base=utils.DEFAULT_BASE):
        """As write(), but to a text file object. Returns the number of characters written."""
        s = self.write(base)
        fp.write(s)
        return len(s)
