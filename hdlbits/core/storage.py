"""Backing store and width management for two-state bit vectors.

The magnitude is a mutable GMP integer (gmpy2.xmpz) that is only ever
updated with in-place operations, so a vector keeps the same backing
integer for its whole life. Two more xmpz registers serve as scratch
space for building masks and extracting sub-ranges; reusing them means
the common operations do not allocate a new integer per call.
"""

import gmpy2 as gmp

from . import utils


def load(reg, x):
    """Overwrite the xmpz register reg with x, in place."""
    reg &= 0
    reg += x
    return reg

def load_mask(reg, n):
    """Overwrite the xmpz register reg with a mask of n 1s, in place."""
    reg &= 0
    reg += 1
    reg <<= n
    reg -= 1
    return reg


class Storage(object):
    """A magnitude plus a declared width.

    Only the low `width` bits of the magnitude are significant, and the
    magnitude is kept masked to them whenever a method returns.

    >>> Storage(4, 0x1f).magnitude
    mpz(15)
    >>> Storage().width
    1
    """

    def __init__(self, width=1, value=0):
        utils.require(0 < width <= utils.MAX_WIDTH,
                      'width must be between 1 and {:d}, got {}', utils.MAX_WIDTH, width)
        self._val = load(gmp.xmpz(0), value)
        self._width = width
        # scratch registers, never observable between calls
        self._scratch1 = gmp.xmpz(0)
        self._scratch2 = gmp.xmpz(0)
        self.trim()

    @property
    def width(self):
        """Declared width in bits. Always between 1 and MAX_WIDTH."""
        return self._width

    @property
    def magnitude(self):
        """Immutable copy of the unsigned magnitude, as a gmpy2.mpz."""
        return gmp.mpz(self._val)

    def size(self):
        return self._width

    # casts

    def to_bool(self):
        """Is any bit set?"""
        return self._val != 0

    def to_int(self):
        """The magnitude as a native unsigned integer.

        >>> Storage(64, -1).to_int() == 2**64 - 1
        True
        >>> Storage(65, 1).to_int() # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        hdlbits.core.utils.PreconditionError: cannot convert a 65-bit vector to a native integer
        """
        utils.require(self._width <= utils.NATIVE_BITS,
                      'cannot convert a {:d}-bit vector to a native integer', self._width)
        return int(self._val)

    # size

    def resize(self, n):
        """Set the declared width to n, dropping any bits at or above n.

        Widening never touches the magnitude: the new high bits read as 0
        because the magnitude never held them.

        >>> x = Storage(8, 0xa5)
        >>> x.resize(4)
        >>> x.width, x.magnitude
        (4, mpz(5))
        >>> x.resize(16)
        >>> x.width, x.magnitude
        (16, mpz(5))
        """
        utils.require(0 < n <= utils.MAX_WIDTH,
                      'width must be between 1 and {:d}, got {}', utils.MAX_WIDTH, n)
        if n < self._width:
            self.trim_to(n)
        self._width = n

    def resize_to_bool(self):
        """Collapse to a 1-bit vector holding the current bit 0."""
        self._val &= 1
        self._width = 1

    def trim(self):
        self.trim_to(self._width)

    def trim_to(self, n):
        """Clear every bit at or above position n."""
        utils.require(n > 0, 'cannot trim to {} bits', n)
        self._val &= load_mask(self._scratch1, n)

    # copying and ownership

    def copy(self):
        """Deep copy: a new vector with its own backing store."""
        return type(self)(self._width, self._val)

    def copy_from(self, rhs):
        """Copy assignment: take rhs's width and magnitude."""
        load(self._val, rhs._val)
        self._width = rhs._width
        return self

    def swap(self, rhs):
        """Exchange backing stores with rhs. No bits are copied."""
        self._val, rhs._val = rhs._val, self._val
        self._width, rhs._width = rhs._width, self._width

    def move_from(self, rhs):
        """Take over rhs's state, leaving rhs as the default 1-bit zero."""
        self.swap(rhs)
        rhs._val &= 0
        rhs._width = 1
        return self
