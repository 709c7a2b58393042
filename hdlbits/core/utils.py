"""General utilities, such as exception classes and size limits."""

import numpy


# hdlbits-specific exceptions

class BitsError(Exception):
    """Base hdlbits error."""

class PreconditionError(BitsError):
    """A caller broke an operation's precondition, such as indexing past the width.
    These are not recoverable; the simulator is expected to let them propagate.
    """

class SerializationError(BitsError):
    """Binary input ended before a complete vector could be read."""


def require(cond, msg, *args):
    """Raise a PreconditionError built from msg.format(*args) unless cond holds."""
    if not cond:
        raise PreconditionError(msg.format(*args))


# limits and defaults

# widths are stored in a 16-bit field when serialized
MAX_WIDTH = 0xffff

# largest operand accepted as a shift amount, exponent, or to_int() result
NATIVE_BITS = 64

DEFAULT_BASE = 10
MIN_BASE = 2
MAX_BASE = 62

DEFAULT_WORD = numpy.uint64


# Useful things

def fits_native(x: int) -> bool:
    """Does the non-negative integer x fit in an unsigned native word?"""
    return 0 <= x and x.bit_length() <= NATIVE_BITS

def word_bits(dtype) -> int:
    """Number of bits in one word of an unsigned numpy integer dtype.

    >>> word_bits(numpy.uint8)
    8
    >>> word_bits(numpy.dtype('uint32'))
    32
    """
    dt = numpy.dtype(dtype)
    require(dt.kind == 'u', 'word type must be an unsigned integer, got {}', dt)
    return dt.itemsize * 8
