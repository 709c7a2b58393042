"""Arithmetic operators with fixed-width wraparound.

Binary operators compute on the raw magnitudes, take the wider of the two
widths, and trim, so overflow wraps silently like a hardware accumulator.
Unary minus is two's complement negation.

>>> from hdlbits import BitVector
>>> BitVector(8, 0xff).arithmetic_plus(BitVector(4, 1))
BitVector(width=8, value=0x0)
>>> BitVector(8, 1).arithmetic_minus()
BitVector(width=8, value=0xff)
>>> BitVector(4, 3).arithmetic_minus(BitVector(8, 5))
BitVector(width=8, value=0xfe)
"""

import gmpy2 as gmp

from ..core import utils
from ..core.storage import Storage, load, load_mask


class ArithmeticOps(Storage):

    def _widen_and_trim(self, rhs):
        self._width = max(self._width, rhs._width)
        self.trim()
        return self

    def arithmetic_plus(self, rhs=None):
        if rhs is None:
            # unary plus does nothing
            return self
        self._val += rhs._val
        return self._widen_and_trim(rhs)

    def arithmetic_minus(self, rhs=None):
        if rhs is None:
            self._val *= -1
            self.trim()
            return self
        self._val -= rhs._val
        return self._widen_and_trim(rhs)

    def arithmetic_multiply(self, rhs):
        self._val *= rhs._val
        return self._widen_and_trim(rhs)

    def arithmetic_divide(self, rhs):
        """Quotient, truncated toward zero."""
        utils.require(rhs._val != 0, 'division by zero')
        # floor and truncation agree on non-negative magnitudes
        self._val //= rhs._val
        return self._widen_and_trim(rhs)

    def arithmetic_mod(self, rhs):
        """Remainder, with the sign convention of mpz_mod (never negative).

        >>> from hdlbits import BitVector
        >>> BitVector(8, 200).arithmetic_mod(BitVector(8, 7))
        BitVector(width=8, value=0x4)
        """
        utils.require(rhs._val != 0, 'modulo by zero')
        self._val %= rhs._val
        return self._widen_and_trim(rhs)

    def arithmetic_pow(self, rhs):
        """Raise to the power of rhs, modulo 2**width. The width does not change.

        >>> from hdlbits import BitVector
        >>> BitVector(8, 3).arithmetic_pow(BitVector(8, 5))
        BitVector(width=8, value=0xf3)
        >>> BitVector(4, 0).arithmetic_pow(BitVector(4, 0))
        BitVector(width=4, value=0x1)
        """
        e = rhs._val
        utils.require(utils.fits_native(e),
                      'exponent {} does not fit in a native integer', e)
        modulus = load_mask(self._scratch1, self._width)
        modulus += 1
        load(self._val, gmp.powmod(self._val, int(e), modulus))
        return self
