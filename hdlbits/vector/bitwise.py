"""Bitwise, shift, logical and reduction operators.

Every operator works in place and returns the vector, so calls chain the
way a hardware evaluator folds primitive operations:

>>> from hdlbits import BitVector
>>> BitVector(8, 0x80).bitwise_sar(BitVector(8, 1))
BitVector(width=8, value=0xc0)
>>> BitVector(8, 0x80).bitwise_slr(BitVector(8, 1))
BitVector(width=8, value=0x40)
"""

import gmpy2 as gmp

from ..core import utils
from ..core.storage import Storage, load_mask


class BitwiseOps(Storage):

    def _shift_amount(self, rhs):
        amt = rhs._val
        utils.require(utils.fits_native(amt),
                      'shift amount {} does not fit in a native integer', amt)
        return int(amt)

    def _set_bool(self, b):
        self._val &= 0
        if b:
            self._val += 1
        self.resize_to_bool()
        return self

    # bitwise operators
    # Both operands are already masked to their own widths, so the narrower
    # one reads as zero-extended to the result width.

    def bitwise_and(self, rhs):
        self._val &= rhs._val
        self.resize(max(self._width, rhs._width))
        return self

    def bitwise_or(self, rhs):
        self._val |= rhs._val
        self.resize(max(self._width, rhs._width))
        return self

    def bitwise_xor(self, rhs):
        self._val ^= rhs._val
        self.resize(max(self._width, rhs._width))
        return self

    def bitwise_xnor(self, rhs):
        self.bitwise_xor(rhs)
        self.bitwise_not()
        return self

    def bitwise_not(self):
        # same as complementing and trimming, since the magnitude is already masked
        self._val ^= load_mask(self._scratch1, self._width)
        return self

    # shifts

    def bitwise_sll(self, rhs):
        """Shift left, dropping bits shifted past the top of the declared width."""
        amt = self._shift_amount(rhs)
        if amt >= self._width:
            self._val &= 0
        else:
            self._val <<= amt
            self.trim()
        return self

    def bitwise_sal(self, rhs):
        return self.bitwise_sll(rhs)

    def bitwise_slr(self, rhs):
        """Logical shift right: vacated high bits are filled with 0."""
        amt = self._shift_amount(rhs)
        self._val >>= min(amt, self._width)
        return self

    def bitwise_sar(self, rhs):
        """Arithmetic shift right: vacated high bits are copies of the old sign bit.

        The shift on the magnitude never sign-extends (it is non-negative),
        so when the sign bit was set the vacated bits are ORed back in as
        (2**amt - 1) << (width - amt).

        >>> from hdlbits import BitVector
        >>> BitVector(4, 0b1010).bitwise_sar(BitVector(4, 2))
        BitVector(width=4, value=0xe)
        >>> BitVector(4, 0b1010).bitwise_sar(BitVector(8, 200))
        BitVector(width=4, value=0xf)
        """
        amt = min(self._shift_amount(rhs), self._width)
        negative = self._val.bit_test(self._width - 1)
        self._val >>= amt
        if negative:
            fill = load_mask(self._scratch1, amt)
            fill <<= self._width - amt
            self._val |= fill
        return self

    # logical operators

    def logical_and(self, rhs):
        return self._set_bool(self.to_bool() and rhs.to_bool())

    def logical_or(self, rhs):
        return self._set_bool(self.to_bool() or rhs.to_bool())

    def logical_not(self):
        return self._set_bool(not self.to_bool())

    # Logical comparisons only look at the magnitudes; width does not matter.

    def logical_eq(self, rhs):
        return self._set_bool(self._val == rhs._val)

    def logical_ne(self, rhs):
        return self._set_bool(self._val != rhs._val)

    def logical_lt(self, rhs):
        return self._set_bool(self._val < rhs._val)

    def logical_lte(self, rhs):
        return self._set_bool(self._val <= rhs._val)

    def logical_gt(self, rhs):
        return self._set_bool(self._val > rhs._val)

    def logical_gte(self, rhs):
        return self._set_bool(self._val >= rhs._val)

    # reduction operators
    # These rely on the magnitude being masked, so the popcount only sees
    # bits inside the declared width.

    def reduce_and(self):
        """All bits set?

        >>> from hdlbits import BitVector
        >>> BitVector(3, 0b111).reduce_and().to_bool()
        True
        >>> BitVector(4, 0b0111).reduce_and().to_bool()
        False
        """
        return self._set_bool(gmp.popcount(self._val) == self._width)

    def reduce_nand(self):
        self.reduce_and()
        self.logical_not()
        return self

    def reduce_or(self):
        return self._set_bool(self._val != 0)

    def reduce_nor(self):
        return self._set_bool(self._val == 0)

    def reduce_xor(self):
        """Parity: an odd number of set bits."""
        return self._set_bool(gmp.popcount(self._val) & 1 == 1)

    def reduce_xnor(self):
        return self._set_bool(gmp.popcount(self._val) & 1 == 0)
