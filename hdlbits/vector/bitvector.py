"""Two-state bit vectors of any declared width, with Verilog register semantics."""

from . import bitwise, arith, slicing, serial


class BitVector(bitwise.BitwiseOps, arith.ArithmeticOps, slicing.SliceOps, serial.SerialOps):
    """A fixed-width two-state bit vector.

    Operators mutate the vector in place and return it, so they can be
    chained:

    >>> x = BitVector(8, 0x0f)
    >>> x.bitwise_sll(BitVector(8, 4)).bitwise_or(BitVector(4, 0x3))
    BitVector(width=8, value=0xf3)
    >>> str(x)
    "8'b11110011"

    The built-in comparisons are not the logical ones: == requires the same
    width as well as the same magnitude, while logical_eq ignores width.

    >>> BitVector(8, 1) == BitVector(4, 1)
    False
    >>> BitVector(8, 1).logical_eq(BitVector(4, 1)).to_bool()
    True
    """

    def __init__(self, width=1, value=0):
        super().__init__(width=width, value=value)

    def __repr__(self):
        return '{}(width={:d}, value={})'.format(type(self).__name__, self._width, hex(int(self._val)))

    def __str__(self):
        return "{:d}'b{}".format(self._width, self.write(2).zfill(self._width))

    # built-in comparison

    def __eq__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._width == other._width and self._val == other._val

    def __ne__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return not (self == other)

    def __lt__(self, other):
        """Narrower, or smaller in magnitude.

        This is not a total order: a narrow vector with a large magnitude
        and a wide vector with a small one are each less than the other.
        """
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._width < other._width or self._val < other._val

    # mutable, so not hashable
    __hash__ = None

    # python protocols

    def __len__(self):
        return self._width

    def __bool__(self):
        return self.to_bool()

    def __int__(self):
        return int(self._val)

    def __index__(self):
        return int(self._val)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()
