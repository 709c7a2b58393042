"""Concatenation, slicing, bit and range assignment, and word access.

Indices count from the least significant bit, and ranges are inclusive
[msb:lsb] pairs as in Verilog. Masks for arbitrary ranges are built in
the vector's scratch registers.
"""

import numpy

from ..core import utils
from ..core.storage import Storage, load, load_mask


class SliceOps(Storage):

    def _check_index(self, idx):
        utils.require(0 <= idx < self._width,
                      'bit index {} out of range for a {:d}-bit vector', idx, self._width)

    def _check_range(self, msb, lsb):
        utils.require(0 <= lsb <= msb,
                      'bad range [{}:{}], msb must be >= lsb >= 0', msb, lsb)
        utils.require(msb < self._width,
                      'range [{}:{}] out of range for a {:d}-bit vector', msb, lsb, self._width)

    def _bit(self, idx):
        """Load the single-bit mask 1 << idx into scratch register 2."""
        bit = load(self._scratch2, 1)
        bit <<= idx
        return bit

    def _word_window(self, n, dtype):
        bits = utils.word_bits(dtype)
        lsb = bits * n
        utils.require(0 <= lsb < self._width,
                      'word {} of {:d} bits is out of range for a {:d}-bit vector', n, bits, self._width)
        return min(self._width, lsb + bits), lsb

    # concatenation

    def concat(self, rhs):
        """Append rhs on the least significant end.

        >>> from hdlbits import BitVector
        >>> BitVector(4, 0xa).concat(BitVector(8, 0x5c))
        BitVector(width=12, value=0xa5c)
        """
        width = self._width + rhs._width
        utils.require(width <= utils.MAX_WIDTH,
                      'concatenation is {:d} bits wide, more than {:d}', width, utils.MAX_WIDTH)
        self._val <<= rhs._width
        self._val |= rhs._val
        self._width = width
        return self

    # slicing

    def slice(self, msb, lsb=None):
        """Reduce to bit msb, or to the inclusive range [msb:lsb] if lsb is given.

        >>> from hdlbits import BitVector
        >>> BitVector(8, 0b10110100).slice(5, 2)
        BitVector(width=4, value=0xd)
        >>> BitVector(8, 0b10110100).slice(2)
        BitVector(width=1, value=0x1)
        """
        if lsb is None:
            self._check_index(msb)
            self._val >>= msb
            self.resize_to_bool()
        else:
            self._check_range(msb, lsb)
            self._val >>= lsb
            self.resize(msb - lsb + 1)
        return self

    def eq(self, rhs, msb, lsb=None):
        """Compare bit msb (against rhs's bit 0) or the range [msb:lsb] (against rhs) without changing this vector."""
        if lsb is None:
            self._check_index(msb)
            return self._val.bit_test(msb) == rhs._val.bit_test(0)
        self._check_range(msb, lsb)
        window = load(self._scratch1, self._val)
        window >>= lsb
        window &= load_mask(self._scratch2, msb - lsb + 1)
        return window == rhs._val

    # single bits

    def get(self, idx):
        self._check_index(idx)
        return self._val.bit_test(idx)

    def flip(self, idx):
        self._check_index(idx)
        self._val ^= self._bit(idx)
        return self

    def set(self, idx, b):
        self._check_index(idx)
        bit = self._bit(idx)
        self._val |= bit
        if not b:
            self._val ^= bit
        return self

    # assignment

    def assign(self, *args):
        """Assign from another vector: assign(rhs), assign(idx, rhs), or assign(msb, lsb, rhs).

        The whole-vector form never changes this vector's width; a wider
        rhs is cut down to it.

        >>> from hdlbits import BitVector
        >>> BitVector(4, 0).assign(BitVector(8, 0xff))
        BitVector(width=4, value=0xf)
        >>> BitVector(8, 0xff).assign(5, 2, BitVector(4, 0b0110))
        BitVector(width=8, value=0xdb)
        """
        if len(args) == 1:
            return self._assign_all(*args)
        elif len(args) == 2:
            return self._assign_bit(*args)
        elif len(args) == 3:
            return self._assign_range(*args)
        else:
            raise TypeError('assign() takes 1 to 3 arguments ({:d} given)'.format(len(args)))

    def _assign_all(self, rhs):
        load(self._val, rhs._val)
        if rhs._width > self._width:
            self.trim()
        return self

    def _assign_bit(self, idx, rhs):
        return self.set(idx, rhs._val.bit_test(0))

    def _assign_range(self, msb, lsb, rhs):
        if msb == lsb:
            return self._assign_bit(msb, rhs)
        self._check_range(msb, lsb)

        value = load_mask(self._scratch1, msb - lsb + 1)
        hole = load(self._scratch2, value)
        hole <<= lsb
        # clear the window
        self._val |= hole
        self._val ^= hole

        value &= rhs._val
        value <<= lsb
        self._val |= value
        return self

    # word access

    def read_word(self, n, dtype=utils.DEFAULT_WORD):
        """Read the n-th word of dtype's size, counting from the least significant end.

        The last word is cut off at the declared width.

        >>> from hdlbits import BitVector
        >>> x = BitVector(20, 0xabcde)
        >>> [int(x.read_word(i, numpy.uint8)) for i in range(3)]
        [222, 188, 10]
        """
        msb, lsb = self._word_window(n, dtype)
        word = load(self._scratch1, self._val)
        word >>= lsb
        word &= load_mask(self._scratch2, msb - lsb)
        return numpy.dtype(dtype).type(int(word))

    def write_word(self, n, value, dtype=utils.DEFAULT_WORD):
        """Overwrite the n-th word of dtype's size; bits past the declared width are dropped."""
        msb, lsb = self._word_window(n, dtype)
        value = int(value)
        utils.require(value >= 0, 'word value must be unsigned, got {}', value)

        word = load_mask(self._scratch1, msb - lsb)
        hole = load(self._scratch2, word)
        hole <<= lsb
        self._val |= hole
        self._val ^= hole

        word &= value
        word <<= lsb
        self._val |= word
        return self

    def read_words(self, dtype=utils.DEFAULT_WORD):
        """All words of the vector as a numpy array, least significant word first.

        >>> from hdlbits import BitVector
        >>> BitVector(12, 0x5a3).read_words(numpy.uint8)
        array([163,   5], dtype=uint8)
        """
        bits = utils.word_bits(dtype)
        count = (self._width + bits - 1) // bits
        return numpy.array([self.read_word(i, dtype) for i in range(count)], dtype=dtype)

    def write_words(self, words):
        """Overwrite the low words of the vector from a numpy array (or sequence of uint64), least significant first."""
        words = numpy.asarray(words)
        if words.dtype.kind != 'u':
            utils.require(words.size == 0 or (words.dtype.kind == 'i' and (words >= 0).all()),
                          'words must be unsigned integers, got {}', words)
            words = words.astype(utils.DEFAULT_WORD)
        bits = utils.word_bits(words.dtype)
        count = (self._width + bits - 1) // bits
        utils.require(words.ndim == 1 and len(words) <= count,
                      'cannot write {} words of {:d} bits into a {:d}-bit vector',
                      words.shape, bits, self._width)
        for i, w in enumerate(words):
            self.write_word(i, w, words.dtype)
        return self
