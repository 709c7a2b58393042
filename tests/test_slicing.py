import hypothesis
import hypothesis.strategies as st
import numpy
import pytest

from hdlbits import BitVector, PreconditionError, MAX_WIDTH

from strategies import vectors


def bv(w, v):
    return BitVector(w, v)


def test_concat_associativity():
    a, b, c = bv(3, 0b101), bv(5, 0b00011), bv(7, 0b1111111)
    x = a.copy().concat(b).concat(c)
    assert x.width == 3 + 5 + 7
    assert x.magnitude == (0b101 << 12) | (0b00011 << 7) | 0b1111111
    assert x.slice(14, 12) == a


def test_concat_too_wide():
    with pytest.raises(PreconditionError):
        bv(MAX_WIDTH, 0).concat(bv(1, 0))


def test_slice_bit():
    assert bv(8, 0b00100000).slice(5) == bv(1, 1)
    assert bv(8, 0b00100000).slice(4) == bv(1, 0)
    with pytest.raises(PreconditionError):
        bv(8, 0).slice(8)


def test_slice_range():
    assert bv(16, 0xabcd).slice(11, 4) == bv(8, 0xbc)
    assert bv(16, 0xabcd).slice(15, 0) == bv(16, 0xabcd)
    with pytest.raises(PreconditionError):
        bv(16, 0).slice(16, 0)
    with pytest.raises(PreconditionError):
        bv(16, 0).slice(3, 4)


def test_eq_does_not_mutate():
    x = bv(16, 0xabcd)
    assert x.eq(bv(8, 0xbc), 11, 4)
    assert not x.eq(bv(8, 0xbd), 11, 4)
    assert x.eq(bv(1, 1), 0)
    assert x.eq(bv(4, 0b0110), 1)
    assert not x.eq(bv(1, 1), 1)
    assert x == bv(16, 0xabcd)


def test_flip_and_set():
    x = bv(8, 0)
    x.flip(3)
    assert x.magnitude == 0b1000
    x.flip(3)
    assert x.magnitude == 0
    x.set(7, True).set(0, 1)
    assert x.magnitude == 0x81
    x.set(7, False)
    assert x.magnitude == 0x01
    assert x.get(0) and not x.get(1)
    with pytest.raises(PreconditionError):
        x.flip(8)
    with pytest.raises(PreconditionError):
        x.set(8, True)


def test_assign_wider_truncates():
    x = bv(4, 0)
    x.assign(bv(8, 0xa7))
    assert (x.width, x.magnitude) == (4, 0x7)


def test_assign_narrower_keeps_width():
    x = bv(16, 0xffff)
    x.assign(bv(4, 0x5))
    assert (x.width, x.magnitude) == (16, 0x5)


def test_assign_bit():
    x = bv(8, 0)
    x.assign(6, bv(4, 0b0011))
    assert x.magnitude == 0b01000000
    x.assign(6, bv(4, 0b0010))
    assert x.magnitude == 0


def test_assign_range():
    x = bv(16, 0xffff)
    x.assign(11, 4, bv(16, 0x1234))
    assert x == bv(16, 0xf34f)
    x.assign(3, 3, bv(1, 0))
    assert x == bv(16, 0xf347)
    with pytest.raises(PreconditionError):
        x.assign(16, 4, bv(1, 0))


def test_assign_arity():
    with pytest.raises(TypeError):
        bv(8, 0).assign()


@hypothesis.given(vectors(max_width=200), st.data())
def test_assign_range_leaves_outside_bits(wv, data):
    w, v = wv
    lsb = data.draw(st.integers(0, w - 1))
    msb = data.draw(st.integers(lsb, w - 1))
    r = data.draw(st.integers(0, (1 << 80) - 1))
    x = bv(w, v).assign(msb, lsb, bv(80, r))
    n = msb - lsb + 1
    window = ((1 << n) - 1) << lsb
    assert x.magnitude & ~window == v & ~window
    assert (x.magnitude & window) >> lsb == r & ((1 << n) - 1)
    assert x.width == w


@pytest.mark.parametrize('dtype', [numpy.uint8, numpy.uint16, numpy.uint32, numpy.uint64])
@hypothesis.given(wv=vectors(max_width=300))
def test_words_read_back_value(dtype, wv):
    w, v = wv
    x = bv(w, v)
    words = x.read_words(dtype)
    bits = numpy.dtype(dtype).itemsize * 8
    assert words.dtype == numpy.dtype(dtype)
    assert sum(int(word) << (bits * i) for i, word in enumerate(words)) == v


@hypothesis.given(vectors(max_width=300))
def test_bits_read_back_value(wv):
    w, v = wv
    x = bv(w, v)
    assert sum(int(x.get(i)) << i for i in range(w)) == v


def test_read_word_is_clamped():
    x = bv(12, 0xfff)
    assert x.read_word(1, numpy.uint8) == numpy.uint8(0xf)
    with pytest.raises(PreconditionError):
        x.read_word(2, numpy.uint8)


def test_write_word():
    x = bv(24, 0x123456)
    x.write_word(1, numpy.uint8(0xab), numpy.uint8)
    assert x.magnitude == 0x12ab56
    # the top word is cut off at the declared width
    x = bv(12, 0)
    x.write_word(1, 0xff, numpy.uint8)
    assert x == bv(12, 0xf00)


def test_write_words_round_trip():
    x = bv(100, 0)
    words = numpy.array([0x0123456789abcdef, 0xfedcba987], dtype=numpy.uint64)
    x.write_words(words)
    assert x.magnitude == (0xfedcba987 << 64) | 0x0123456789abcdef
    assert (x.read_words() == words).all()


def test_write_too_many_words():
    with pytest.raises(PreconditionError):
        bv(8, 0).write_words(numpy.array([1, 2], dtype=numpy.uint8))


def test_word_type_must_be_unsigned():
    with pytest.raises(PreconditionError):
        bv(8, 0).read_word(0, numpy.int8)


def test_write_words_rejects_negative_entries():
    x = bv(16, 0x1234)
    with pytest.raises(PreconditionError):
        x.write_words(numpy.array([1, -1], dtype=numpy.int64))
    with pytest.raises(PreconditionError):
        x.write_words([0.5])
    assert x == bv(16, 0x1234)
    # non-negative signed entries are taken as uint64 words
    x.write_words(numpy.array([7], dtype=numpy.int32))
    assert x == bv(16, 7)
