"""Standard operation codes for bit vectors, and a dispatcher that applies them.

An evaluator folding an expression into a vector can look operators up
here instead of branching on each one:

>>> from hdlbits import BitVector
>>> x = BitVector(8, 0x0f)
>>> fold(x, [(OP.sll, BitVector(3, 4)), (OP.bor, BitVector(8, 0x03)), (OP.rxor, None)])
BitVector(width=1, value=0x0)
"""

from enum import IntEnum, unique

@unique
class OP(IntEnum):
    # bitwise
    band = 0
    bor = 1
    bxor = 2
    bxnor = 3
    bnot = 4
    sll = 5
    sal = 6
    slr = 7
    sar = 8
    # arithmetic
    uplus = 9
    uminus = 10
    add = 11
    sub = 12
    mul = 13
    div = 14
    mod = 15
    pow = 16
    # logical
    land = 17
    lor = 18
    lnot = 19
    eq = 20
    ne = 21
    lt = 22
    lte = 23
    gt = 24
    gte = 25
    # reduction
    rand = 26
    rnand = 27
    ror = 28
    rnor = 29
    rxor = 30
    rxnor = 31
    # concatenation
    concat = 32


# operator code -> name of the in-place method that implements it

unary_ops = {
    OP.bnot: 'bitwise_not',
    OP.uplus: 'arithmetic_plus',
    OP.uminus: 'arithmetic_minus',
    OP.lnot: 'logical_not',
    OP.rand: 'reduce_and',
    OP.rnand: 'reduce_nand',
    OP.ror: 'reduce_or',
    OP.rnor: 'reduce_nor',
    OP.rxor: 'reduce_xor',
    OP.rxnor: 'reduce_xnor',
}

binary_ops = {
    OP.band: 'bitwise_and',
    OP.bor: 'bitwise_or',
    OP.bxor: 'bitwise_xor',
    OP.bxnor: 'bitwise_xnor',
    OP.sll: 'bitwise_sll',
    OP.sal: 'bitwise_sal',
    OP.slr: 'bitwise_slr',
    OP.sar: 'bitwise_sar',
    OP.add: 'arithmetic_plus',
    OP.sub: 'arithmetic_minus',
    OP.mul: 'arithmetic_multiply',
    OP.div: 'arithmetic_divide',
    OP.mod: 'arithmetic_mod',
    OP.pow: 'arithmetic_pow',
    OP.land: 'logical_and',
    OP.lor: 'logical_or',
    OP.eq: 'logical_eq',
    OP.ne: 'logical_ne',
    OP.lt: 'logical_lt',
    OP.lte: 'logical_lte',
    OP.gt: 'logical_gt',
    OP.gte: 'logical_gte',
    OP.concat: 'concat',
}


def apply(op, lhs, rhs=None):
    """Apply op to lhs in place (with rhs as the second operand, if binary) and return lhs."""
    if op in unary_ops:
        if rhs is not None:
            raise ValueError('{} is unary, but got a second operand {}'.format(op.name, repr(rhs)))
        return getattr(lhs, unary_ops[op])()
    elif op in binary_ops:
        if rhs is None:
            raise ValueError('{} is binary, but got no second operand'.format(op.name))
        return getattr(lhs, binary_ops[op])(rhs)
    else:
        raise ValueError('unknown operator {}'.format(repr(op)))


def fold(lhs, steps):
    """Apply a sequence of (op, rhs) pairs to lhs in order; each step sees the last one's result."""
    for op, rhs in steps:
        apply(op, lhs, rhs)
    return lhs
