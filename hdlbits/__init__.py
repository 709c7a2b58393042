from .core import utils, storage, ops
from .vector import bitwise, arith, slicing, serial, bitvector

BitVector = bitvector.BitVector
OP = ops.OP

BitsError = utils.BitsError
PreconditionError = utils.PreconditionError
SerializationError = utils.SerializationError

MAX_WIDTH = utils.MAX_WIDTH
