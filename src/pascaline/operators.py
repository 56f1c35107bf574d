'''
Operator registry: symbol resolution, arity, and evaluation of the pure
operators.

Stack operators (DUP, DROP, ...) are resolved here too but only the
machine knows how to run them, since they work on the stack itself rather
than on popped operands.
'''

from enum import Enum
import logging
import math
import operator

from . import symbols
from .token import Token, INT_MAX
from .util import (ArityMismatch, DivisionByZero, NotYetSupported,
                   TypeMismatch, UnknownOperatorSymbol, wrap_math_errors)


log = logging.getLogger(__name__)


class Operator(Enum):
    ADD = symbols.ADD
    SUB = symbols.SUB
    MUL = symbols.MUL
    DIV = symbols.DIV
    EUC_DIV = symbols.EUC_DIV
    MOD = symbols.MOD
    POW = symbols.POW
    NEG = symbols.NEG
    SIN = symbols.SIN
    COS = symbols.COS
    TAN = symbols.TAN
    ARCSIN = symbols.ARCSIN
    ARCCOS = symbols.ARCCOS
    ARCTAN = symbols.ARCTAN
    SQRT = symbols.SQRT
    EXP = symbols.EXP
    LN = symbols.LN
    EQ = symbols.EQ
    NEQ = symbols.NEQ
    LE = symbols.LE
    LT = symbols.LT
    GE = symbols.GE
    GT = symbols.GT
    AND = symbols.AND
    OR = symbols.OR
    NOT = symbols.NOT
    DUP = symbols.DUP
    DROP = symbols.DROP
    SWAP = symbols.SWAP
    LASTOP = symbols.LASTOP
    LASTARGS = symbols.LASTARGS
    UNDO = symbols.UNDO
    REDO = symbols.REDO
    CLEAR = symbols.CLEAR

    @classmethod
    def resolve(cls, symbol):
        '''
        Return the operator spelt exactly ``symbol``.
        '''
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorSymbol(symbol) from None

    @property
    def symbol(self):
        return self.value

    @property
    def arity(self):
        return ARITIES[self]

    def is_structural(self):
        return ARITIES[self] == 0

    def __str__(self):
        return self.value


assert {op.value for op in Operator} == set(symbols.OPERATORS)


ARITIES = {op: 2 for op in (Operator.ADD, Operator.SUB, Operator.MUL,
                            Operator.DIV, Operator.EUC_DIV, Operator.MOD,
                            Operator.POW,
                            Operator.EQ, Operator.NEQ, Operator.LE,
                            Operator.LT, Operator.GE, Operator.GT,
                            Operator.AND, Operator.OR)}
ARITIES.update({op: 1 for op in (Operator.NEG,
                                 Operator.SIN, Operator.COS, Operator.TAN,
                                 Operator.ARCSIN, Operator.ARCCOS,
                                 Operator.ARCTAN,
                                 Operator.SQRT, Operator.EXP, Operator.LN,
                                 Operator.NOT)})
ARITIES.update({op: 0 for op in (Operator.DUP, Operator.DROP, Operator.SWAP,
                                 Operator.LASTOP, Operator.LASTARGS,
                                 Operator.UNDO, Operator.REDO,
                                 Operator.CLEAR)})

assert ARITIES.keys() == set(Operator)


def resolve(symbol):
    return Operator.resolve(symbol)


def arity(op):
    return op.arity


def symbol(op):
    return op.symbol


def _number(value):
    '''
    Wrap a Python number in a normalised token.

    Integers too wide for a stack cell degrade to floats.
    '''
    if isinstance(value, int):
        return Token.new_integer(value)
    return Token.new_float(value)


def _truediv(left, right):
    if right == 0:
        raise DivisionByZero()
    if isinstance(left, int) and isinstance(right, int) \
       and left % right == 0:
        return left // right
    return left / right


def _floordiv(left, right):
    if right == 0:
        raise DivisionByZero()
    return left // right


def _mod(left, right):
    if right == 0:
        raise DivisionByZero()
    return left % right


def _pow(base, exponent):
    if base == 0 and exponent < 0:
        raise DivisionByZero()
    # math.pow raises OverflowError long before an exact power gets costly.
    approximate = math.pow(base, exponent)
    if isinstance(base, int) and isinstance(exponent, int) \
       and exponent >= 0 and abs(approximate) <= INT_MAX:
        return base ** exponent
    return approximate


ARITHMETIC = {
    Operator.ADD: operator.__add__,
    Operator.SUB: operator.__sub__,
    Operator.MUL: operator.__mul__,
    Operator.DIV: _truediv,
    Operator.EUC_DIV: _floordiv,
    Operator.MOD: _mod,
    Operator.POW: _pow,
}

FUNCTIONS = {
    Operator.NEG: operator.__neg__,
    Operator.SIN: math.sin,
    Operator.COS: math.cos,
    Operator.TAN: math.tan,
    Operator.ARCSIN: math.asin,
    Operator.ARCCOS: math.acos,
    Operator.ARCTAN: math.atan,
    Operator.SQRT: math.sqrt,
    Operator.EXP: math.exp,
    Operator.LN: math.log,
}

COMPARISONS = {
    Operator.EQ: operator.__eq__,
    Operator.NEQ: operator.__ne__,
    Operator.LE: operator.__le__,
    Operator.LT: operator.__lt__,
    Operator.GE: operator.__ge__,
    Operator.GT: operator.__gt__,
}

LOGIC = {
    Operator.AND: operator.__and__,
    Operator.OR: operator.__or__,
    Operator.NOT: operator.__not__,
}

# Operators that also take booleans, everything else wants numbers.
BOOLEAN_CAPABLE = {Operator.EQ, Operator.NEQ} | LOGIC.keys()


def _unpack_one(operands):
    # Arity was checked by evaluate(), anything else is a bug.
    assert len(operands) == 1, operands
    return operands[0].value


def _unpack_two(operands):
    assert len(operands) == 2, operands
    return operands[0].value, operands[1].value


def _typecheck(op, operands):
    if op in BOOLEAN_CAPABLE:
        accepted = [operand.is_numeric() or operand.is_boolean()
                    for operand in operands]
    else:
        accepted = [operand.is_numeric() for operand in operands]
    if not all(accepted):
        raise TypeMismatch('Bad operand type(s) for {}: {}'.format(
            op, ', '.join(operand.kind.value for operand in operands)))


@wrap_math_errors('Math domain error in {0}')
def _dispatch(op, operands):
    if op in ARITHMETIC:
        return _number(ARITHMETIC[op](*_unpack_two(operands)))
    elif op in FUNCTIONS:
        return _number(FUNCTIONS[op](_unpack_one(operands)))
    elif op in COMPARISONS:
        return Token.new_boolean(COMPARISONS[op](*_unpack_two(operands)))
    elif op in LOGIC:
        return Token.new_boolean(LOGIC[op](*(operand.as_boolean()
                                             for operand in operands)))
    raise NotYetSupported(op)


def evaluate(op, operands):
    '''
    Apply pure operator ``op`` to ``operands``, bottommost first.

    Returns the resulting token. Never touches a stack: it's up to the
    caller to pop the operands and restore them on failure.
    '''
    operands = tuple(operands)
    if len(operands) != op.arity:
        raise ArityMismatch(op, op.arity, len(operands))
    _typecheck(op, operands)
    result = _dispatch(op, operands)
    log.debug('%s %r -> %r', op, operands, result)
    return result
