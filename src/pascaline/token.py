from collections import namedtuple
from enum import Enum

from . import symbols
from .util import DomainError, TypeMismatch


# Integers are 64 bit signed, like the stack cells of the calculator
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


class TokenKind(Enum):
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    OPERATOR = 'operator'
    IGNORED = 'ignored'


class Token(namedtuple('Token', ('kind', 'value'))):
    '''
    Immutable value flowing from the lexer to the machine.

    Compared by kind and value, never by identity. Use the ``new_*``
    constructors rather than instantiating directly: they enforce
    normalisation.
    '''
    __slots__ = ()

    @classmethod
    def new_integer(cls, i):
        '''
        Integers too wide for a stack cell degrade to floats.

        Raise TypeMismatch for anything with a fractional part.
        '''
        if isinstance(i, float) and not i.is_integer():
            raise TypeMismatch('{!r} is not an integer'.format(i))
        i = int(i)
        if INT_MIN <= i <= INT_MAX:
            return cls(TokenKind.INTEGER, i)
        try:
            return cls(TokenKind.FLOAT, float(i))
        except OverflowError:
            raise DomainError('{} is out of range'.format(i)) from None

    @classmethod
    def new_float(cls, f):
        '''
        Floats without a fractional part become integers, when they fit.
        '''
        f = float(f)
        if f.is_integer() and INT_MIN <= f <= INT_MAX:
            return cls.new_integer(f)
        return cls(TokenKind.FLOAT, f)

    @classmethod
    def new_boolean(cls, b):
        return cls(TokenKind.BOOLEAN, bool(b))

    @classmethod
    def new_operator(cls, symbol):
        '''
        Raise UnknownOperatorSymbol if ``symbol`` names no operator.
        '''
        from .operators import Operator
        return cls(TokenKind.OPERATOR, Operator.resolve(symbol))

    @classmethod
    def new_ignored(cls):
        return cls(TokenKind.IGNORED, None)

    def is_legitimate(self):
        return self.kind is not TokenKind.IGNORED

    def is_numeric(self):
        return self.kind in (TokenKind.INTEGER, TokenKind.FLOAT)

    def is_boolean(self):
        return self.kind is TokenKind.BOOLEAN

    def is_operator(self):
        return self.kind is TokenKind.OPERATOR

    def is_zero(self):
        if self.is_numeric() or self.is_boolean():
            return self.value == 0
        return False

    def as_float(self):
        if self.is_numeric() or self.is_boolean():
            return float(self.value)
        raise TypeMismatch('{} is not a number'.format(self.kind.value))

    def as_boolean(self):
        return self.as_float() != 0

    def __str__(self):
        if self.kind is TokenKind.FLOAT:
            return '{:.6f}'.format(self.value)
        elif self.kind is TokenKind.BOOLEAN:
            return symbols.TRUE if self.value else symbols.FALSE
        elif self.kind is TokenKind.IGNORED:
            return ''
        return str(self.value)

    def __repr__(self):
        return 'Token.{}({!r})'.format(self.kind.name, self.value)
