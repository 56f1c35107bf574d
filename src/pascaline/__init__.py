'''
Pascaline, an RPN calculator engine.

Supports plain old arithmetic, Python's mathematical functions, comparisons,
boolean logic, and your usual stack operators. Not intended to be
Turing-complete: no variables, no branching.

Text is split into words, each classified into a token, and tokens are fed
one by one to a bounded stack machine. A failing operator leaves the stack
untouched.
'''

from .cli import CLI
from .lexer import Lexer, parse
from .machine import Machine
from .operators import Operator, evaluate
from .token import Token, TokenKind
from .util import (PascalineError, UnknownOperatorSymbol, ArityMismatch,
                   TypeMismatch, DivisionByZero, DomainError, StackOverflow,
                   EmptyStack, NoLastOperator, NotYetSupported)


__all__ = (
    'Machine', 'Lexer', 'CLI', 'parse',
    'Operator', 'evaluate', 'Token', 'TokenKind',
    'PascalineError', 'UnknownOperatorSymbol', 'ArityMismatch',
    'TypeMismatch', 'DivisionByZero', 'DomainError', 'StackOverflow',
    'EmptyStack', 'NoLastOperator', 'NotYetSupported',
)
