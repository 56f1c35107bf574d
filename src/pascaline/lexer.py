from functools import reduce
import logging
import operator

import regex

from . import symbols
from .token import Token
from .util import DomainError, UnknownOperatorSymbol


log = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the Pascaline word grammar.

    Words are whatever whitespace separates; each is classified on its own,
    with no lookahead. ``3+4`` is thus a single, unrecognised word. For
    consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    WORD = r'\S+'
    # 42, -42, +42. No thousands separators, unlike Python's int().
    INTEGER = r'[+-]?\d+'
    # Anything a float can be spelt as, ASCII only
    FLOAT = r'''
             [+-]?
             (?:
                 (?:
                     # 1, 1., 1.5
                     \d+ (?: \. \d* )?
                     |
                     # .5
                     \. \d+
                 )
                 # Optional exponent: 1e3, 1.5E-2
                 (?: [eE] [+-]? \d+ )?
                 |
                 (?i: inf (?: inity )? | nan )
             )
             '''
    # Default regex flags for matching literals
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    _WORD = regex.compile(WORD)
    _INTEGER = regex.compile(INTEGER, FLAGS)
    _FLOAT = regex.compile(FLOAT, FLAGS)

    def tokenize(self, text):
        '''
        Lazily yield the whitespace separated words of text.
        '''
        for match in type(self)._WORD.finditer(text):
            yield match.group(0)

    def classify(self, word):
        '''
        Turn a single word into a token, IGNORED if nothing matches.
        '''
        if type(self)._INTEGER.fullmatch(word):
            # Too wide for a stack cell, comes out as a float
            try:
                return Token.new_integer(int(word))
            # Too wide even for a float: left to float() below, which
            # reads it as infinity
            except (DomainError, ValueError):
                pass
        if type(self)._FLOAT.fullmatch(word):
            return Token.new_float(word)
        if word in symbols.BOOLEANS:
            return Token.new_boolean(symbols.BOOLEANS[word])
        try:
            return Token.new_operator(word)
        except UnknownOperatorSymbol:
            log.debug('Ignoring %r', word)
            return Token.new_ignored()

    def parse(self, text):
        '''
        Return the legitimate tokens of text, in order.

        Never fails: unrecognised words are silently dropped.
        '''
        return [token
                for token
                in map(self.classify, self.tokenize(text))
                if token.is_legitimate()]


_LEXER = Lexer()


def parse(text):
    return _LEXER.parse(text)
