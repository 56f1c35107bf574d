'''
Canonical symbols of the Pascaline language.

Everything the lexer may recognise is spelled out here exactly once.
'''

# Arithmetic
ADD = '+'
SUB = '-'
MUL = '*'
DIV = '/'
EUC_DIV = 'DIV'
MOD = 'MOD'
POW = 'POW'
NEG = 'NEG'

# Transcendental
SIN = 'SIN'
COS = 'COS'
TAN = 'TAN'
ARCSIN = 'ARCSIN'
ARCCOS = 'ARCCOS'
ARCTAN = 'ARCTAN'
SQRT = 'SQRT'
EXP = 'EXP'
LN = 'LN'

# Relational
EQ = '=='
NEQ = '!='
LE = '<='
LT = '<'
GE = '>='
GT = '>'

# Logical
AND = 'AND'
OR = 'OR'
NOT = 'NOT'

# Stack
DUP = 'DUP'
DROP = 'DROP'
SWAP = 'SWAP'
LASTOP = 'LASTOP'
LASTARGS = 'LASTARGS'
UNDO = 'UNDO'
REDO = 'REDO'
CLEAR = 'CLEAR'

# Literals, lexical only
LPAREN = '('
RPAREN = ')'
TRUE = 'TRUE'
FALSE = 'FALSE'

OPERATORS = (
    ADD, SUB, MUL, DIV, EUC_DIV, MOD, POW, NEG,
    SIN, COS, TAN, ARCSIN, ARCCOS, ARCTAN, SQRT, EXP, LN,
    EQ, NEQ, LE, LT, GE, GT,
    AND, OR, NOT,
    DUP, DROP, SWAP, LASTOP, LASTARGS, UNDO, REDO, CLEAR,
)

BOOLEANS = {
    TRUE: True,
    FALSE: False,
}

SYMBOLS = OPERATORS + (LPAREN, RPAREN, TRUE, FALSE)

assert len(set(SYMBOLS)) == len(SYMBOLS), 'duplicate symbol'
