'''
Pocket calculator core.

Takes key presses one at a time, the way a desk calculator does: digits,
decimal point, EXP, the four operators, equals, delete, sign change and all
clear. Keeps a running expression with usual precedence (no parentheses) and
renders into three display fields: mantissa, operator and exponent.

Numbers are shown within 15 characters, switching to scientific notation
with a clamped three digit exponent when they don't fit.
'''

from .cli import CLI
from .controller import Controller, EntryState, TextField
from .evaluator import Evaluator, Operator
from .lexer import Lexer


__all__ = 'Controller', 'EntryState', 'TextField', 'Evaluator', 'Operator', \
    'Lexer', 'CLI'
