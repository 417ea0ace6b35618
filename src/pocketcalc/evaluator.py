'''
Incremental two-stack evaluator for the four arithmetic operators.

Operands and operators arrive one at a time, as typed. There are no
parentheses: all operators are left-associative, and multiplication and
division bind tighter than addition and subtraction.
'''

from collections import deque
from enum import Enum
import math
import operator

from .util import wrap_user_errors


def _divide(left, right):
    '''
    True division, NaN instead of ZeroDivisionError.
    '''
    if right == 0:
        return math.nan
    return operator.__truediv__(left, right)


class Operator(Enum):
    '''
    Binary operators, keyed by symbol.
    '''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def precedence(self):
        return _PRECEDENCE[self]

    def apply(self, left, right):
        return _FUNCTIONS[self](left, right)


_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
}

_FUNCTIONS = {
    Operator.ADD: operator.__add__,
    Operator.SUBTRACT: operator.__sub__,
    Operator.MULTIPLY: operator.__mul__,
    Operator.DIVIDE: _divide,
}


@wrap_user_errors('No such operator {0!r}')
def to_operator(symbol):
    '''
    Return the Operator for symbol, or an Operator unchanged.
    '''
    return Operator(symbol)


class Evaluator:
    '''
    Operand and operator stacks, evaluated eagerly by precedence.

    Pushing an operator first reduces every pending operator of equal or
    higher precedence, so the operator stack holds at most one additive and
    one multiplicative operator, in that order.
    '''

    def __init__(self):
        self._operands = deque()
        self._operators = deque()

    @property
    def operands(self):
        return tuple(self._operands)

    @property
    def operators(self):
        return tuple(self._operators)

    def is_empty(self):
        return not self._operands and not self._operators

    def push_operand(self, operand):
        self._operands.append(float(operand))

    def push_operator(self, op):
        '''
        Reduce pending operators that bind at least as tightly, then push.
        '''
        op = to_operator(op)
        while self._operators and \
                self._operators[-1].precedence >= op.precedence:
            if not self._evaluate_top():
                break
        self._operators.append(op)

    def replace_last_operator(self, op):
        '''
        Swap the pending operator for op, as if op had been pushed instead.

        The dropped operator is never evaluated.
        '''
        if self._operators:
            self._operators.pop()
        self.push_operator(op)

    def _evaluate_top(self):
        '''
        Apply the top operator to the top two operands, pushing the result.

        Returns False, touching nothing, if either stack is too short.
        '''
        if len(self._operands) < 2 or not self._operators:
            return False
        # Pushed last, so it's the right-hand side.
        right = self._operands.pop()
        left = self._operands.pop()
        op = self._operators.pop()
        self._operands.append(op.apply(left, right))
        return True

    def get_result(self):
        '''
        Reduce everything and pop the final operand, 0 if there is none.
        '''
        while self._operators:
            if not self._evaluate_top():
                # Dangling operator without its right-hand operand.
                self._operators.pop()
        if not self._operands:
            return 0.0
        return self._operands.pop()

    def clear(self):
        self._operands.clear()
        self._operators.clear()
