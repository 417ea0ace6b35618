'''
Evaluator tests
'''

import math

from pocketcalc.evaluator import Evaluator, Operator
from pocketcalc.util import CalcError

from pytest import raises


def evaluate(*items):
    '''
    Push alternating operands and operators, then take the result.
    '''
    e = Evaluator()
    for i, item in enumerate(items):
        if i % 2:
            e.push_operator(item)
        else:
            e.push_operand(item)
    return e.get_result()


def test_precedence_table():
    assert Operator('+').precedence == Operator('-').precedence == 1
    assert Operator('*').precedence == Operator('/').precedence == 2


def test_unknown_operator():
    with raises(CalcError, match='No such operator'):
        Evaluator().push_operator('%')


def test_equal_precedence_left_to_right():
    assert evaluate(3, '+', 4, '-', 2) == 5
    assert evaluate(2, '-', 3, '+', 4) == 3
    assert evaluate(8, '/', 4, '*', 2) == 4
    assert evaluate(1, '-', 2, '-', 3, '-', 4) == -8


def test_precedence():
    assert evaluate(2, '+', 3, '*', 4) == 14
    assert evaluate(2, '*', 3, '+', 4) == 10
    assert evaluate(10, '-', 6, '/', 3) == 8


def test_long_chain_reduces_left_to_right():
    assert evaluate(1, '+', 2, '*', 3, '-', 4, '*', 5, '+', 6) == -7


def test_stacks_stay_bounded():
    e = Evaluator()
    for operand, op in [(1, '+'), (2, '*'), (3, '-'), (4, '/'), (5, '+')]:
        e.push_operand(operand)
        e.push_operator(op)
        assert len(e.operators) <= 2
        assert len(e.operands) <= 2
    assert e.operators == (Operator.ADD,)


def test_replace_last_operator():
    e = Evaluator()
    e.push_operand(7)
    e.push_operator('+')
    e.replace_last_operator('-')
    e.push_operand(2)
    assert e.get_result() == 5


def test_replace_keeps_precedence():
    # 2 + 3 * then - is the same as 2 + 3 -
    e = Evaluator()
    e.push_operand(2)
    e.push_operator('+')
    e.push_operand(3)
    e.push_operator('*')
    e.replace_last_operator('-')
    e.push_operand(4)
    assert e.get_result() == 1


def test_division_by_zero_is_nan():
    assert math.isnan(evaluate(5, '/', 0))


def test_nan_propagates():
    assert math.isnan(evaluate(5, '/', 0, '+', 1))


def test_empty_result_is_zero():
    assert Evaluator().get_result() == 0


def test_dangling_operator_is_dropped():
    e = Evaluator()
    e.push_operand(5)
    e.push_operator('*')
    assert e.get_result() == 5
    assert e.is_empty()


def test_clear():
    e = Evaluator()
    e.push_operand(1)
    e.push_operator('+')
    e.push_operand(2)
    e.clear()
    assert e.is_empty()
    assert e.get_result() == 0
