'''
Input controller: keystrokes in, three display fields out.
'''

from enum import Enum

from .display import (DISPLAY_MAX_LENGTH, EXPONENT_PLACEHOLDER, OVERFLOW_TEXT,
                      display_symbol, format_fixed, format_result,
                      parse_operand)
from .evaluator import Evaluator, to_operator
from .util import CalcError


EXPONENT_MAX_LENGTH = 5
DIGITS = frozenset('0123456789')


class EntryState(Enum):
    '''
    How the controller interprets the next digit, decimal point or operator.
    '''
    # Typing the mantissa.
    ENTERING = 'entering'
    # An operator was just given; the next digit starts a new operand.
    OPERATOR_PENDING = 'operator pending'
    # A result is showing; the next digit replaces it.
    RESULT_DISPLAYED = 'result displayed'
    # Digits go to the exponent field.
    EXPONENT_ENTRY = 'exponent entry'


class TextField:
    '''
    One display field. Front-ends read it to render.
    '''

    def __init__(self, text=''):
        self._text = text

    def get(self):
        return self._text

    def set(self, text):
        self._text = text

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._text)


class Controller:
    '''
    Entry state machine driving an Evaluator and three display fields.

    Every operation fully updates the fields before returning. Calculator
    level mistakes, like deleting from an empty display, are no-ops.
    '''

    def __init__(self, evaluator=None, mantissa=None, operator=None,
                 exponent=None):
        self.evaluator = Evaluator() if evaluator is None else evaluator
        self.mantissa = TextField() if mantissa is None else mantissa
        self.operator = TextField() if operator is None else operator
        self.exponent = TextField() if exponent is None else exponent
        self._reset_display()

    def fields(self):
        '''
        Return (mantissa, operator, exponent) texts.
        '''
        return self.mantissa.get(), self.operator.get(), self.exponent.get()

    def _reset_display(self):
        self.mantissa.set('0')
        self.operator.set('')
        self.exponent.set('')
        self.state = EntryState.ENTERING

    def _starts_new_number(self):
        return self.state in {EntryState.RESULT_DISPLAYED,
                              EntryState.OPERATOR_PENDING}

    def _start_number(self, text):
        self.mantissa.set(text)
        self.exponent.set('')
        self.state = EntryState.ENTERING

    def append_digit_or_decimal(self, text):
        '''
        Type a single digit or a decimal point.
        '''
        if text != '.' and text not in DIGITS:
            raise CalcError('Not a digit or decimal point: {!r}'.format(text))
        if self.mantissa.get() == OVERFLOW_TEXT:
            self._reset_display()
        if self.state is EntryState.EXPONENT_ENTRY:
            if text != '.':
                self._append_exponent_digit(text)
        elif self._starts_new_number():
            self._start_number('0.' if text == '.' else text)
        else:
            self._append_mantissa(text)

    def _append_mantissa(self, text):
        current = self.mantissa.get()
        if text == '.':
            if '.' not in current and len(current) < DISPLAY_MAX_LENGTH:
                self.mantissa.set(current + '.')
        elif current == '0':
            self.mantissa.set(text)
        elif len(current) < DISPLAY_MAX_LENGTH:
            self.mantissa.set(current + text)

    def _append_exponent_digit(self, digit):
        current = self.exponent.get()
        if current == EXPONENT_PLACEHOLDER:
            if digit != '0':
                self.exponent.set(current[:-1] + digit)
        elif len(current) < EXPONENT_MAX_LENGTH:
            self.exponent.set(current + digit)

    def request_exponent_mode(self):
        '''
        Begin typing an exponent (the EXP key). Only while entering a number.
        '''
        if self.state is EntryState.ENTERING:
            self.exponent.set(EXPONENT_PLACEHOLDER)
            self.state = EntryState.EXPONENT_ENTRY

    def _operand(self):
        return parse_operand(self.mantissa.get(), self.exponent.get())

    def apply_operator(self, op):
        '''
        Push the displayed number and op, or swap op for the pending one.
        '''
        op = to_operator(op)
        if self.state is EntryState.OPERATOR_PENDING:
            self.evaluator.replace_last_operator(op)
        else:
            operand = self._operand()
            if operand is None:
                return
            self.evaluator.push_operand(operand)
            self.evaluator.push_operator(op)
            self.state = EntryState.OPERATOR_PENDING
        self.operator.set(display_symbol(op.value))

    def compute_and_display(self):
        '''
        The = key: push the displayed number and show the result.
        '''
        operand = self._operand()
        if operand is None:
            return
        self.evaluator.push_operand(operand)
        mantissa, exponent = format_result(self.evaluator.get_result())
        self.mantissa.set(mantissa)
        self.exponent.set(exponent)
        self.operator.set('')
        self.evaluator.clear()
        self.state = EntryState.RESULT_DISPLAYED

    def delete_last_character(self):
        if self.state is EntryState.EXPONENT_ENTRY:
            current = self.exponent.get()
            if current == EXPONENT_PLACEHOLDER:
                return
            if len(current) > len(EXPONENT_PLACEHOLDER):
                self.exponent.set(current[:-1])
            else:
                self.exponent.set(EXPONENT_PLACEHOLDER)
            return
        current = self.mantissa.get()
        if self._starts_new_number() or current == '0':
            return
        remaining = current[:-1]
        if remaining in {'', '-'}:
            remaining = '0'
        self.mantissa.set(remaining)

    def toggle_sign(self):
        '''
        Negate the exponent while typing one, otherwise the mantissa.
        '''
        if self.state is EntryState.EXPONENT_ENTRY:
            exponent = -int(self.exponent.get()[1:])
            self.exponent.set('E{:+d}'.format(exponent))
            return
        value = parse_operand(self.mantissa.get())
        if not value:
            return
        if self.exponent.get():
            self.mantissa.set(format_fixed(-value))
        else:
            # Goes scientific if the sign pushes it past the display width.
            mantissa, exponent = format_result(-value)
            self.mantissa.set(mantissa)
            self.exponent.set(exponent)

    def all_clear(self):
        self._reset_display()
        self.evaluator.clear()

    # Lexer event names to operations.
    EVENTS = {
        'digit': append_digit_or_decimal,
        'decimal': append_digit_or_decimal,
        'exponent': request_exponent_mode,
        'operator': apply_operator,
        'equals': compute_and_display,
        'delete': delete_last_character,
        'sign': toggle_sign,
        'clear': all_clear,
    }

    def feed(self, event, argument=None):
        '''
        Run the operation named by a lexer event.
        '''
        try:
            operation = type(self).EVENTS[event]
        except KeyError:
            raise CalcError('No such event {!r}'.format(event)) from None
        if argument is None:
            operation(self)
        else:
            operation(self, argument)
