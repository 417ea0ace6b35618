'''
Calculator-style rendering of floats.

A number is shown as a mantissa and an optional exponent field, the way a
pocket calculator shows 1.5 E+020. Results go to scientific form once they no
longer fit the 15 character display or get too small to show in fixed form.
'''

from decimal import Decimal, ROUND_HALF_UP, localcontext
import math

import regex


DISPLAY_MAX_LENGTH = 15
FIXED_DIGITS = 15
SCIENTIFIC_DIGITS = 13
UNDERFLOW_THRESHOLD = 1e-13
EXPONENT_LIMIT = 999
EXPONENT_PLACEHOLDER = 'E+0'

NAN_TEXT = 'NaN'
OVERFLOW_TEXT = 'OvFlow'

_SYMBOLS = {
    '*': '\N{MULTIPLICATION SIGN}',
    '/': '\N{DIVISION SIGN}',
}

# What the controller can have typed: 12, 12., 12.5, .5, with optional sign.
MANTISSA = r'''
            -?
            (?:
                \d+
                (?:
                    \.
                    \d*
                )?
            |
                \.
                \d+
            )
            '''
EXPONENT = r'E[+-]\d{1,3}'
FLAGS = regex.VERBOSE | regex.VERSION1


def trim_trailing_zeros(text):
    '''
    Strip trailing fractional zeros, and then a dangling decimal point.

    If text carries an exponent marker, only the mantissa before it is
    trimmed; the exponent is re-appended untouched.
    '''
    marker = text.find('E')
    if marker == -1:
        marker = text.find('e')
    if marker == -1:
        mantissa, exponent = text, ''
    else:
        mantissa, exponent = text[:marker], text[marker:]
    if '.' in mantissa:
        mantissa = mantissa.rstrip('0')
        if mantissa.endswith('.'):
            mantissa = mantissa[:-1]
    return mantissa + exponent


def _format(value, spec):
    '''
    Format the shortest decimal that round-trips to value, halves rounded up.
    '''
    with localcontext() as context:
        context.rounding = ROUND_HALF_UP
        return format(Decimal(repr(value)), spec)


def format_exponent(exponent):
    '''
    Signed, zero-padded to three digits and clamped to ±999.
    '''
    exponent = max(-EXPONENT_LIMIT, min(EXPONENT_LIMIT, exponent))
    return '{:+04d}'.format(exponent)


def format_fixed(value):
    '''
    Integral values without a decimal point, others to 15 places, trimmed.
    '''
    if value == math.trunc(value):
        return str(int(value))
    return trim_trailing_zeros(_format(value, '.{}f'.format(FIXED_DIGITS)))


def format_scientific(value):
    '''
    Return (mantissa, exponent) texts, e.g. ('1.5', 'E+020').
    '''
    text = _format(value, '.{}e'.format(SCIENTIFIC_DIGITS))
    mantissa, _, exponent = text.partition('e')
    return (trim_trailing_zeros(mantissa),
            'E' + format_exponent(int(exponent)))


def needs_scientific(text):
    '''
    Return True if fixed-point text doesn't fit the display.
    '''
    integral, _, fractional = text.partition('.')
    return len(integral) > DISPLAY_MAX_LENGTH or \
        (integral.lstrip('-') == '0' and
         fractional.startswith('0' * SCIENTIFIC_DIGITS))


def format_result(value):
    '''
    Return (mantissa, exponent) texts for a computed value.

    The exponent is empty for fixed-point results. NaN and infinities come
    out as sentinel mantissas rather than raising.
    '''
    if math.isnan(value):
        return NAN_TEXT, ''
    if math.isinf(value):
        return OVERFLOW_TEXT, ''
    if value != 0 and abs(value) < UNDERFLOW_THRESHOLD:
        return format_scientific(value)
    text = format_fixed(value)
    if needs_scientific(text):
        return format_scientific(value)
    return text, ''


def parse_operand(mantissa, exponent=''):
    '''
    Parse display texts back into a float.

    Returns None if the texts aren't a number the display could hold, e.g.
    sentinels or an empty mantissa.
    '''
    if not regex.fullmatch(MANTISSA, mantissa, flags=FLAGS):
        return None
    if exponent:
        if not regex.fullmatch(EXPONENT, exponent, flags=FLAGS):
            return None
        mantissa += 'E' + exponent[1:]
    return float(mantissa)


def display_symbol(symbol):
    '''
    Operator symbol as shown on the display: × and ÷ for * and /.
    '''
    return _SYMBOLS.get(symbol, symbol)
