from functools import reduce
import operator

import regex

from .util import CalcError


class Lexer:
    '''
    Lexer for calculator keystrokes.

    Every lexeme is exactly one key press. Holds no internal state, but needs
    to be instantiated.
    '''
    DIGIT = r'[0-9]'
    # Comma for locales where it's the decimal separator.
    DECIMAL = r'[.,]'
    EXPONENT = r'[eE]'
    # x and the Unicode signs are accepted for multiplication and division,
    # then normalised by event().
    OPERATOR = '[-+*/x\N{MULTIPLICATION SIGN}\N{DIVISION SIGN}]'
    EQUALS = r'='
    DELETE = r'[<d]'
    SIGN = '[_n\N{PLUS-MINUS SIGN}]'
    CLEAR = r'[cCa]'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<decimal>' + DECIMAL + r')|' \
             r'(?<exponent>' + EXPONENT + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<equals>' + EQUALS + r')|' \
             r'(?<delete>' + DELETE + r')|' \
             r'(?<sign>' + SIGN + r')|' \
             r'(?<clear>' + CLEAR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Alternative spellings to what the controller takes.
    ALIASES = {
        'x': '*',
        '\N{MULTIPLICATION SIGN}': '*',
        '\N{DIVISION SIGN}': '/',
        ',': '.',
    }

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Stops on, and raises for, the first character that isn't a key.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a controller.
        '''
        return match.lastgroup != 'space'

    def event(self, match):
        '''
        Return (event, argument) for a controller's feed().

        Only digits, decimal points and operators carry an argument.
        '''
        name = match.lastgroup
        if name in {'digit', 'decimal', 'operator'}:
            text = match.group(0)
            return name, type(self).ALIASES.get(text, text)
        return name, None

    def events(self, line):
        '''
        Yield (event, argument) for every key press in line.
        '''
        for match in self.lex(line):
            if self.isfeedable(match):
                yield self.event(match)
