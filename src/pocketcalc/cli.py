from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import CalcError
from .controller import Controller
from .display import DISPLAY_MAX_LENGTH
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Keystrokes aren't worth keeping.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def render(controller):
    '''
    Return the three display fields as one line, like the calculator face.
    '''
    mantissa, operator, exponent = controller.fields()
    return '{:1} {:>{}}{}'.format(operator, mantissa,
                                  DISPLAY_MAX_LENGTH, exponent).rstrip()


class CLI:
    '''
    Command line front-end: each line of input is a run of key presses.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexed key presses and the events they map to.
        '''
        lexer = Lexer()
        print('[event]\t<repr(key)>\t<argument>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                event, argument = lexer.event(match)
                print(event, repr(match.group(0)), argument, sep='\t')

    def executor(self):
        '''
        Run the calculator, showing the display after every line.
        '''
        controller = Controller()
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for event, argument in lexer.events(line):
                    controller.feed(event, argument)
                    if self.args.verbose:
                        print(event, argument or '', controller.state.value,
                              controller.fields(), sep='\t', file=stderr)
            # Abort rest of line, but keep what was already typed.
            except CalcError as e:
                print(e.args[0], file=stderr)
            print(render(controller))

    def raw_grammar(self):
        '''
        Print the key grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Pocket calculator',
            epilog='Keys: 0-9 . e(EXP) + - * / = <(delete) _(sign) c(clear)')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='trace every key to stderr')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except CalcError as e:
            print(e.args[0], file=stderr)
            exit(2)
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
