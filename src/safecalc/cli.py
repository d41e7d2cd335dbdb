from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalcError
from .lexer import Lexer
from .parser import Parser
from .calculator import Calculator


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.safecalc_history'

    def dumper(self):
        '''
        Dump all tokens, then the postfix order they evaluate in.
        '''
        lexer = Lexer()
        parser = Parser()
        print('<kind>\t<repr(text)>')
        for line in self._lines():
            try:
                tokens = lexer.lex(line)
                for token in tokens:
                    print(type(token).__name__, repr(str(token)), sep='\t')
                print(*parser.parse(tokens))
            except CalcError as e:
                print(e.args[0], file=sys.stderr)

    def executor(self):
        '''
        Run calculator on every line.
        '''
        calculator = Calculator(precision=self.args.precision,
                                rate=self.args.rate)
        for line in self._lines():
            reading = calculator.calculate(line)
            if not reading.ok:
                logger.debug('%r failed', line, exc_info=reading.error)
                print(reading.error.args[0], file=sys.stderr)
            if reading.converted is None:
                print(reading.display)
            else:
                print(reading.display, reading.converted, sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _lines(self):
        '''
        Yield non-blank input lines.
        '''
        for line in self.args.expressions:
            if line.strip():
                yield line

    def _prompting_input(self):
        '''
        Return interactive input in place of stdin, or stdin itself.

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Safe infix '
                                                          'calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=Calculator.DEFAULT_PRECISION)
        self.argument_parser.add_argument('-r', '--rate',
                                          type=float,
                                          default=Calculator.DEFAULT_RATE)
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
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(levelname)s %(name)s: %(message)s')
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
