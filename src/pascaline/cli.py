from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from . import symbols
from .util import PascalineError
from .machine import Machine
from .lexer import Lexer


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the Pascaline machine.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.pascaline_history'

    def dumper(self):
        '''
        Dump every word's classification and arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(word)>\t<arity>')
        for line in self._lines():
            for word in lexer.tokenize(line):
                token = lexer.classify(word)
                arity = token.value.arity if token.is_operator() else ''
                print(token.kind.name,
                      repr(word),
                      arity,
                      sep='\t')

    def executor(self):
        '''
        Run machine, printing the stack after each line.
        '''
        machine = Machine(capacity=self.args.capacity)
        for line in self._lines():
            try:
                machine.feed(line)
            # Abort entire rest of line, makes sense anyway
            except PascalineError as e:
                log.debug('%r on line %r', e, line)
                print(e, file=sys.stderr)
            print(machine)

    def printsymbols(self):
        '''
        Print all recognised symbols.
        '''
        print('operators:', *symbols.OPERATORS)
        print('literals:', *sorted(set(symbols.SYMBOLS) -
                                   set(symbols.OPERATORS)))

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-c', '--capacity',
                                          type=int,
                                          default=Machine.CAPACITY,
                                          help='maximum stack size '
                                               '(default=%(default)s)')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-S', '--symbols',
                                       self.printsymbols),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        log_group = self.argument_parser.add_mutually_exclusive_group()
        log_group.add_argument('--log-level', type=str, default='WARNING',
                               choices=['DEBUG', 'INFO', 'WARNING',
                                        'ERROR', 'CRITICAL'],
                               help='sets the log level (default=WARNING)')
        log_group.add_argument('--debug', action='store_true',
                               help='equivalent to `--log-level=DEBUG`')
        log_group.add_argument('--quiet', action='store_true',
                               help='equivalent to `--log-level=CRITICAL`')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _configure_logging(self):
        if self.args.debug:
            level = logging.DEBUG
        elif self.args.quiet:
            level = logging.CRITICAL
        else:
            level = getattr(logging, self.args.log_level)
        logging.basicConfig(level=level, stream=sys.stderr,
                            format='%(name)s: %(levelname)s: %(message)s')

    def _lines(self):
        if self.args.expressions is None:
            return self._prompting_input()
        # -e 1 2 + is one expression, not three
        return [' '.join(self.args.expressions)]

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.capacity < 1:
            self.argument_parser.error('capacity must be at least 1')
        self._configure_logging()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
