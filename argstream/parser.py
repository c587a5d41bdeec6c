"""
Argstream parser facade: declare, parse, bind, and surface faults.

What this module provides
- ArgumentParser: owns a Registry plus the descriptive fields used by the help
  renderer (prog, usage, description, epilog) and runs one parse per call:
  • help interception pre-pass ("-h"/"--help" when add_help is on and neither
    string is declared): print help to stderr and exit;
  • the parsing engine (argstream.parsing.parse) over the registry;
  • the explicit binding step (argstream.binding.Binding) for bound arguments.

Fault surfacing
- Every DeclarationError / ParsingError / BindingError passes through
  faults.trigger() with the parser's runtime flags:
  • shell=False (default): the fault is raised to the caller.
  • shell=True: the fault is rendered with rich on stderr and the process exits.
- colorful / fancy shape the rendering (plain text, colors, rich panel).

Quick start
    from argstream import ArgumentParser, converters

    parser = ArgumentParser(prog="tool", description="Process items.")
    parser.add_argument("-c", "--count", type=converters.integer, default=1)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("files", nargs="+")

    namespace = parser.parse_args(["--count", "3", "a.txt", "b.txt"])
    namespace.count   # 3
    namespace.files   # ['a.txt', 'b.txt']
"""
import logging
import os.path
import sys

from rich.console import Console

from . import helping
from .binding import Binding
from .faults import ArgumentException, DeclarationError, trigger
from .parsing import parse
from .registry import Registry
from .utils import Unset, coalesce

logger = logging.getLogger(__name__)

HELP_STRINGS = ("-h", "--help")


class ArgumentParser:
    """
    Collect program arguments and parse token sequences into namespaces.

    Parameters
    - prog: program name in usage and fault headers (defaults to basename(sys.argv[0])).
    - usage: explicit usage line (synthesized from the registry when omitted).
    - description / epilog: free text before/after the argument listing.
    - add_help: intercept "-h"/"--help" before parsing.
    - shell: render faults and exit instead of raising them.
    - colorful / fancy: styling of help and fault rendering.
    """

    def __init__(
            self,
            prog=Unset,
            *,
            usage=None,
            description=None,
            epilog=None,
            add_help=True,
            shell=False,
            colorful=True,
            fancy=False,
    ):
        self.prog = coalesce(prog, os.path.basename(sys.argv[0]))
        self.usage = usage
        self.description = description
        self.epilog = epilog
        self.add_help = bool(add_help)
        self.shell = bool(shell)
        self.colorful = bool(colorful)
        self.fancy = bool(fancy)
        self.registry = Registry()
        self.subparsers = []
        self._bindings = []

    def __repr__(self):
        return "argument-parser(prog=%r, registry=%r)" % (self.prog, self.registry)

    def trigger(self, fault, /):
        trigger(fault, prog=self.prog, shell=self.shell, fancy=self.fancy, colorful=self.colorful)

    def add_argument(self, *strings, **options):
        """
        Declare an argument (see argstream.arguments.Argument) and return it.
        """
        try:
            return self.registry.add(*strings, **options)
        except DeclarationError as fault:
            self.trigger(fault)

    def add_subparser(self, parser, /):
        """
        Record a sub-parser. Sub-parsers are carried as data and never walked
        by the parsing engine.
        """
        if not isinstance(parser, ArgumentParser):
            raise TypeError("add_subparser() argument must be an ArgumentParser")
        self.subparsers.append(parser)
        return parser

    def bind(self, argument, target, attribute, type=Unset):
        """
        Copy the parsed value of argument onto target.attribute after every
        successful parse, checked against type when given.
        """
        if any(binding.argument is argument for binding in self._bindings):
            self.trigger(DeclarationError(
                "argument %r is already bound" % argument.dest,
                hint="bind every argument to a single target",
                argument=argument,
            ))
            return
        binding = Binding(argument, target, attribute, type)
        self._bindings.append(binding)
        return binding

    def intercept(self, tokens, /):
        """
        Return True when tokens ask for help and help is not a declared argument.
        """
        if not self.add_help or any(string in self.registry for string in HELP_STRINGS):
            return False
        return any(token in HELP_STRINGS for token in tokens)

    def parse_args(self, tokens=Unset, /):
        """
        Parse tokens (sys.argv[1:] when omitted) into a Namespace.
        """
        tokens = list(sys.argv[1:] if tokens is Unset else tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse_args() argument must be an iterable of strings")

        if self.intercept(tokens):
            self.print_help()
            sys.exit(1)

        logger.debug("parsing %r with %r", tokens, self.registry)
        try:
            namespace = parse(self.registry, tokens)
            for binding in self._bindings:
                binding.apply(namespace)
        except ArgumentException as fault:
            self.trigger(fault)
            return None
        return namespace

    def format_help(self, *, width=80):
        return helping.format_help(self, width=width)

    def print_help(self):
        Console(stderr=True).print(helping.render(self, colorful=self.colorful))


__all__ = (
    "ArgumentParser",
)
