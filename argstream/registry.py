"""
Argument registry: the declared arguments of one parsing context.

A Registry indexes named arguments by every one of their match strings and
keeps positional arguments in declaration order (which is also their matching
order). It is built once at configuration time; the parsing engine only reads
it, so one registry can serve any number of sequential parse calls.
"""
import logging
from types import MappingProxyType

from .arguments import Argument
from .faults import DeclarationError, FaultCode

logger = logging.getLogger(__name__)


class Registry:
    """
    Declared arguments indexed for the parsing engine.

    Invariants
    - a named match string maps to exactly one argument (redeclaration is a
      DeclarationError with code DUPLICATE_DECLARATION);
    - positionals are kept in declaration order and carry no uniqueness constraint.
    """
    __slots__ = ("_named", "_positionals")

    def __init__(self, *arguments):
        self._named = {}
        self._positionals = []
        for argument in arguments:
            self.declare(argument)

    @property
    def named(self):
        """
        Read-only mapping of every named match string to its argument.
        """
        return MappingProxyType(self._named)

    @property
    def positionals(self):
        return tuple(self._positionals)

    def declare(self, argument, /):
        """
        Index an argument; all-or-nothing on a match string collision.
        """
        if not isinstance(argument, Argument):
            raise TypeError("declare() argument must be an Argument, not %r" % type(argument).__name__)

        if not argument.named:
            self._positionals.append(argument)
            logger.debug("registered positional %r at %d", argument.dest, len(self._positionals) - 1)
            return argument

        for string in argument.strings:
            if string in self._named:
                raise DeclarationError(
                    "redefinition of option %r" % string,
                    title="duplicate declaration",
                    code=FaultCode.DUPLICATE_DECLARATION,
                    hint="%r is already declared by %r" % (string, self._named[string].dest),
                    argument=argument,
                    token=string,
                )
        for string in argument.strings:
            self._named[string] = argument
        logger.debug("registered named %r as %s", argument.dest, ", ".join(argument.strings))
        return argument

    def add(self, *strings, **options):
        """
        Build an Argument from the given metadata and declare it.
        """
        return self.declare(Argument(*strings, **options))

    def lookup(self, token, /):
        """
        Return the named argument matching token exactly, or None.
        """
        return self._named.get(token)

    def positional(self, index, /):
        """
        Return the positional argument at the given ordinal, or None once exhausted.
        """
        if 0 <= index < len(self._positionals):
            return self._positionals[index]
        return None

    def arguments(self, *, duplicates=False):
        """
        Return named arguments followed by positionals.

        Named arguments are sorted by dest for deterministic iteration and
        appear once each unless duplicates is True, in which case one entry per
        match string is returned (sorted by match string).
        """
        if duplicates:
            named = [self._named[string] for string in sorted(self._named)]
        else:
            named = sorted({id(argument): argument for argument in self._named.values()}.values(),
                           key=lambda argument: argument.dest)
        return [*named, *self._positionals]

    def __contains__(self, token):
        return token in self._named

    def __len__(self):
        return len(self.arguments())

    def __iter__(self):
        return iter(self.arguments())

    def __repr__(self):
        return "registry(%s)" % ", ".join(argument.display for argument in self.arguments())


__all__ = (
    "Registry",
)
