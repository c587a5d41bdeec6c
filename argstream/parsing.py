"""
Argstream parsing engine.

parse(registry, tokens) consumes a token sequence left-to-right against a
Registry and returns a fresh Namespace, or raises the first ParsingError it
meets (fail-fast, no partial namespace).

phases
- consuming
  • a token equal to a named match string selects that argument (and is consumed);
  • otherwise the next undispatched positional is selected (UnexpectedTokenError
    when none remains);
  • the argument's arity decides how many following tokens it takes;
  • each taken token is converted (choices first, otherwise the type converter)
    and the argument's action commits the values.
- resolving
  • every argument absent from the namespace is either reported
    (MissingRequiredError) or, when it declares a default, fed that default
    through its own action.

tie-break
- a token that equals a named match string is never taken as a value by a
  "?", "*" or "+" argument; it always starts a new dispatch. fixed arities
  take their N tokens unconditionally.
"""
import logging

from .faults import *
from .namespace import Namespace
from .utils import ordinal

logger = logging.getLogger(__name__)


class ParsingState:
    """
    Transient cursor over one parse call.

    fields
    - registry: the (read-only) declared arguments.
    - tokens: the input, as a tuple.
    - index: read position in tokens (0-based; messages use 1-based ordinals).
    - position: ordinal of the next expected positional argument.
    - namespace: the result being built.
    """
    __slots__ = ("registry", "tokens", "index", "position", "namespace")

    def __init__(self, registry, tokens):
        self.registry = registry
        self.tokens = tuple(tokens)
        self.index = 0
        self.position = 0
        self.namespace = Namespace()

    def remainder(self):
        return self.tokens[self.index:]

    def parse(self):
        while self.index < len(self.tokens):
            token = self.tokens[self.index]
            start = self.index
            if (argument := self.registry.lookup(token)) is not None:
                self.index += 1
            else:
                if (argument := self.registry.positional(self.position)) is None:
                    raise UnexpectedTokenError(
                        "unexpected argument %r at %s position" % (token, ordinal(start + 1)),
                        hint="remove it, or check the spelling of the option it belongs to",
                        token=token,
                        index=start,
                    )
                self.position += 1
            logger.debug("token %r at %d selects %r", token, start, argument.dest)
            self.handle(argument, start)

        self.resolve()
        return self.namespace

    def handle(self, argument, start):
        """
        consume, convert and commit the values of one dispatched argument.
        """
        tokens = self.consume(argument, start)

        match argument.nargs:
            case 0:
                values = [argument.const]
            case "?" | "*" if not tokens:
                values = [argument.const] if argument.const is not None else []
            case _:
                first = self.index - len(tokens)
                values = [self.convert(argument, token, first + offset) for offset, token in enumerate(tokens)]

        argument.action(argument, self.namespace, values)

    def consume(self, argument, start):
        """
        take the tokens the argument's arity demands and advance the cursor.
        """
        remainder = self.remainder()

        match nargs := argument.nargs:
            case 0:
                return ()
            case "?":
                if remainder and remainder[0] not in self.registry:
                    self.index += 1
                    return remainder[:1]
                return ()
            case "*" | "+":
                count = 0
                while count < len(remainder) and remainder[count] not in self.registry:
                    count += 1
                if nargs == "+" and not count:
                    raise InsufficientValuesError(
                        "expected at least one value for %r from %s position" % (argument.display, ordinal(start + 1)),
                        hint="pass one or more values after %r" % argument.display
                        if argument.named else "pass one or more values",
                        argument=argument,
                        index=start,
                    )
                self.index += count
                return remainder[:count]
            case int():
                if nargs > len(remainder):
                    raise InsufficientValuesError(
                        "not enough values for %r from %s position: expected %d, got %d" % (
                            argument.display, ordinal(start + 1), nargs, len(remainder)
                        ),
                        hint="pass exactly %d value%s" % (nargs, "s" * (nargs != 1)),
                        argument=argument,
                        index=start,
                    )
                self.index += nargs
                return remainder[:nargs]

    def convert(self, argument, token, index):
        """
        turn one raw token into a value: choice label lookup, or the converter.
        """
        if argument.choices is not None:
            try:
                return argument.choices.load(token)
            except KeyError:
                raise InvalidChoiceError(
                    "value %r at %s position is not a valid choice for %r" % (
                        token, ordinal(index + 1), argument.display
                    ),
                    hint="use one of: %s" % " · ".join(argument.choices.labels),
                    argument=argument,
                    token=token,
                    index=index,
                ) from None
        try:
            return argument.type(token)
        except Exception as exception:
            typename = getattr(argument.type, "__name__", "value")
            raise ConversionFailedError(
                "value %r at %s position cannot be converted for %r" % (token, ordinal(index + 1), argument.display),
                hint="use a valid %s (%s)" % (typename, exception),
                argument=argument,
                token=token,
                index=index,
                exception=exception,
            ) from exception

    def resolve(self):
        """
        apply defaults and enforce required arguments once tokens run out.
        """
        for argument in self.registry.arguments():
            if argument.dest in self.namespace:
                continue
            if argument.required:
                raise MissingRequiredError(
                    "missing required argument %r" % argument.display,
                    hint="pass %s" % (
                        "%r with a value" % argument.display if argument.named else "a value for %r" % argument.dest
                    ),
                    argument=argument,
                )
            if argument.default is not None:
                logger.debug("default %r for %r", argument.default, argument.dest)
                argument.action(argument, self.namespace, [argument.default])


def parse(registry, tokens, /):
    """
    Parse tokens against registry; return a fresh Namespace or raise ParsingError.
    """
    return ParsingState(registry, tokens).parse()


__all__ = (
    "ParsingState",
    "parse",
)
