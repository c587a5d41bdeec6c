"""
Explicit binding of parsed values into caller-owned objects.

A Binding copies one namespace entry onto an attribute of a target object
after a successful parse. When a type is declared the copy is checked:

- scalar types: the value must be an instance of the type (bool is not
  accepted where int is expected); int widens to float.
- list[T] / tuple[T, ...]: the value (a list, or a scalar promoted to a
  one-element list) is copied element by element, each element checked as a
  scalar T, into a fresh list or tuple.

Failures raise BindingError subclasses (TypeMismatchError, UnboundValueError);
they never affect the namespace itself.

Example
    binding = Binding(count, settings, "count", int)
    binding.apply(namespace)   # settings.count = namespace["count"]
"""
import logging
import types
import typing

from .faults import TypeMismatchError, UnboundValueError
from .utils import Unset

logger = logging.getLogger(__name__)


def _coerce(value, expected, /, **context):
    if expected is typing.Any:
        return value
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if expected is int and isinstance(value, bool) or not isinstance(value, expected):
        raise TypeMismatchError(
            "cannot assign value %r (type: %s) to target of type %s" % (
                value, type(value).__name__, getattr(expected, "__name__", expected)
            ),
            hint="declare a converter producing %s for the argument" % getattr(expected, "__name__", expected),
            value=value,
            expected=expected,
            **context
        )
    return value


class Binding:
    __slots__ = ("argument", "target", "attribute", "type")

    def __init__(self, argument, target, attribute, type=Unset):
        if not isinstance(attribute, str) or not attribute:
            raise TypeError("binding attribute must be a non-empty string")
        self.argument = argument
        self.target = target
        self.attribute = attribute
        self.type = type

    def __repr__(self):
        return "binding(%s -> %s.%s)" % (self.argument.dest, type(self.target).__name__, self.attribute)

    def convert(self, value):
        """
        Check value against the declared type; return what will be assigned.
        """
        if self.type is Unset:
            return value

        context = {"argument": self.argument, "attribute": self.attribute}
        origin = typing.get_origin(self.type)

        if origin in (list, tuple):
            arguments = typing.get_args(self.type)
            if origin is tuple and not (len(arguments) == 2 and arguments[1] is Ellipsis):
                raise TypeError("only homogeneous tuple[T, ...] bindings are supported, not %r" % self.type)
            element = arguments[0] if arguments else typing.Any
            values = value if isinstance(value, list | tuple) else [value]
            return origin(_coerce(item, element, **context) for item in values)

        if self.type in (list, tuple):
            return self.type(value if isinstance(value, list | tuple) else [value])

        if isinstance(self.type, types.UnionType) or origin is typing.Union:
            for option in typing.get_args(self.type):
                try:
                    return Binding(self.argument, self.target, self.attribute, option).convert(value)
                except TypeMismatchError:
                    continue
            return _coerce(value, self.type, **context)

        return _coerce(value, self.type, **context)

    def apply(self, namespace, /):
        try:
            value = namespace[self.argument.dest]
        except KeyError:
            raise UnboundValueError(
                "unable to get value for argument %r" % self.argument.dest,
                hint="give %r a default or make it required" % self.argument.display,
                argument=self.argument,
                attribute=self.attribute,
            ) from None
        setattr(self.target, self.attribute, value := self.convert(value))
        logger.debug("bound %r to %s.%s", value, type(self.target).__name__, self.attribute)


__all__ = (
    "Binding",
)
