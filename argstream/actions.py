"""
Action dispatch table.

An action decides how freshly converted values are committed into the result
namespace. The table is closed: the four members of Action are the only
actions, each resolved once when an argument is declared, so the engine never
looks an action up by name while parsing.

Members
- STORE: write once; a second write to the same key is AlreadySetError.
  A single value for an exactly-one arity is stored as a scalar,
  anything else as a list.
- STORE_TRUE / STORE_FALSE: presence switches (arity zero). They commit the
  single synthetic value they are handed: the argument's const on presence,
  its default during the resolution pass.
- APPEND: accumulate into a list across occurrences.
"""
import logging
from enum import Enum

from .faults import AlreadySetError, DeclarationError
from .namespace import Namespace

logger = logging.getLogger(__name__)


def _store(argument, namespace, values, /):
    if argument.dest in namespace:
        raise AlreadySetError(
            "argument %r already set to %r" % (argument.dest, namespace[argument.dest]),
            hint="pass %r only once" % argument.display,
            argument=argument,
            value=namespace[argument.dest],
        )
    if argument.nargs == 1 and len(values) == 1:
        Namespace.assign(namespace, argument, values[0])
    else:
        Namespace.assign(namespace, argument, list(values))


def _store_constant(argument, namespace, values, /):
    if len(values) != 1:
        raise TypeError(
            "argument %r expects exactly one synthetic value but got %d" % (argument.dest, len(values))
        )
    Namespace.assign(namespace, argument, values[0])


def _append(argument, namespace, values, /):
    Namespace.extend(namespace, argument, *values)


class Action(Enum):
    STORE = "store"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    APPEND = "append"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower().replace("-", "_"):
                    return member
        return None

    @classmethod
    def resolve(cls, action, /):
        """
        Map an Action or an action name ("store", "store-true", ...) to a member.
        """
        try:
            return cls(action)
        except ValueError:
            raise DeclarationError(
                "unrecognized action %r" % (action,),
                hint="use one of: %s" % " · ".join(member.value for member in cls),
            ) from None

    def __call__(self, argument, namespace, values, /):
        logger.debug("dispatch %s for %r with %r", self.value, argument.dest, values)
        return _HANDLERS[self](argument, namespace, values)


_HANDLERS = {
    Action.STORE: _store,
    Action.STORE_TRUE: _store_constant,
    Action.STORE_FALSE: _store_constant,
    Action.APPEND: _append,
}


__all__ = (
    "Action",
)
