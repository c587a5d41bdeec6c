r"""
Argstream argument specifications.

Overview
- Argument[_T]: one declared parameter, either named (every match string
  starts with "-", e.g. -o/--output) or positional (no match string does,
  e.g. "files"). Classification is derived from the match strings, never
  stored, and mixing both kinds in one declaration is an error.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes
    the fields listed in __introspectable__ as read-only properties.

Metadata (sanitized on construction)
- strings: non-empty match strings, unique within the declaration.
- action: Action member or name ("store", "store_true", "store_false", "append").
- nargs: "?" | "*" | "+" | int (>= 0). Defaults per action:
  store → 1, append → "+", store_true/store_false → 0.
- type: converter callable (str → value), defaults to converters.string.
- choices: Choices | Mapping[label, value] | Iterable[value]; when present the
  token must equal a label and the converter is not called.
- default / const: any value; None means “not declared”.
  store_true implies const=True, default=False; store_false the opposite.
- dest: result key, defaults to the longest alphanumeric reduction of the
  match strings (derive_dest).
- metavar: display label(s); defaults to dest.upper() (repeated for fixed
  arities above one) when the argument takes values and has no choices.
- required: named arguments only; positionals are required when their arity
  demands at least one token.
- help: free-form description for the help renderer.

Validation highlights (all raise DeclarationError)
- Missing, non-string, empty, duplicated, or mixed-kind match strings.
- Invalid nargs, non-callable type, unknown action.
- metavar together with choices.
- required on a positional argument.
- store_true/store_false with a non-zero arity; zero arity store/append without const.

Quick example:
    >>> from argstream.arguments import Argument
    >>> count = Argument("-c", "--count", type=int, default=1)
    >>> count.dest, count.nargs, count.named
    ('count', 1, True)
    >>> Argument("files", nargs="+").required
    True
"""
import builtins
import functools
import logging
import operator
import re
from collections.abc import Iterable

from .actions import Action
from .choices import Choices
from .converters import string
from .faults import DeclarationError
from .utils import *

logger = logging.getLogger(__name__)


class ArgumentType(type):
    """
    Metaclass that turns specs into introspectable, read-only descriptors.

    Responsibilities
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and help output.
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - argument(strings=('-v', '--verbose'), dest='verbose', ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield a sequence of (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_strings(cls, metadata, /):
    """
    Internal: validate match strings and reject mixed classification.

    Every string must be a non-empty str and unique within the declaration.
    Either all strings carry the leading "-" marker (named) or none does
    (positional).
    """
    if not (strings := metadata["strings"]):
        raise DeclarationError(f"{cls.__typename__} must specify at least one match string")

    seen = []
    for string in strings:
        if not isinstance(string, str):
            raise DeclarationError(f"{cls.__typename__} match strings must be strings, not {type(string).__name__!r}")
        if not string:
            raise DeclarationError(f"{cls.__typename__} match strings cannot be empty")
        if string in seen:
            raise DeclarationError(f"{cls.__typename__} match strings cannot contain duplicates ({string!r})")
        seen.append(string)

    if len({string.startswith("-") for string in seen}) > 1:
        raise DeclarationError(
            f"cannot determine if {cls.__typename__} {seen[0]!r} is named or positional",
            hint="prefix every match string with '-' or none of them",
            strings=tuple(seen),
        )
    metadata["strings"] = tuple(seen)


def _sanitize_arity(cls, metadata, /):
    """
    Internal: resolve the action, then validate and default the arity.

    nargs must be Unset | "?" | "*" | "+" | int (>= 0); booleans are not
    integers here. The default arity depends on the resolved action.
    """
    action = metadata["action"] = Action.resolve(coalesce(metadata["action"], Action.STORE))

    match nargs := metadata["nargs"]:
        case UnsetType():
            nargs = {
                Action.STORE: 1,
                Action.APPEND: "+",
                Action.STORE_TRUE: 0,
                Action.STORE_FALSE: 0,
            }[action]
        case "?" | "*" | "+":
            pass
        case bool():
            raise DeclarationError(f"{cls.__typename__} 'nargs' must be '?', '*', '+' or an integer")
        case int() if nargs >= 0:
            pass
        case int():
            raise DeclarationError(f"{nargs} is not a valid number of arguments")
        case _:
            raise DeclarationError(f"{cls.__typename__} 'nargs' must be '?', '*', '+' or an integer")
    metadata["nargs"] = nargs

    if action in (Action.STORE_TRUE, Action.STORE_FALSE):
        if nargs != 0:
            raise DeclarationError(
                f"{cls.__typename__} with action {action.value!r} cannot consume values",
                hint="drop 'nargs' or set it to 0",
            )
        flag = action is Action.STORE_TRUE
        metadata["const"] = coalesce(metadata["const"], flag)
        metadata["default"] = coalesce(metadata["default"], not flag)


def _sanitize_values(cls, metadata, /):
    """
    Internal: validate converter, choices, defaults and the zero-arity contract.
    """
    if not callable(type := coalesce(metadata["type"], string)):
        raise DeclarationError(f"{cls.__typename__} 'type' must be callable")
    metadata["type"] = type

    choices = metadata["choices"]
    metadata["choices"] = Choices.coerce(choices) or None if choices is not Unset and choices is not None else None

    metadata["default"] = coalesce(metadata["default"])
    metadata["const"] = coalesce(metadata["const"])

    if metadata["nargs"] == 0 and metadata["const"] is None:
        raise DeclarationError(
            f"{cls.__typename__} without values needs a 'const' to store",
            hint="set 'const' or use the 'store_true'/'store_false' actions",
        )


def _sanitize_naming(cls, metadata, /):
    """
    Internal: derive dest and metavar, validate required.
    """
    if not isinstance(dest := coalesce(metadata["dest"], derive_dest(metadata["strings"])), str) or not dest:
        raise DeclarationError(
            f"cannot derive a 'dest' for {cls.__typename__} {metadata['strings'][0]!r}",
            hint="set 'dest' explicitly",
        )
    metadata["dest"] = dest

    match metavar := metadata["metavar"]:
        case UnsetType():
            metavar = None
            if metadata["nargs"] != 0 and metadata["choices"] is None:
                count = metadata["nargs"] if isinstance(metadata["nargs"], int) and metadata["nargs"] > 1 else 1
                metavar = (dest.upper(),) * count
        case str() if metavar:
            metavar = (metavar,)
        case Iterable() if not isinstance(metavar, str) and (metavar := tuple(metavar)) and all(
                isinstance(item, str) and item for item in metavar
        ):
            pass
        case _:
            raise DeclarationError(f"{cls.__typename__} 'metavar' must be a non-empty string or strings")
    if metadata["metavar"] is not Unset and metadata["choices"] is not None:
        raise DeclarationError(
            f"{cls.__typename__} cannot have both 'metavar' and 'choices'",
            hint="drop 'metavar'; choices are listed in help instead",
        )
    metadata["metavar"] = metavar

    named = metadata["strings"][0].startswith("-")
    if not named and metadata["required"] is not Unset:
        raise DeclarationError(
            f"'required' is not accepted by positional {cls.__typename__} {dest!r}",
            hint="positional arguments are required unless their arity accepts zero values",
        )
    if named:
        metadata["required"] = bool(coalesce(metadata["required"], False))
    else:
        metadata["required"] = metadata["nargs"] == "+" or (isinstance(metadata["nargs"], int) and metadata["nargs"] > 0)

    if not isinstance(help := coalesce(metadata["help"]), str | None):
        raise DeclarationError(f"{cls.__typename__} 'help' must be a string")
    metadata["help"] = help


class Argument[_T](metaclass=ArgumentType):
    """
    Named or positional argument specification.

    The names listed in __introspectable__ are exposed as read-only attributes
    on instances, mirroring the sanitized metadata values (mutable defaults come
    back as shallow copies).
    """

    __introspectable__ = (
        "strings",
        "dest",
        "action",
        "nargs",
        "type",
        "choices",
        "default",
        "const",
        "metavar",
        "required",
        "help",
    )

    __displayable__ = (
        "strings",
        "dest",
        "action",
        "nargs",
        "default",
        "required",
    )

    def __init__(
            self,
            *strings,
            dest=Unset,
            action=Unset,
            nargs=Unset,
            type=Unset,
            choices=Unset,
            default=Unset,
            const=Unset,
            metavar=Unset,
            required=Unset,
            help=Unset,
    ):
        """
        Construct an argument with the provided metadata.

        All options are collected first and validated together, so their
        order does not matter; every violation raises DeclarationError
        (code INVALID_DECLARATION).
        """
        metadata = {
            "strings": strings,
            "dest": dest,
            "action": action,
            "nargs": nargs,
            "type": type,
            "choices": choices,
            "default": default,
            "const": const,
            "metavar": metavar,
            "required": required,
            "help": help,
        }
        _sanitize_strings(builtins.type(self), metadata)
        _sanitize_arity(builtins.type(self), metadata)
        _sanitize_values(builtins.type(self), metadata)
        _sanitize_naming(builtins.type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        logger.debug("declared %r", self)

    def __setattr__(self, name, value, /):
        if not name.startswith("_") or name.removeprefix("_") in type(self).__introspectable__ and hasattr(self, name):
            raise AttributeError(f"{type(self).__typename__} is read-only")
        object.__setattr__(self, name, value)

    @property
    def named(self):
        """
        True when the argument is matched by name (leading "-" marker).
        """
        return self._strings[0].startswith("-")

    @property
    def display(self):
        """
        Label used in messages: the longest match string for named arguments,
        the dest for positionals.
        """
        if self.named:
            return max(self._strings, key=len)
        return self._dest

    @property
    def shortest(self):
        """
        Shortest match string (first wins on ties), as shown in usage lines.
        """
        return min(self._strings, key=len)


__all__ = (
    "Argument",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ArgumentType
