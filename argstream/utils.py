"""
Argstream utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the argument model, the registry and the
  parsing engine. Stable enough for consumers, designed primarily to support
  the higher-level layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr); mutable
    containers are handed out as detached copies.

- derive_dest(strings)
  • Default result-mapping key for an argument: the longest alphanumeric
    concatenation among its match strings, case preserved.

- ordinal(number)
  • Human-friendly ordinal label for position-first fault messages.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> derive_dest(("-n", "--dry-run"))
    'dryrun'
    >>> ordinal(3)
    'third'
"""
import builtins
import copy
import functools
import re
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    This is used when None is a legitimate user value (a default of None, a
    const of None), but the API needs a way to distinguish “not provided”
    from “provided as None”. A single instance, Unset, is exposed for use as
    the default in keyword parameters.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Returns the given object unless it is Unset, in which case the provided
    default is returned. Falsey values like None, 0, "" or [] are preserved
    as-is; they are not treated as “unset”.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (updated in place)
    - rename(name)           -> decorator

    Raises
    - TypeError on a non-callable target, a non-string name, a callable that
      refuses attribute updates, or a wrong number of arguments.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    """
    Return a shallow copy of mutable builtin containers (list, dict, set,
    bytearray) so callers cannot mutate the backing field; immutable values
    and everything else are returned as-is. The container type is preserved.
    """
    if isinstance(object, list | dict | set | bytearray):
        return copy.copy(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" on the instance and hands out a
    detached copy of mutable containers, so the public surface of an argument
    cannot be mutated once it is declared.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


def derive_dest(strings, /):
    """
    Derive the default result-mapping key from match strings.

    Each string is reduced to the concatenation of its [0-9A-Za-z] runs
    ("--dry-run" → "dryrun"); the longest reduction wins and the first one
    wins on ties. Case is preserved. Returns "" when no string carries an
    alphanumeric character.
    """
    dest = ""
    for string in strings:
        if len(full := "".join(re.findall(r"[0-9A-Za-z]+", string))) > len(dest):
            dest = full
    return dest


def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth").
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, …)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f'{number}%s' % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
    "derive_dest",
    "ordinal",
)
