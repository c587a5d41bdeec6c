"""
Result mapping produced by one parse call.

A Namespace maps each argument's dest to its parsed value: a single converted
value, or a list of converted values when the arity is not exactly-one or the
argument accumulates with "append". It is a plain dict (equality, iteration
and printing behave as usual) with a few argument-aware helpers and
attribute-style read access:

    >>> namespace = Namespace(count=3, keys="a")
    >>> namespace.count
    3
    >>> namespace.keys
    'a'

Stored values win over methods on attribute reads, so the helpers and dict
methods are always reached through the class inside the package
(Namespace.assign(namespace, ...), dict.get(self, ...)).

No validation lives here; the action table and the engine enforce every rule.
"""
from .utils import Unset


class Namespace(dict):
    __slots__ = ()

    def __getattribute__(self, name):
        if not name.startswith("_") and dict.__contains__(self, name):
            return dict.__getitem__(self, name)
        return super().__getattribute__(name)

    def __getattr__(self, name):
        raise AttributeError("namespace has no value for %r" % name)

    def __repr__(self):
        return "namespace(%s)" % ", ".join("%s=%r" % item for item in dict.items(self))

    def fetch(self, argument, default=Unset, /):
        """
        Return the value stored for argument; KeyError when absent and no default.
        """
        try:
            return self[argument.dest]
        except KeyError:
            if default is Unset:
                raise
            return default

    def assign(self, argument, value, /):
        self[argument.dest] = value

    def extend(self, argument, /, *values):
        """
        Append values under the argument's key, promoting a scalar to a list.
        """
        existing = dict.get(self, argument.dest, Unset)
        if existing is Unset:
            existing = []
        elif not isinstance(existing, list):
            existing = [existing]
        self[argument.dest] = [*existing, *values]

    def strings(self, argument, /):
        """
        Return the argument's values as a list of strings.

        Raises TypeError when the stored value is not a list or one of its items
        is not a string (e.g., the argument declares a non-string converter).
        """
        values = Namespace.fetch(self, argument)
        if not isinstance(values, list):
            raise TypeError("%r (type: %s) is not a list of strings" % (values, type(values).__name__))
        for index, value in enumerate(values):
            if not isinstance(value, str):
                raise TypeError(
                    "index %d of argument %r is %r (type: %s), not a string"
                    % (index, argument.dest, value, type(value).__name__)
                )
        return list(values)


__all__ = (
    "Namespace",
)
