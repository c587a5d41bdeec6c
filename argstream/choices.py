"""
Closed choice sets for arguments.

A Choices collection keeps an ordered sequence of (label, value) pairs plus an
index by label. When an argument declares choices, a token must equal one of
the labels exactly (case-sensitive) and the parsed value is the associated
value; the argument's type converter is not invoked.

    >>> levels = Choices(Choice("low", 1), Choice("high", 10))
    >>> levels.load("high")
    10
    >>> Choices.of(1, 2, 3).labels
    ('1', '2', '3')
"""
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from .faults import DeclarationError


class Choice(NamedTuple):
    label: str
    value: Any


class Choices:
    """
    Ordered, closed enumeration of choices indexed by label.

    Duplicate labels are rejected with DeclarationError; the collection is
    immutable once built.
    """
    __slots__ = ("_items", "_index")

    def __init__(self, *choices):
        items = []
        index = {}
        for choice in choices:
            if not isinstance(choice, Choice):
                choice = Choice(*choice)
            if not isinstance(choice.label, str):
                raise DeclarationError("choice labels must be strings, not %r" % type(choice.label).__name__)
            if choice.label in index:
                raise DeclarationError(
                    "choices cannot contain duplicated label %r" % choice.label,
                    hint="give every choice a distinct label",
                )
            index[choice.label] = len(items)
            items.append(choice)
        self._items = tuple(items)
        self._index = index

    @classmethod
    def of(cls, *values):
        """
        Build choices from plain values; each label is str(value).
        """
        return cls(*(Choice(value if isinstance(value, str) else str(value), value) for value in values))

    @classmethod
    def coerce(cls, source, /):
        """
        Normalize a user-supplied choice declaration.

        Accepts a Choices (returned as-is), a mapping of label → value, or an
        iterable of plain values.
        """
        if isinstance(source, Choices):
            return source
        if isinstance(source, Mapping):
            return cls(*(Choice(label, value) for label, value in source.items()))
        if isinstance(source, Iterable) and not isinstance(source, str):
            return cls.of(*source)
        raise DeclarationError("choices must be a Choices, a mapping, or an iterable of values")

    @property
    def labels(self):
        return tuple(choice.label for choice in self._items)

    def at(self, index, /):
        """
        Return the Choice at the given index, or None when out of range.
        """
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def load(self, label, /):
        """
        Return the value registered under label; KeyError when absent.
        """
        return self._items[self._index[label]].value

    def __contains__(self, label):
        return label in self._index

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __eq__(self, other):
        if not isinstance(other, Choices):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(self._items)

    def __repr__(self):
        return "choices(%s)" % ", ".join("%s=%r" % choice for choice in self._items)

    def __rich_repr__(self):
        for choice in self._items:
            yield choice.label, choice.value


__all__ = (
    "Choice",
    "Choices",
)
