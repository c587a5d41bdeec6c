"""
Built-in type converters.

A converter is any callable taking the raw token (a string) and returning the
parsed value; it signals failure by raising. The parsing engine wraps every
exception raised by a converter into ConversionFailedError, so converters are
free to raise whatever is natural (ValueError, TypeError, ...).

Plain builtins such as int or float work as converters too; the helpers here
add the stricter behaviours a command line usually wants.
"""
import functools
import math

from .utils import rename


def string(token, /):
    """
    Identity converter (the default): return the token unchanged.
    """
    return token


def boolean(token, /):
    """
    Accept "true"/"false" in any letter case.
    """
    match token.lower():
        case "true":
            return True
        case "false":
            return False
    raise ValueError("expected 'true' or 'false', got %r" % token)


def integer(token, /):
    """
    Parse a base-10 integer (surrounding whitespace and "_" separators are rejected).
    """
    if token != token.strip():
        raise ValueError("integer cannot contain surrounding whitespace: %r" % token)
    if "_" in token:
        raise ValueError("integer cannot contain digit separators: %r" % token)
    return int(token, 10)


def unsigned(token, /):
    """
    Parse a non-negative base-10 integer.
    """
    if (value := integer(token)) < 0:
        raise ValueError("expected a non-negative integer, got %r" % token)
    return value


def floating(token, /):
    """
    Parse a finite floating point number.
    """
    if "_" in token:
        raise ValueError("number cannot contain digit separators: %r" % token)
    if not math.isfinite(value := float(token)):
        raise ValueError("expected a finite number, got %r" % token)
    return value


@functools.cache
def bounded(bits, /, signed=True):
    """
    Build a fixed-width integer converter.

        >>> bounded(8)("127")
        127
        >>> bounded(8, signed=False)("256")
        Traceback (most recent call last):
        ...
        ValueError: 256 does not fit in uint8
    """
    if not isinstance(bits, int) or bits < 1:
        raise ValueError("bounded() bits must be a positive integer")

    lower, upper = (-(1 << bits - 1), (1 << bits - 1) - 1) if signed else (0, (1 << bits) - 1)
    name = ("int%d" if signed else "uint%d") % bits

    @rename(name)
    def converter(token, /):
        if not lower <= (value := integer(token)) <= upper:
            raise ValueError("%d does not fit in %s" % (value, name))
        return value

    return converter


__all__ = (
    "string",
    "boolean",
    "integer",
    "unsigned",
    "floating",
    "bounded",
)
