"""
Argstream faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain (declaration, parsing, binding) to keep copy
  consistent and make logs/searches predictable.
- ArgumentException: base type that carries message + options and knows how
  to render itself in a friendly, lowercased, and actionable way.
- DeclarationError / ParsingError / BindingError: the three families callers
  can tell apart. Parsing faults are fail-fast: the first one aborts the parse
  and no partial namespace is returned.
- trigger(): central entry point to surface a fault (raise, or render and exit
  in shell mode).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: parse faults include the ordinal position of the
  offending token (“at third position”).
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the engine (stable identifiers).

    grouping (by high-level domain)
    - declaration (101xx)
      • INVALID_DECLARATION, DUPLICATE_DECLARATION
    - parsing (111xx)
      • UNEXPECTED_TOKEN, INSUFFICIENT_VALUES, INVALID_CHOICE,
        CONVERSION_FAILED, ALREADY_SET, MISSING_REQUIRED
    - binding (121xx)
      • TYPE_MISMATCH, UNBOUND_VALUE

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- declaration errors (101xx) ---
    INVALID_DECLARATION     = 10101
    DUPLICATE_DECLARATION   = 10102

    # --- parsing errors (111xx) ---
    UNEXPECTED_TOKEN        = 11101
    INSUFFICIENT_VALUES     = 11111
    INVALID_CHOICE          = 11112
    CONVERSION_FAILED       = 11113
    ALREADY_SET             = 11121
    MISSING_REQUIRED        = 11131

    # --- binding errors (121xx) ---
    TYPE_MISMATCH           = 12101
    UNBOUND_VALUE           = 12102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentException(Exception):
    """
    base fault: a message plus read-only options.

    options
    - title, code, hint: presentation (class defaults, overridable per raise).
    - token, index, argument, exception, ...: context for callers and renderers.
    - prog, shell, fancy, colorful: runtime flags merged in by trigger().
    """
    title = "argument error"
    code = FaultCode.INVALID_DECLARATION

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType({"title": type(self).title, "code": type(self).code} | options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(
            self.options.get("prog") or getattr(main, "__prog__", os.path.basename(sys.argv[0])),
            styler("prog-name")
        )

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.options["code"].normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from self.__cause__
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        replaced = type(self)(self.message, **{**self.options, **overrides})
        replaced.__cause__ = self.__cause__
        return replaced


class DeclarationError(ArgumentException):
    title = "invalid declaration"
    code = FaultCode.INVALID_DECLARATION


class ParsingError(ArgumentException):
    title = "parsing error"
    code = FaultCode.UNEXPECTED_TOKEN


class UnexpectedTokenError(ParsingError):
    title = "unexpected token"
    code = FaultCode.UNEXPECTED_TOKEN


class InsufficientValuesError(ParsingError):
    title = "not enough values"
    code = FaultCode.INSUFFICIENT_VALUES


class InvalidChoiceError(ParsingError):
    title = "invalid choice"
    code = FaultCode.INVALID_CHOICE


class ConversionFailedError(ParsingError):
    title = "conversion error"
    code = FaultCode.CONVERSION_FAILED


class AlreadySetError(ParsingError):
    title = "value already set"
    code = FaultCode.ALREADY_SET


class MissingRequiredError(ParsingError):
    title = "missing required argument"
    code = FaultCode.MISSING_REQUIRED


class BindingError(ArgumentException):
    title = "binding error"
    code = FaultCode.TYPE_MISMATCH


class TypeMismatchError(BindingError):
    title = "type mismatch"
    code = FaultCode.TYPE_MISMATCH


class UnboundValueError(BindingError):
    title = "unbound value"
    code = FaultCode.UNBOUND_VALUE


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console and the process exits;
      otherwise, the fault is raised.

    typical options
    - prog, shell, fancy, colorful.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ArgumentException",
    "DeclarationError",
    "ParsingError",
    "UnexpectedTokenError",
    "InsufficientValuesError",
    "InvalidChoiceError",
    "ConversionFailedError",
    "AlreadySetError",
    "MissingRequiredError",
    "BindingError",
    "TypeMismatchError",
    "UnboundValueError",
    "trigger",
    "getdoc",
)
