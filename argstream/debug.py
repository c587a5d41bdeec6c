"""
Console logging for argstream internals.

enable() attaches a rich handler to the package logger so declarations,
dispatches and default resolution show up while developing a command line.
"""
import logging

from rich.logging import RichHandler

from .faults import console


def enable(level=logging.DEBUG, /):
    """
    Route argstream log records to stderr at the given level; return the handler.
    """
    logger = logging.getLogger(__package__)
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            break
    else:
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def disable():
    """
    Detach the handlers installed by enable().
    """
    logger = logging.getLogger(__package__)
    for handler in [handler for handler in logger.handlers if isinstance(handler, RichHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


__all__ = (
    "enable",
    "disable",
)
