__title__ = 'argstream'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
__version__ = "0.1.0"

import logging

from . import converters
from . import debug
from .actions import *
from .arguments import *
from .binding import *
from .choices import *
from .faults import *
from .namespace import *
from .parser import *
from .parsing import *
from .registry import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "converters",
    "debug",
)

# Load the exposed API of the actions
__all__ += actions.__all__  # type: ignore[attr-defined]
# Load the exposed API of the arguments
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the bindings
__all__ += binding.__all__  # type: ignore[attr-defined]
# Load the exposed API of the choices
__all__ += choices.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the namespace
__all__ += namespace.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parsing engine
__all__ += parsing.__all__  # type: ignore[attr-defined]
# Load the exposed API of the registry
__all__ += registry.__all__  # type: ignore[attr-defined]
