"""
eithr: a symmetric Either type with monadic combinators.

Core type ``Either`` (``Left`` | ``Right``), the ``Option`` and ``Result``
types it converts to and from, and the conversion helpers.
"""

from .config import EithrConfig, configure, get_config, reset_config
from .either import Either, Left, Right, either, left, right
from .exceptions import EithrError, WrongVariantError
from .interop import (
    from_nullable,
    from_optional,
    from_result,
    to_optional_left,
    to_optional_right,
    to_result,
    try_either,
)
from .option import Empty, Option, Some, empty, option_from_nullable, some
from .result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    "EithrConfig",
    "EithrError",
    "Either",
    "Empty",
    "Err",
    "Left",
    "Ok",
    "Option",
    "Result",
    "Right",
    "Some",
    "WrongVariantError",
    "configure",
    "either",
    "empty",
    "from_nullable",
    "from_optional",
    "from_result",
    "get_config",
    "left",
    "option_from_nullable",
    "reset_config",
    "right",
    "some",
    "to_optional_left",
    "to_optional_right",
    "to_result",
    "try_either",
]
