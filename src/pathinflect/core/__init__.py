"""Core components for pathinflect."""

from .exceptions import PathInflectError, InvalidTypeError, InvalidArgumentError
from .models import Config
from .resolver import PathResolver

__all__ = [
    "PathInflectError",
    "InvalidTypeError",
    "InvalidArgumentError",
    "Config",
    "PathResolver",
]
