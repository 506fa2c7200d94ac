"""Inflect between file-system paths, namespace names and normalized paths."""

from .core import (
    Config,
    InvalidArgumentError,
    InvalidTypeError,
    PathInflectError,
    PathResolver,
)

__version__ = "1.0.0"

__all__ = [
    "Config",
    "InvalidArgumentError",
    "InvalidTypeError",
    "PathInflectError",
    "PathResolver",
    "__version__",
]
