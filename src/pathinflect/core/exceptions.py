"""Exception types raised by pathinflect."""


class PathInflectError(Exception):
    """Base class for all pathinflect errors."""


class InvalidTypeError(PathInflectError, TypeError):
    """A value expected to be a string was something else."""


class InvalidArgumentError(PathInflectError, ValueError):
    """A precondition on the form of a path was violated."""
