"""
Lexical path resolution.

PathResolver is the public facade of pathinflect. It joins path fragments
while flattening "." and ".." segments, computes relative paths between two
absolute paths and delegates namespace conversion to NamespaceConverter.
Nothing here touches the file system.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence, Union

from .exceptions import InvalidArgumentError, InvalidTypeError
from .models import Config
from ..utils.namespace import NamespaceConverter
from ..utils.path_utils import PathUtils

# Set up module logger
logger = logging.getLogger(__name__)

DRIVE_PATTERN = re.compile(r'^[a-zA-Z]:')

CURRENT_DIR = '.'
PARENT_DIR = '..'


class PathResolver:
    """Resolves and converts paths using a fixed Config."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the resolver.

        Args:
            config: Separator settings. If None, a default Config is built
                from the environment.
        """
        self.config = config or Config()
        self.namespaces = NamespaceConverter(self.config)

    @property
    def separator(self) -> str:
        return self.config.separator

    def normalize_separators(self, path: str, ensure_trailing: bool = False) -> str:
        """Convert OS directory separators to the configured separator."""
        return PathUtils.normalize_separators(path, ensure_trailing, self.separator)

    ds = normalize_separators

    def is_absolute(self, path: str) -> bool:
        """
        Verify a path is absolute by checking its first character.

        The empty string is treated as relative.
        """
        if not path:
            return False
        return path[0] in ('/', '\\') or DRIVE_PATTERN.match(path) is not None

    def is_relative(self, path: str) -> bool:
        """Verify a path is relative."""
        return not self.is_absolute(path)

    def join(
        self,
        parts: Iterable[str],
        allow_above_root: bool = True,
        join_result: bool = True
    ) -> Union[str, List[str]]:
        """
        Join path fragments and resolve "." and ".." segments.

        Fragments may themselves contain separators. Leading and trailing
        separators are dropped, so the result is always relative.

        Args:
            parts: Path fragments, each a string.
            allow_above_root: Keep ".." segments that climb above the first
                fragment instead of discarding them.
            join_result: Return a joined string rather than a segment list.

        Returns:
            Normalized path string, or its list of segments.

        Raises:
            InvalidTypeError: If any fragment is not a string.
        """
        sep = self.separator
        clean: List[str] = []

        # First pass expands sub-paths
        for part in parts:
            if not isinstance(part, str):
                raise InvalidTypeError("Path parts must be strings")

            clean.extend(self.normalize_separators(part).strip(sep).split(sep))

        # Second pass flattens dot paths, right to left
        segments: List[str] = []
        up = 0

        for segment in reversed(clean):
            if segment == CURRENT_DIR or not segment:
                continue
            elif segment == PARENT_DIR:
                up += 1
            elif up:
                up -= 1
            else:
                segments.append(segment)

        if up:
            if allow_above_root:
                segments.extend([PARENT_DIR] * up)
            else:
                logger.debug(f"Dropped {up} segment(s) above the root of {clean}")

        segments.reverse()

        if join_result:
            return sep.join(segments)

        return segments

    def relative_to(self, from_path: str, to_path: str) -> str:
        """
        Determine the relative path between two absolute paths.

        Both paths are treated as directories: the result leads from the
        directory ``from_path`` to the directory ``to_path`` and keeps a
        trailing separator when it descends.

        Args:
            from_path: Absolute starting path.
            to_path: Absolute target path.

        Returns:
            Relative path such as ``./``, ``../`` or ``../../lib/``.

        Raises:
            InvalidArgumentError: If either path is not absolute.
        """
        if self.is_relative(from_path) or self.is_relative(to_path):
            raise InvalidArgumentError("Cannot determine relative path without two absolute paths")

        sep = self.separator
        source = self._canonical_directory(from_path).split(sep)
        target = self._canonical_directory(to_path).split(sep)
        relative = list(target)

        for depth, directory in enumerate(source):
            # Shared ancestor, drop it from the result
            if depth < len(target) and directory == target[depth]:
                relative.pop(0)
                continue

            remaining = len(source) - depth
            logger.debug(f"Paths diverge at depth {depth} with {remaining} segment(s) remaining")

            # Climb up to the common ancestor
            if remaining > 1:
                relative = [PARENT_DIR] * (remaining - 1) + relative
            elif relative:
                relative[0] = CURRENT_DIR + sep + relative[0]
            break

        if not relative:
            return CURRENT_DIR + sep

        return sep.join(relative)

    def _canonical_directory(self, path: str) -> str:
        path = self.normalize_separators(path, ensure_trailing=True)
        return PathUtils.collapse_separators(path, self.separator)

    def strip_extension(self, path: str) -> str:
        """Strip off the extension if it exists."""
        return PathUtils.strip_extension(path)

    def extension(self, path: str) -> str:
        """Return the lowercased extension from a file path."""
        return PathUtils.extension(path)

    def include_path(self, paths: Union[str, Sequence[str]], current: str = '') -> str:
        """
        Build a search path string from one or more paths.

        Args:
            paths: A path or list of paths to append.
            current: Existing search path to extend.

        Returns:
            The paths joined with the configured delimiter.
        """
        entries = [current] if current else []

        if isinstance(paths, str):
            entries.append(paths)
        else:
            entries.extend(paths)

        return self.config.delimiter.join(entries)

    def to_namespace(self, path: str) -> str:
        """Convert a path to a namespace name."""
        return self.namespaces.to_namespace(path)

    def to_path(self, name: str, ext: str = '', root: str = '') -> str:
        """Convert a namespace name to a file path."""
        return self.namespaces.to_path(name, ext, root)

    def class_name(self, name: str, separator: Optional[str] = None) -> str:
        """Return the last segment of a namespace name."""
        return self.namespaces.class_name(name, separator)

    def package_name(self, name: str, separator: Optional[str] = None) -> str:
        """Return every segment but the last of a namespace name."""
        return self.namespaces.package_name(name, separator)
