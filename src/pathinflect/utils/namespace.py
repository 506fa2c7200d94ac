"""
Conversion between file-system paths and namespace names.

A namespace name is a hierarchical identifier such as ``Foo.Bar.Baz`` whose
segments are delimited by the configured package separator instead of the
directory separator.
"""

import logging
from typing import Optional

from ..core.models import Config
from .path_utils import PathUtils

# Set up module logger
logger = logging.getLogger(__name__)


class NamespaceConverter:
    """Translates between path notation and namespace notation."""

    def __init__(self, config: Config):
        self.config = config

    def to_namespace(self, path: str) -> str:
        """
        Convert a file path to a namespace name.

        Everything up to and including a source folder (``lib``, ``src`` by
        default) is discarded, so ``/app/src/Foo/Bar.php`` becomes
        ``Foo.Bar``.

        Args:
            path: File path, relative or absolute.

        Returns:
            Namespace name delimited by the package separator.
        """
        sep = self.config.separator
        package = self.config.package

        path = PathUtils.normalize_separators(PathUtils.strip_extension(path), separator=sep)
        path = PathUtils.collapse_separators(path, sep)
        segments = path.split(sep)

        # Attempt to split path at source folder
        for folder in self.config.source_folders:
            if folder in segments[:-1]:
                segments = segments[segments.index(folder) + 1:]
                logger.debug(f"Collapsed source folder '{folder}' in {path}")

        return package.join(segments).strip(package)

    def to_path(self, name: str, ext: str = '', root: str = '') -> str:
        """
        Convert a namespace name to a relative or absolute file path.

        Underscores in the last segment are treated as further nesting, so
        ``Foo.Bar_Baz`` maps to ``Foo/Bar/Baz``.

        Args:
            name: Namespace name. Slashes are accepted between segments,
                but every package separator becomes a directory, so file
                extensions must match ``ext`` to be kept.
            ext: Extension to append unless the name already carries it,
                with or without its leading dot.
            root: Directory to prefix the resulting path with.

        Returns:
            File path using the configured separator.
        """
        sep = self.config.separator
        ext = ext.lstrip('.')
        suffix = f".{ext}" if ext else ''

        if suffix and name.endswith(suffix):
            name = name[:-len(suffix)]

        path = PathUtils.normalize_separators(name.replace(self.config.package, sep), separator=sep)
        dirs = path.split(sep)
        file_name = dirs.pop()
        path = sep.join(dirs + [file_name.replace('_', sep)]) + suffix

        if root:
            path = PathUtils.normalize_separators(root, ensure_trailing=True, separator=sep) + path.lstrip(sep)

        return path

    def class_name(self, name: str, separator: Optional[str] = None) -> str:
        """Strip the package to return the base name of a namespace name."""
        separator = separator or self.config.package
        return name.rstrip(separator).rpartition(separator)[2]

    def package_name(self, name: str, separator: Optional[str] = None) -> str:
        """Return the package of a namespace name without its base name."""
        separator = separator or self.config.package
        return name.rstrip(separator).rpartition(separator)[0].strip(separator)
