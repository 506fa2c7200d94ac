"""Separator normalization and extension helpers."""

from typing import List

# Characters accepted as directory separators on input
SEPARATORS = ('\\', '/')


class PathUtils:
    """Separator-aware string helpers shared by the resolver and converters."""

    @staticmethod
    def normalize_separators(path: str, ensure_trailing: bool = False, separator: str = '/') -> str:
        """
        Convert every forward slash and backslash to a single separator.

        Args:
            path: File path with potentially mixed separators
            ensure_trailing: Append a separator if the result lacks one
            separator: Canonical separator character

        Returns:
            Path using only the canonical separator
        """
        for candidate in SEPARATORS:
            if candidate != separator:
                path = path.replace(candidate, separator)

        if ensure_trailing and not path.endswith(separator):
            path += separator

        return path

    @staticmethod
    def collapse_separators(path: str, separator: str = '/') -> str:
        """Replace runs of consecutive separators with a single one."""
        doubled = separator * 2
        while doubled in path:
            path = path.replace(doubled, separator)
        return path

    @staticmethod
    def normalize_and_split(path: str, separator: str = '/') -> List[str]:
        """
        Normalize path and split into components.

        Args:
            path: File path to split
            separator: Canonical separator character

        Returns:
            List of path components
        """
        return PathUtils.normalize_separators(path, separator=separator).split(separator)

    @staticmethod
    def join_path_components(components: List[str], separator: str = '/') -> str:
        """Join path components with the separator."""
        return separator.join(components)

    @staticmethod
    def basename(path: str) -> str:
        """Return the last segment of a path, whatever separator it uses."""
        for candidate in SEPARATORS:
            path = path.rpartition(candidate)[2]
        return path

    @staticmethod
    def strip_extension(path: str) -> str:
        """
        Strip the extension from the last segment if it has one.

        Dots in directory names are left alone, so ``v1.2/readme`` is
        returned unchanged.
        """
        name = PathUtils.basename(path)
        if '.' not in name:
            return path

        return path[:len(path) - len(name)] + name.rpartition('.')[0]

    @staticmethod
    def extension(path: str) -> str:
        """Return the lowercased extension of the last segment, or an empty string."""
        name = PathUtils.basename(path)
        if '.' not in name:
            return ''

        return name.rpartition('.')[2].lower()
