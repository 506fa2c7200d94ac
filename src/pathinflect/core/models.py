"""
Core data models for pathinflect.

The only model is the resolver configuration: the separator characters and
the conventional source folders used when turning paths into namespaces.
"""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

from .exceptions import InvalidArgumentError

# Load environment variables from .env file
load_dotenv()


def _source_folders_from_env() -> List[str]:
    raw = os.getenv('PATHINFLECT_SOURCE_FOLDERS', '')
    folders = [folder.strip() for folder in raw.split(',') if folder.strip()]
    return folders or ['lib', 'src']


@dataclass
class Config:
    """Configuration settings for pathinflect."""

    # Directory separator used for every path produced
    separator: str = field(default_factory=lambda: os.getenv('PATHINFLECT_SEPARATOR', os.sep))

    # Namespace package separator
    package: str = field(default_factory=lambda: os.getenv('PATHINFLECT_PACKAGE', '.'))

    # Search path delimiter
    delimiter: str = field(default_factory=lambda: os.getenv('PATHINFLECT_DELIMITER', os.pathsep))

    # Folders that mark the root of a source tree, checked in order
    source_folders: List[str] = field(default_factory=_source_folders_from_env)

    def __post_init__(self):
        """Validate separator settings."""
        for name in ('separator', 'package', 'delimiter'):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise InvalidArgumentError(f"{name} must be a single character, got {value!r}")

        if self.package == self.separator:
            raise InvalidArgumentError("Package separator must differ from the path separator")
