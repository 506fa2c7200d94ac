"""Utility modules for pathinflect."""

from .path_utils import PathUtils
from .namespace import NamespaceConverter
from .console import ConsoleManager, THEMES

__all__ = ["PathUtils", "NamespaceConverter", "ConsoleManager", "THEMES"]
