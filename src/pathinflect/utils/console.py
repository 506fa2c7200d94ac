"""Console output for the pathinflect command line.

Results are printed plainly so they can be piped into other tools; status
and error lines use the theme styles.
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    dim: str


# Define terminal themes
THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        dim='green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        path='wheat1',
        dim='grey50',
    ),
}


class ConsoleManager:
    """Rich console bound to one of the THEMES."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=bool(os.environ.get('NO_COLOR')),
            highlight=False,
            emoji=False,
            soft_wrap=True
        )

    def _create_rich_theme(self) -> Theme:
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'path': colors.path,
            'dim': colors.dim,
        })

    def print(self, *args, **kwargs) -> None:
        self.console.print(*args, **kwargs)

    def print_result(self, value: Any) -> None:
        """Print a command result without markup interpretation."""
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        self.console.print(str(value), style="path", markup=False)

    def print_error(self, message: str) -> None:
        self.console.print(f"[error]> ERROR:[/error] {escape(message)}")

    def print_exception(self) -> None:
        self.console.print_exception()
