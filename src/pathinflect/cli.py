"""Command-line interface for pathinflect."""
import sys
import logging
from typing import Any, Callable, Optional, Tuple

import click
from . import __version__
from .core.exceptions import PathInflectError
from .core.models import Config
from .core.resolver import PathResolver
from .utils.console import ConsoleManager, THEMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _run(ctx: click.Context, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Run a resolver operation and print its result, exiting 1 on failure."""
    console: ConsoleManager = ctx.obj['console']
    try:
        console.print_result(operation(*args, **kwargs))
    except PathInflectError as e:
        console.print_error(str(e))
        if ctx.obj['debug']:
            console.print_exception()
        sys.exit(1)


@click.group()
@click.option('--separator', '-s', help='Directory separator (default: OS separator)')
@click.option('--package', '-p', help='Namespace package separator (default: ".")')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name='pathinflect')
@click.pass_context
def main(ctx: click.Context, separator: Optional[str], package: Optional[str],
         theme: str, debug: bool) -> None:
    """
    Convert between file paths, namespace names and normalized paths.

    Examples:

        pathinflect join a/b ../c

        pathinflect relative /var/www/app /var/www/lib

        pathinflect namespace src/Foo/Bar.php
    """
    console = ConsoleManager(theme=theme)
    setup_logging(debug)

    overrides = {}
    if separator:
        overrides['separator'] = separator
    if package:
        overrides['package'] = package

    try:
        config = Config(**overrides)
    except PathInflectError as e:
        console.print_error(str(e))
        sys.exit(1)

    ctx.obj = {
        'console': console,
        'debug': debug,
        'resolver': PathResolver(config),
    }


@main.command()
@click.argument('path')
@click.option('--trailing', is_flag=True, help='Ensure the path ends with a separator')
@click.pass_context
def ds(ctx: click.Context, path: str, trailing: bool) -> None:
    """Normalize the directory separators of PATH."""
    _run(ctx, ctx.obj['resolver'].normalize_separators, path, trailing)


@main.command()
@click.argument('parts', nargs=-1, required=True)
@click.option('--no-above', is_flag=True, help='Drop ".." segments that climb above the first part')
@click.pass_context
def join(ctx: click.Context, parts: Tuple[str, ...], no_above: bool) -> None:
    """Join PARTS and resolve "." and ".." segments."""
    _run(ctx, ctx.obj['resolver'].join, list(parts), allow_above_root=not no_above)


@main.command()
@click.argument('from_path', metavar='FROM')
@click.argument('to_path', metavar='TO')
@click.pass_context
def relative(ctx: click.Context, from_path: str, to_path: str) -> None:
    """Print the relative path from FROM to TO (both absolute)."""
    _run(ctx, ctx.obj['resolver'].relative_to, from_path, to_path)


@main.command('is-absolute')
@click.argument('path')
@click.pass_context
def is_absolute(ctx: click.Context, path: str) -> None:
    """Print whether PATH is absolute."""
    _run(ctx, ctx.obj['resolver'].is_absolute, path)


@main.command()
@click.argument('path')
@click.pass_context
def ext(ctx: click.Context, path: str) -> None:
    """Print the lowercased extension of PATH."""
    _run(ctx, ctx.obj['resolver'].extension, path)


@main.command('strip-ext')
@click.argument('path')
@click.pass_context
def strip_ext(ctx: click.Context, path: str) -> None:
    """Print PATH without its extension."""
    _run(ctx, ctx.obj['resolver'].strip_extension, path)


@main.command()
@click.argument('path')
@click.pass_context
def namespace(ctx: click.Context, path: str) -> None:
    """Convert the file PATH to a namespace name."""
    _run(ctx, ctx.obj['resolver'].to_namespace, path)


@main.command('to-path')
@click.argument('name')
@click.option('--ext', '-e', 'extension', default='', help='Extension to append')
@click.option('--root', '-r', default='', help='Root directory to prefix')
@click.pass_context
def to_path(ctx: click.Context, name: str, extension: str, root: str) -> None:
    """Convert the namespace NAME to a file path."""
    _run(ctx, ctx.obj['resolver'].to_path, name, extension, root)


@main.command('class-name')
@click.argument('name')
@click.pass_context
def class_name(ctx: click.Context, name: str) -> None:
    """Print the last segment of the namespace NAME."""
    _run(ctx, ctx.obj['resolver'].class_name, name)


@main.command('package-name')
@click.argument('name')
@click.pass_context
def package_name(ctx: click.Context, name: str) -> None:
    """Print the namespace NAME without its last segment."""
    _run(ctx, ctx.obj['resolver'].package_name, name)


@main.command('include-path')
@click.argument('paths', nargs=-1, required=True)
@click.option('--current', '-c', default='', help='Existing search path to extend')
@click.pass_context
def include_path(ctx: click.Context, paths: Tuple[str, ...], current: str) -> None:
    """Join PATHS into a search path string."""
    _run(ctx, ctx.obj['resolver'].include_path, list(paths), current)


if __name__ == '__main__':
    main()
