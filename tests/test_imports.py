"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from pathinflect.core import Config, PathResolver, PathInflectError, InvalidTypeError, InvalidArgumentError

    config = Config(separator="/", package=".")
    resolver = PathResolver(config)
    assert resolver.config is config
    assert issubclass(InvalidTypeError, PathInflectError)
    assert issubclass(InvalidArgumentError, PathInflectError)


def test_utils_imports():
    """Test utils module imports."""
    from pathinflect.utils import PathUtils, NamespaceConverter, ConsoleManager, THEMES
    from pathinflect.core import Config

    converter = NamespaceConverter(Config(separator="/", package="."))
    assert hasattr(converter, 'to_namespace')
    assert hasattr(PathUtils, 'normalize_separators')
    assert "manhattan" in THEMES
    assert ConsoleManager(theme="unknown").theme_colors is THEMES["manhattan"]


def test_package_exports():
    import pathinflect

    assert pathinflect.__version__
    assert pathinflect.PathResolver is not None
