import pytest

from pathinflect.core.models import Config
from pathinflect.core.resolver import PathResolver


@pytest.fixture
def config():
    """POSIX-style configuration independent of the host platform."""
    return Config(separator='/', package='.', delimiter=':', source_folders=['lib', 'src'])


@pytest.fixture
def resolver(config):
    return PathResolver(config)


@pytest.fixture
def windows_resolver():
    """Resolver producing backslash-separated paths."""
    return PathResolver(Config(separator='\\', package='.', delimiter=';', source_folders=['lib', 'src']))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove pathinflect settings from the environment."""
    for name in ('PATHINFLECT_SEPARATOR', 'PATHINFLECT_PACKAGE',
                 'PATHINFLECT_DELIMITER', 'PATHINFLECT_SOURCE_FOLDERS'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
