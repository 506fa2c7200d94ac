import os

import pytest
from pathinflect.core.exceptions import InvalidArgumentError
from pathinflect.core.models import Config


class TestConfig:
    def test_default_config(self, clean_env):
        config = Config()
        assert config.separator == os.sep
        assert config.package == "."
        assert config.delimiter == os.pathsep
        assert config.source_folders == ["lib", "src"]

    def test_custom_config(self):
        config = Config(separator="\\", package=":", delimiter=";", source_folders=["app"])
        assert config.separator == "\\"
        assert config.package == ":"
        assert config.delimiter == ";"
        assert config.source_folders == ["app"]

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("PATHINFLECT_SEPARATOR", "\\")
        clean_env.setenv("PATHINFLECT_PACKAGE", "/")
        clean_env.setenv("PATHINFLECT_SOURCE_FOLDERS", "app, lib ,")
        config = Config()
        assert config.separator == "\\"
        assert config.package == "/"
        assert config.source_folders == ["app", "lib"]

    def test_empty_source_folders_env_falls_back(self, clean_env):
        clean_env.setenv("PATHINFLECT_SOURCE_FOLDERS", " , ")
        assert Config().source_folders == ["lib", "src"]

    @pytest.mark.parametrize("field_name,value", [
        ("separator", "//"),
        ("separator", ""),
        ("package", "::"),
        ("delimiter", ""),
    ])
    def test_separators_must_be_single_characters(self, field_name, value):
        with pytest.raises(InvalidArgumentError, match=field_name):
            Config(**{"separator": "/", "package": ".", field_name: value})

    def test_package_must_differ_from_separator(self):
        with pytest.raises(InvalidArgumentError, match="must differ"):
            Config(separator="/", package="/")
