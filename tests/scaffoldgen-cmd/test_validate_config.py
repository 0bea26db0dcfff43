"""Unit tests for validate_config()."""

import dataclasses

import pytest

from scaffoldgen.config import Config
from scaffoldgen.validate import validate_config


def _messages(errors):
    return [str(e) for e in errors]


@pytest.mark.unit
class TestValidateConfig:

    def test_returns_no_errors_for_valid_config(self):
        conf = Config(
            name="project1",
            directory="./project1",
            repository="github.com/username/project1",
            has_static_assets=True,
        )
        assert validate_config(conf) == []

    def test_returns_errors_in_field_order_for_empty_config(self):
        assert _messages(validate_config(Config())) == [
            "project name cannot be empty",
            "project directory cannot be empty",
            "project repository url cannot be empty",
        ]

    def test_errors_are_value_errors(self):
        assert all(isinstance(e, ValueError) for e in validate_config(Config()))

    def test_whitespace_only_counts_as_blank(self):
        conf = Config(name="  \t", directory="./project1", repository="github.com/u/p")
        assert _messages(validate_config(conf)) == ["project name cannot be empty"]

    def test_reports_only_missing_fields(self):
        conf = Config(name="project1", directory="./project1")
        assert _messages(validate_config(conf)) == ["project repository url cannot be empty"]

    @pytest.mark.parametrize("has_static_assets", [True, False])
    def test_static_assets_never_affects_validation(self, full_config, has_static_assets):
        conf = dataclasses.replace(full_config, has_static_assets=has_static_assets)
        assert validate_config(conf) == []
        empty = Config(has_static_assets=has_static_assets)
        assert len(validate_config(empty)) == 3


@pytest.mark.unit
class TestConfig:

    def test_is_immutable(self, full_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            full_config.name = "other"

    def test_defaults(self):
        assert Config() == Config("", "", "", False)
