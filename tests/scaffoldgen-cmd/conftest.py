"""Shared fixtures for scaffoldgen tests."""

import pytest

from scaffoldgen.config import Config


FULL_ARGS = ["-d", "./project1", "-n", "project1", "-r", "github.com/username/project1"]


@pytest.fixture
def full_config():
    return Config(
        name="project1",
        directory="./project1",
        repository="github.com/username/project1",
        has_static_assets=False,
    )
