from __future__ import annotations

import os

from typing import TYPE_CHECKING

import pytest

from semver_constraints.config import Config
from semver_constraints.version import Version


if TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> Config:
    for env_key in list(os.environ):
        if env_key.startswith("SEMVER_CONSTRAINTS_"):
            monkeypatch.delenv(env_key)

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    mocker.patch("semver_constraints.config.CONFIG_DIR", config_dir)

    return Config.create(reload=True)


@pytest.fixture
def config_dir(config: Config) -> Path:
    from semver_constraints import config as config_module

    path: Path = config_module.CONFIG_DIR
    return path


@pytest.fixture()
def v100() -> Version:
    return Version.parse("1.0.0")


@pytest.fixture()
def v123() -> Version:
    return Version.parse("1.2.3")


@pytest.fixture()
def v150() -> Version:
    return Version.parse("1.5.0")


@pytest.fixture()
def v180() -> Version:
    return Version.parse("1.8.0")


@pytest.fixture()
def v200() -> Version:
    return Version.parse("2.0.0")


@pytest.fixture()
def v250() -> Version:
    return Version.parse("2.5.0")


@pytest.fixture()
def v300() -> Version:
    return Version.parse("3.0.0")


@pytest.fixture()
def v400() -> Version:
    return Version.parse("4.0.0")


@pytest.fixture()
def v450() -> Version:
    return Version.parse("4.5.0")


@pytest.fixture()
def v500() -> Version:
    return Version.parse("5.0.0")


@pytest.fixture()
def v600() -> Version:
    return Version.parse("6.0.0")
