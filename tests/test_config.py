from __future__ import annotations

import logging

from typing import TYPE_CHECKING

import pytest

from semver_constraints.config import Config
from semver_constraints.config import boolean_normalizer
from semver_constraints.config import error_reporting_normalizer
from semver_constraints.exceptions import ConfigError


if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("name", "value"),
    [("prereleases.allow-in-range", False), ("union.error-reporting", "aggregate")],
)
def test_config_get_default_value(config: Config, name: str, value: object) -> None:
    assert config.get(name) == value


def test_config_get_unknown_setting(config: Config) -> None:
    assert config.get("unknown.setting") is None
    assert config.get("unknown.setting", "fallback") == "fallback"


def test_config_properties(config: Config) -> None:
    assert config.allow_prereleases is False
    assert config.union_error_reporting == "aggregate"


def test_config_all(config: Config) -> None:
    assert config.all() == {
        "prereleases": {"allow-in-range": False},
        "union": {"error-reporting": "aggregate"},
    }


def test_config_merge(config: Config) -> None:
    config.merge({"prereleases": {"allow-in-range": True}})

    assert config.allow_prereleases is True
    assert config.union_error_reporting == "aggregate"


@pytest.mark.parametrize(
    ("env_value", "value"),
    [("true", True), ("1", True), ("TRUE", True), ("false", False), ("0", False)],
)
def test_config_get_from_environment_variable(
    config: Config, monkeypatch: pytest.MonkeyPatch, env_value: str, value: bool
) -> None:
    monkeypatch.setenv("SEMVER_CONSTRAINTS_PRERELEASES_ALLOW_IN_RANGE", env_value)

    assert config.get("prereleases.allow-in-range") is value


def test_config_environment_overrides_file_values(
    config: Config, monkeypatch: pytest.MonkeyPatch
) -> None:
    config.merge({"union": {"error-reporting": "aggregate"}})
    monkeypatch.setenv("SEMVER_CONSTRAINTS_UNION_ERROR_REPORTING", "Last")

    assert config.union_error_reporting == "last"


def test_config_ignores_environment_when_disabled(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SEMVER_CONSTRAINTS_PRERELEASES_ALLOW_IN_RANGE", "true")

    assert Config(use_environment=False).allow_prereleases is False


@pytest.mark.parametrize(
    ("env_var", "env_value"),
    [
        ("SEMVER_CONSTRAINTS_PRERELEASES_ALLOW_IN_RANGE", "yes"),
        ("SEMVER_CONSTRAINTS_UNION_ERROR_REPORTING", "first"),
    ],
)
def test_config_rejects_invalid_environment_values(
    config: Config, monkeypatch: pytest.MonkeyPatch, env_var: str, env_value: str
) -> None:
    monkeypatch.setenv(env_var, env_value)

    with pytest.raises(ConfigError):
        config.all()


def test_normalizers() -> None:
    assert boolean_normalizer("True") is True
    assert boolean_normalizer("0") is False
    assert error_reporting_normalizer(" LAST ") == "last"

    with pytest.raises(ConfigError, match="Invalid boolean value 'maybe'"):
        boolean_normalizer("maybe")

    with pytest.raises(ConfigError, match="expected one of aggregate, last"):
        error_reporting_normalizer("first")


def test_create_reads_config_file(config_dir: Path) -> None:
    config_dir.joinpath("config.toml").write_text(
        """\
[prereleases]
allow-in-range = true

[union]
error-reporting = "last"
""",
        encoding="utf-8",
    )

    config = Config.create(reload=True)

    assert config.allow_prereleases is True
    assert config.union_error_reporting == "last"


def test_create_logs_loaded_config_file(
    config_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_file = config_dir / "config.toml"
    config_file.write_text("[union]\nerror-reporting = 'last'\n", encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger="semver_constraints.config"):
        Config.create(reload=True)

    assert f"Loading configuration file {config_file}" in caplog.text


def test_create_without_config_file(config_dir: Path) -> None:
    assert not config_dir.joinpath("config.toml").exists()

    config = Config.create(reload=True)

    assert config.all() == Config().all()


def test_create_from_another_directory(tmp_path: Path) -> None:
    other = tmp_path / "other"
    other.mkdir()
    other.joinpath("config.toml").write_text(
        "[prereleases]\nallow-in-range = true\n", encoding="utf-8"
    )

    assert Config.create(reload=True, config_dir=other).allow_prereleases is True


def test_create_rejects_invalid_toml(config_dir: Path) -> None:
    config_dir.joinpath("config.toml").write_text("[union\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML file"):
        Config.create(reload=True)


def test_create_rejects_invalid_values_on_access(config_dir: Path) -> None:
    config_dir.joinpath("config.toml").write_text(
        '[union]\nerror-reporting = "sometimes"\n', encoding="utf-8"
    )

    config = Config.create(reload=True)

    with pytest.raises(ConfigError):
        config.union_error_reporting  # noqa: B018


def test_create_returns_the_same_instance(config: Config) -> None:
    assert Config.create() is config
    assert Config.create(reload=True) is not config
