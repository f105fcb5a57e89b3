from __future__ import annotations

import logging
import os

from collections.abc import Mapping
from copy import deepcopy
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from semver_constraints.exceptions import ConfigError
from semver_constraints.locations import CONFIG_DIR


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


UNION_ERROR_REPORTING_MODES = ("aggregate", "last")


def boolean_validator(val: str) -> bool:
    return val in {"true", "false", "1", "0"}


def boolean_normalizer(val: str) -> bool:
    if not boolean_validator(val.lower()):
        raise ConfigError(f"Invalid boolean value {val!r}")

    return val.lower() in ["true", "1"]


def error_reporting_normalizer(val: str) -> str:
    mode = val.strip().lower()
    if mode not in UNION_ERROR_REPORTING_MODES:
        raise ConfigError(
            f"Invalid union error reporting mode {val!r}, expected one of"
            f" {', '.join(UNION_ERROR_REPORTING_MODES)}"
        )

    return mode


def merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> None:
    for k in d2:
        if k in d1 and isinstance(d1[k], dict) and isinstance(d2[k], Mapping):
            merge_dicts(d1[k], d2[k])
        else:
            d1[k] = d2[k]


logger = logging.getLogger(__name__)

_default_config: Config | None = None


class Config:
    default_config: ClassVar[dict[str, Any]] = {
        "prereleases": {
            "allow-in-range": False,
        },
        "union": {
            "error-reporting": "aggregate",
        },
    }

    def __init__(self, use_environment: bool = True) -> None:
        self._config = deepcopy(self.default_config)
        self._use_environment = use_environment

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def merge(self, config: Mapping[str, Any]) -> None:
        merge_dicts(self._config, config)

    def all(self) -> dict[str, Any]:
        def _all(config: dict[str, Any], parent_key: str = "") -> dict[str, Any]:
            all_ = {}

            for key in config:
                value = self.get(parent_key + key)
                if isinstance(value, dict):
                    all_[key] = _all(config[key], parent_key=f"{parent_key}{key}.")
                    continue

                all_[key] = value

            return all_

        return _all(self.config)

    def get(self, setting_name: str, default: Any = None) -> Any:
        """
        Retrieve a setting value.
        """
        keys = setting_name.split(".")

        # Looking in the environment if the setting
        # is set via a SEMVER_CONSTRAINTS_* environment variable
        if self._use_environment:
            env = "SEMVER_CONSTRAINTS_" + "_".join(
                k.upper().replace("-", "_") for k in keys
            )
            env_value = os.getenv(env)
            if env_value is not None:
                return self._get_normalizer(setting_name)(env_value)

        value = self._config
        for key in keys:
            if key not in value:
                return default

            value = value[key]

        if isinstance(value, str):
            return self._get_normalizer(setting_name)(value)

        return value

    @property
    def allow_prereleases(self) -> bool:
        return bool(self.get("prereleases.allow-in-range"))

    @property
    def union_error_reporting(self) -> str:
        mode: str = self.get("union.error-reporting")
        return mode

    @staticmethod
    def _get_normalizer(name: str) -> Callable[[str], Any]:
        if name == "prereleases.allow-in-range":
            return boolean_normalizer

        if name == "union.error-reporting":
            return error_reporting_normalizer

        return lambda val: val

    @classmethod
    def create(cls, reload: bool = False, config_dir: Path | None = None) -> Config:
        global _default_config

        if _default_config is None or reload:
            config = cls()

            config_file = (config_dir or CONFIG_DIR) / "config.toml"
            if config_file.exists():
                logger.debug("Loading configuration file %s", config_file)
                config.merge(cls._read(config_file))

            _default_config = config

        return _default_config

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        from tomlkit import parse
        from tomlkit.exceptions import TOMLKitError

        try:
            content = parse(path.read_text(encoding="utf-8"))
        except (ValueError, TOMLKitError) as e:
            raise ConfigError(f"Invalid TOML file {path.as_posix()}: {e}")

        return content.unwrap()
