# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Configuration for locale detection: one YAML/TOML file, env overrides, typed binding."""

from __future__ import annotations

import copy
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from localefly.kernel.exceptions import ConfigurationException

T = TypeVar("T")

_CONFIG_PROPERTIES_ATTR = "__localefly_config_prefix__"

_ENV_PREFIX = "LOCALEFLY_"

_DEFAULTS: dict[str, Any] = {
    "localefly": {
        "logging": {"level": {"root": "INFO"}, "format": "console"},
        "i18n": {
            "detection": {
                "session-key": "lng",
                "search-param-key": "lng",
            },
        },
    },
}


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a Pydantic model as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="localefly.i18n.detection")
        class DetectionProperties(BaseModel):
            fallback_language: str = Field(alias="fallback-language")
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """Environment variable overriding *key*.

    ``localefly.i18n.detection.fallback-language`` maps to
    ``LOCALEFLY_I18N_DETECTION_FALLBACK_LANGUAGE``.
    """
    return _ENV_PREFIX + key.removeprefix("localefly.").upper().replace(".", "_").replace("-", "_")


class Config:
    """Nested settings with dot-notation access.

    Environment variables win over file values, which win over the library
    defaults. Overrides are read at lookup time, so a process can change
    ``LOCALEFLY_*`` variables without reloading the file.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a ``.yaml``/``.yml`` or ``.toml`` file merged over the defaults.

        A missing file yields the defaults alone.
        """
        path = Path(path)
        data: dict[str, Any] = copy.deepcopy(_DEFAULTS) if load_defaults else {}
        if path.is_file():
            data = _deep_merge(data, _load(path))
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first."""
        env_val = os.environ.get(env_key(key))
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(part)
            if current is None:
                return default
        return current

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict (file values only)."""
        current = self.get(prefix)
        return dict(current) if isinstance(current, dict) else {}

    def bind(self, model: type[T]) -> T:
        """Validate the section of a ``@config_properties`` model.

        Every field is looked up through :meth:`get` under its alias, so an
        environment variable can supply or override a single detection setting
        (``LOCALEFLY_I18N_DETECTION_SUPPORTED_LANGUAGES=en,es``).

        Raises:
            ConfigurationException: If the model is not decorated or the section
                fails validation.
        """
        prefix = getattr(model, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None or not issubclass(cast(type, model), BaseModel):
            raise ConfigurationException(f"{model.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)
        for name, field in model.model_fields.items():  # type: ignore[attr-defined]
            key = field.alias or name
            value = self.get(f"{prefix}.{key}")
            if value is not None:
                section[key] = value

        try:
            return cast(T, model.model_validate(section))  # type: ignore[attr-defined]
        except ValidationError as exc:
            raise ConfigurationException(
                f"Configuration validation failed for '{model.__name__}' (prefix='{prefix}'):\n{exc}",
                context={"prefix": prefix},
            ) from exc


def _load(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
