"""Config settings – EnvSettingsLoader, DotenvSettingsLoader, JsonSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import json
import os
from pathlib import Path
from typing import Any, TypeVar

from dotenv import load_dotenv

from pushy_proxy.config.settings.base import Settings
from pushy_proxy.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


def _coerce(name: str, value: Any, type_hint: Any) -> Any:  # noqa: PLR0911
    """Coerce a raw string (env) or JSON scalar into the declared field type."""
    if not isinstance(value, str):
        if (type_hint is float or type_hint == "float") and isinstance(value, int):
            return float(value)
        return value
    try:
        if type_hint is bool or type_hint == "bool":
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
    except ValueError as exc:
        raise InvalidSettingValueError(name, value, str(exc)) from exc
    return value


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    ``read`` returns only the values the source actually provides so that
    several loaders can be layered by :class:`SettingsFactory`.
    """

    @abc.abstractmethod
    def read(self, settings_class: type[T]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        values = self.read(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in values and _is_required(field):
                raise MissingRequiredSettingError(field.name)
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables (``<PREFIX>_<FIELD>``)."""

    def read(self, settings_class: type[T]) -> dict[str, Any]:
        prefix = getattr(settings_class, "_prefix", "").upper()
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            values[field.name] = _coerce(env_key, raw, field.type)

        return values


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def read(self, settings_class: type[T]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().read(settings_class)


class JsonSettingsLoader(SettingsLoader):
    """Load settings from a JSON document.

    Keys match field names case-insensitively with underscores ignored, so
    both ``SecretAPIKey`` and ``secret_api_key`` populate ``secret_api_key``.
    *section* selects a nested object (e.g. ``"PushySettings"``). Unknown
    keys are ignored.
    """

    def __init__(self, path: str | Path, section: str | None = None) -> None:
        self._path = Path(path)
        self._section = section

    @staticmethod
    def _normalise(key: str) -> str:
        return key.replace("_", "").lower()

    def _document(self) -> dict[str, Any]:
        try:
            with self._path.open(encoding="utf-8") as fh:
                document = json.load(fh)
        except OSError as exc:
            raise ConfigError(f"could not open file: {self._path}", cause=exc) from exc
        except ValueError as exc:
            raise ConfigError(f"could not decode file: {self._path}", cause=exc) from exc

        if self._section is not None:
            document = document.get(self._section) if isinstance(document, dict) else None
        if not isinstance(document, dict):
            raise ConfigError(f"expected a JSON object in {self._path}")
        return document

    def read(self, settings_class: type[T]) -> dict[str, Any]:
        document = self._document()
        by_key = {self._normalise(k): v for k, v in document.items()}
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = self._normalise(field.name)
            if key in by_key:
                values[field.name] = _coerce(field.name, by_key[key], field.type)

        return values


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "JsonSettingsLoader", "SettingsLoader"]
