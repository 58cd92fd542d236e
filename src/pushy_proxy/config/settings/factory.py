"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from pushy_proxy.config.settings.base import Settings
from pushy_proxy.config.settings.loaders import SettingsLoader
from pushy_proxy.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)
logger = logging.getLogger(__name__)


class SettingsFactory:
    """Merge values from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    Loaders whose source cannot be read are skipped so that the remaining
    loaders may still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~pushy_proxy.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered sequence of :class:`~pushy_proxy.config.settings.loaders.\
SettingsLoader` instances.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Returns
        -------
        T
            Populated settings instance.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a merged value fails the settings' own validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                merged.update(loader.read(settings_cls))
            except InvalidSettingValueError:
                raise
            except ConfigError as exc:
                logger.warning("settings loader skipped loader=%s error=%s", type(loader).__name__, exc.message)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
