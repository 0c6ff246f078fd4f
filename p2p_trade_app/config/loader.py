"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CurrencyParams,
    DefaultConfig,
    DurationFormatParams,
    LocaleParams,
    get_default_config,
)
from .validation import ValidationError


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load deployment settings overrides from settings.yaml."""
        return self._load_yaml("settings.yaml")

    def load_strings(self, language: str) -> dict[str, str]:
        """Load localized string overrides for a language."""
        filename = f"strings_{language}.yaml"
        strings = self._load_yaml(filename).get("strings") or {}
        if not isinstance(strings, dict):
            raise ConfigurationError(
                f"'strings' in {filename} must be a mapping of keys to templates",
                errors=[ValidationError(field="strings", message="Must be a mapping", value=strings)],
            )
        return {str(key): str(value) for key, value in strings.items()}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call overrides (highest priority)
        2. settings.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    @staticmethod
    def build_config(config: dict[str, Any]) -> DefaultConfig:
        """Build typed parameters from a merged (and validated) config dict."""
        locale = config.get("locale", {})
        currency = config.get("currency", {})
        duration_format = config.get("duration_format", {})

        currency_kwargs = {}
        if "fiat_currency_codes" in currency:
            currency_kwargs["fiat_currency_codes"] = frozenset(currency["fiat_currency_codes"])

        return DefaultConfig(
            locale=LocaleParams(**locale),
            currency=CurrencyParams(**currency_kwargs),
            duration_format=DurationFormatParams(**duration_format),
        )

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename

        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{filename} must contain a mapping at the top level",
                errors=[ValidationError(field=filename, message="Must be a mapping", value=data)],
            )
        return data

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
