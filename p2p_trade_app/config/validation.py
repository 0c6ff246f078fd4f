"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_currency_code(value: Any) -> bool:
    return isinstance(value, str) and len(value) >= 3 and value.isalnum() and value.isupper()


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_locale_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate locale parameters."""
        errors = []

        if "base_currency_code" in params:
            value = params["base_currency_code"]
            if not _is_currency_code(value):
                errors.append(ValidationError(
                    field="base_currency_code",
                    message="Must be an upper case alphanumeric currency code",
                    value=value
                ))

        if "language" in params:
            value = params["language"]
            if not isinstance(value, str) or not value.isalpha():
                errors.append(ValidationError(
                    field="language",
                    message="Must be a language code such as 'en'",
                    value=value
                ))

        unknown = set(params) - {"base_currency_code", "language"}
        for key in sorted(unknown):
            errors.append(ValidationError(field=key, message="Unknown locale parameter", value=params[key]))

        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate currency classification parameters."""
        errors = []

        if "fiat_currency_codes" in params:
            value = params["fiat_currency_codes"]
            if not isinstance(value, (list, tuple, set, frozenset)):
                errors.append(ValidationError(
                    field="fiat_currency_codes",
                    message="Must be a list of currency codes",
                    value=value
                ))
            else:
                invalid = [code for code in value if not _is_currency_code(code)]
                if invalid:
                    errors.append(ValidationError(
                        field="fiat_currency_codes",
                        message="Contains invalid currency codes",
                        value=invalid
                    ))

        unknown = set(params) - {"fiat_currency_codes"}
        for key in sorted(unknown):
            errors.append(ValidationError(field=key, message="Unknown currency parameter", value=params[key]))

        return errors

    @staticmethod
    def validate_duration_format_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate duration formatting parameters."""
        errors = []

        for name in ("show_seconds", "show_zero_values"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        unknown = set(params) - {"show_seconds", "show_zero_values"}
        for key in sorted(unknown):
            errors.append(ValidationError(field=key, message="Unknown duration format parameter", value=params[key]))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("locale", ConfigValidator.validate_locale_params),
            ("currency", ConfigValidator.validate_currency_params),
            ("duration_format", ConfigValidator.validate_duration_format_params),
        )
        for section, validate in sections:
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
