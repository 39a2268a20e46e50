"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from ado_case_importer.column_resolution import DEFAULT_COLUMN_ALIASES, ColumnAliases, field_names
from ado_case_importer.structure_recovery import RecoveryOptions
from ado_case_importer.structure_recovery.recovery_options import (
    DEFAULT_PRIORITY,
    DEFAULT_STATE,
    DEFAULT_WORK_ITEM_TYPE,
)

from .runtime_settings import (
    DEFAULT_CONFIGURATION,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    Configuration,
    OutputSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the import configuration; ``None`` means all defaults."""
    if config_path is None:
        return DEFAULT_CONFIGURATION

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    column_aliases = _parse_columns_section(parsed.get("columns"))
    defaults = _optional_mapping(parsed.get("defaults"), "defaults")
    recovery = _optional_mapping(parsed.get("recovery"), "recovery")
    output = _parse_output_section(parsed.get("output"))

    return Configuration(
        path=path,
        recovery=RecoveryOptions(
            column_aliases=column_aliases,
            default_priority=_default_string(defaults, "priority", DEFAULT_PRIORITY),
            default_state=_default_string(defaults, "state", DEFAULT_STATE),
            default_work_item_type=_default_string(
                defaults, "work_item_type", DEFAULT_WORK_ITEM_TYPE
            ),
            normalize_priority=_optional_bool(recovery, "normalize_priority"),
            backfill_step_metadata=_optional_bool(recovery, "backfill_step_metadata"),
        ),
        output=output,
    )


def _parse_columns_section(value: Any) -> ColumnAliases:
    section = _optional_mapping(value, "columns")
    known_fields = field_names()
    extra_aliases: dict[str, tuple[str, ...]] = {}
    for field_name, aliases in section.items():
        if field_name not in known_fields:
            raise ConfigurationError(
                f"columns.{field_name} is not a known field "
                f"(expected one of: {', '.join(known_fields)})."
            )
        extra_aliases[field_name] = _normalize_alias_list(aliases, f"columns.{field_name}")
    return DEFAULT_COLUMN_ALIASES.extended_with(extra_aliases)


def _normalize_alias_list(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        candidates: Sequence[Any] = [value]
    elif isinstance(value, Sequence):
        candidates = value
    else:
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")
    aliases: list[str] = []
    for item in candidates:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} entries must be strings.")
        stripped = item.strip()
        if stripped:
            aliases.append(stripped)
    return tuple(aliases)


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    output_format = section.get("format", DEFAULT_OUTPUT_FORMAT)
    normalized = _require_non_empty_string(output_format, "output.format").lower()
    if normalized not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of: {', '.join(OUTPUT_FORMATS)} (got '{output_format}')."
        )
    return OutputSettings(output_format=normalized)


def _default_string(section: Mapping[str, Any], key: str, fallback: str) -> str:
    if key not in section:
        return fallback
    return _require_non_empty_string(section[key], f"defaults.{key}")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_bool(section: Mapping[str, Any], key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(f"recovery.{key} must be a boolean.")
    return value
