"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ado_case_importer.structure_recovery import DEFAULT_RECOVERY_OPTIONS, RecoveryOptions

OUTPUT_FORMATS: tuple[str, ...] = ("json", "xlsx")
DEFAULT_OUTPUT_FORMAT = "json"


@dataclass(frozen=True)
class OutputSettings:
    """Export settings for recovered test cases."""

    output_format: str = DEFAULT_OUTPUT_FORMAT


@dataclass(frozen=True)
class Configuration:
    """Top-level import configuration aggregate."""

    path: Path | None
    recovery: RecoveryOptions = DEFAULT_RECOVERY_OPTIONS
    output: OutputSettings = OutputSettings()


DEFAULT_CONFIGURATION = Configuration(path=None)
