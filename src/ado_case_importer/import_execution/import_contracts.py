"""Import execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ado_case_importer.structure_recovery import RecoveryResult


@dataclass(frozen=True)
class ImportRequest:
    """Input contract for importing one export file."""

    input_path: str
    config_path: str | None = None
    output_path: str | None = None
    output_format: str | None = None
    sheet_name: str | None = None


@dataclass(frozen=True)
class ImportOutcome:
    """Output contract for one completed import."""

    output_path: Path
    output_format: str
    result: RecoveryResult

    @property
    def test_case_count(self) -> int:
        return len(self.result.test_cases)
