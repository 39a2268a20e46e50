"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ado_case_importer.structure_recovery import RecoveryResult


@dataclass(frozen=True)
class ImportMetadata:  # pylint: disable=too-many-instance-attributes
    """Metadata rendered next to the exported test cases."""

    import_start: datetime
    input_path: Path
    output_path: Path
    row_count: int
    test_case_count: int
    step_count: int
    orphan_step_rows: tuple[int, ...]
    skipped_rows: tuple[int, ...]

    @classmethod
    def from_recovery(
        cls,
        *,
        import_start: datetime,
        input_path: Path,
        output_path: Path,
        result: RecoveryResult,
    ) -> ImportMetadata:
        return cls(
            import_start=import_start,
            input_path=input_path,
            output_path=output_path,
            row_count=result.row_count,
            test_case_count=len(result.test_cases),
            step_count=result.step_count,
            orphan_step_rows=result.diagnostics.orphan_step_rows,
            skipped_rows=result.diagnostics.skipped_rows,
        )
