"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "import-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Import configuration template for ado-case-importer.
# Every section is optional. Remove what you do not need.

columns:
  # Extra column names per field, tried after the built-in names.
  # Built-in: ID, Id, Test Case ID
  external_id: ["Work Item ID"]
  # Built-in: Title, Name
  title: ["Title 1", "Test Case Title"]
  # Built-in: Test Step, Step
  step_number: ["Step Number", "Step #"]
  # Built-in: Step Action, Action
  step_action: ["Test Action"]
  # Built-in: Step Expected, Expected
  step_expected: ["Expected Result", "Expected Results"]
  # assigned_to: ["Owner"]
  # area_path: ["Area"]
  # scenario_type: ["Scenario"]
  # state: ["Status"]

defaults:
  # Used when the Priority/State/Work Item Type columns are absent or empty.
  priority: "Medium"
  state: "Active"
  work_item_type: "Test Case"

recovery:
  # Map 1/2/3/4, P1..P4 and named priorities onto Critical/High/Medium/Low.
  normalize_priority: false
  # Fill a test case's empty Assigned To/Area Path/Scenario Type/State from its step rows.
  backfill_step_metadata: false

output:
  # Export format for recovered test cases (json or xlsx).
  format: "json"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML import configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the import configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Import configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
