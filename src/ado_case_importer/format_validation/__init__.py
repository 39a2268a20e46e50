"""Format validation exports."""

from .format_check import FormatValidationResult, validate_ado_format

__all__ = [
    "FormatValidationResult",
    "validate_ado_format",
]
