"""
Errors raised outside the geometry engine.

The engine itself is total and raises nothing. Configuration and Sway
IPC failures carry a numeric code, a recovery hint and the offending
values, so the CLI can print them and the daemon can log them as one
structured record.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Numeric error codes.

    - 1100-1199: configuration
    - 1400-1499: Sway IPC
    """

    CONFIG_LOAD_FAILED = 1100
    CONFIG_INVALID_VALUE = 1101

    SWAY_IPC_FAILED = 1401


class TileGapsError(Exception):
    """Base class carrying a code, a hint and context values."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a JSON-serialisable record."""
        record = {"code": self.code.value, "error": self.code.name, "message": self.message}
        if self.suggestion:
            record["suggestion"] = self.suggestion
        if self.context:
            record["context"] = self.context
        return record


class ConfigLoadError(TileGapsError):
    """config.toml exists but cannot be read or parsed."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and permissions",
            context={"file_path": file_path, "reason": reason}
        )


class ConfigValueError(TileGapsError):
    """
    One configuration field rejected by validation.

    Not raised by the loader: it is recorded, logged, and the field takes
    its default value.
    """

    def __init__(self, field_name: str, value: Any, reason: str, source: str):
        super().__init__(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value {field_name}={value!r} from {source}: {reason}",
            suggestion=f"Fix {field_name} in {source}; the default is used meanwhile",
            context={"field": field_name, "value": value, "source": source}
        )
        self.field_name = field_name


class SwayIPCError(TileGapsError):
    """Sway IPC connection or request failure."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            code=ErrorCode.SWAY_IPC_FAILED,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway is running and SWAYSOCK points at its IPC socket",
            context={"operation": operation, "reason": reason}
        )
