"""Error Hierarchy: typed exceptions for program failures.

Invariants:
    - Demo status responses (400/401/403/404/500/501) are NOT exceptions;
      only real program faults are raised
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - No internal details (paths, OS errors) leaked in to_response();
      those go in detail, which is logged only
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class StatusDemoError(Exception):
    """Base exception for all status demo errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


class AssetLoadError(StatusDemoError):
    """A static client asset could not be read."""
    def __init__(self, asset: str, reason: str):
        super().__init__(
            f"Client asset '{asset}' is unavailable",
            "ASSET_LOAD_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500, detail=reason,
        )
        self.asset = asset
