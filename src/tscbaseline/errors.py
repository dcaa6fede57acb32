"""Error definitions and handling for the baseline tool."""

from typing import Any, Dict, Optional


class BaselineError(Exception):
    """Base exception for baseline tool errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class BaselineReadError(BaselineError):
    """Baseline file is missing, unreadable or not valid JSON."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="BASELINE_UNREADABLE",
            message=f'Unable to read the .tsc-baseline.json file at "{path}".\n\n'
            "Has the baseline file been properly saved with the 'save' command?",
            details={"path": path, "reason": reason},
        )


class BaselineOutdatedError(BaselineError):
    """Baseline file was written by an older release of the tool."""

    def __init__(self, path: str, found_version: int, current_version: int):
        super().__init__(
            code="BASELINE_OUTDATED",
            message=f'The .tsc-baseline.json file at "{path}"\n'
            "is out of date for this version of tsc-baseline.\n\n"
            "Please update the baseline file using the 'save' command.",
            details={
                "path": path,
                "found_version": found_version,
                "current_version": current_version,
            },
        )


class BaselineFutureVersionError(BaselineError):
    """Baseline file was written by a newer release of the tool."""

    def __init__(self, path: str, found_version: int, current_version: int):
        super().__init__(
            code="BASELINE_FUTURE_VERSION",
            message=f'The .tsc-baseline.json file at "{path}"\n'
            "is from a future version of tsc-baseline.\n\n"
            "Are your installed packages up to date?",
            details={
                "path": path,
                "found_version": found_version,
                "current_version": current_version,
            },
        )


class IdentityModeMismatchError(BaselineError):
    """Requested identity mode differs from the one recorded in the baseline."""

    def __init__(self, path: str, baseline_ignore_messages: bool, requested_ignore_messages: bool):
        recorded = "ignores" if baseline_ignore_messages else "includes"
        super().__init__(
            code="IDENTITY_MODE_MISMATCH",
            message=f'The .tsc-baseline.json file at "{path}"\n'
            f"was saved in a mode that {recorded} error messages.\n\n"
            "Re-run the 'save' command with the same --ignore-messages setting.",
            details={
                "path": path,
                "baseline_ignore_messages": baseline_ignore_messages,
                "requested_ignore_messages": requested_ignore_messages,
            },
        )


class MissingHashError(BaselineError):
    """No hash was given to the add operation."""

    def __init__(self) -> None:
        super().__init__(code="MISSING_HASH", message="Missing hash")
