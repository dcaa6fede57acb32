"""Configuration management for TSC Baseline."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import DEFAULT_BASELINE_FILENAME


class ErrorFormat(str, Enum):
    """Output formats for the check report."""

    HUMAN = "human"
    GITLAB = "gitlab"


@dataclass(frozen=True)
class BaselineConfig:
    """Configuration shared by the store, aggregator and formatters."""

    # Baseline file location
    path: str = DEFAULT_BASELINE_FILENAME

    # Identity mode; None means "not requested", which saves with messages
    # and checks with whatever the baseline recorded
    ignore_messages: Optional[bool] = None

    # Output options
    error_format: str = ErrorFormat.HUMAN.value

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not str(self.path).strip():
            raise ValueError("path cannot be empty")
        valid_formats = {fmt.value for fmt in ErrorFormat}
        if self.error_format not in valid_formats:
            raise ValueError(
                f"error_format must be one of: {', '.join(sorted(valid_formats))}"
            )

    @property
    def identity_ignores_messages(self) -> bool:
        """Identity mode to use when no baseline dictates one."""
        return bool(self.ignore_messages)

    def resolve_path(self, cwd: Optional[Path] = None) -> Path:
        """Resolve the baseline path against ``cwd`` (default: current directory)."""
        base = cwd if cwd is not None else Path.cwd()
        return (base / self.path).resolve()

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary for logging."""
        return {
            "path": str(self.path),
            "ignore_messages": self.ignore_messages,
            "error_format": self.error_format,
        }
