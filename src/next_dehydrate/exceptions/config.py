"""Configuration and build-layout exceptions."""

from pathlib import Path
from typing import Any

from .base import DehydrateError


class ConfigurationError(DehydrateError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class BuildDetectionError(ConfigurationError):
    """Raised when no usable build output or router directory is found."""

    def __init__(self, message: str, project_dir: Path | None = None):
        details = {}
        if project_dir is not None:
            details["project_dir"] = str(project_dir)
        super().__init__(message, details=details)
        self.project_dir = project_dir
