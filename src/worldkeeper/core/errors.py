"""
Exception types for world configuration handling.

Only ValidationError is raised to callers. PersistenceError and
ResolutionError are carried inside the result objects returned by the codec
and the live adapter, and are logged by the boundary helpers.
"""

from pathlib import Path
from typing import Any, Dict, Optional


class WorldConfigError(Exception):
    """Base exception for world configuration errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "general",
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the error.

        Args:
            message: Error message
            error_type: Short machine-readable category of the error
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.context = context or {}


class ValidationError(WorldConfigError):
    """A configuration could not be built because a required field is missing."""

    def __init__(self, message: str, field: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type="validation", context=context)
        self.field = field


class PersistenceError(WorldConfigError):
    """A configuration file could not be read, decoded, created or written."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_type="persistence", context=context)
        self.path = path


class ResolutionError(WorldConfigError):
    """The generator attached to a live world could not be resolved."""

    def __init__(
        self,
        message: str,
        world_name: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_type="resolution", context=context)
        self.world_name = world_name
