"""Exception types raised while assembling a POM descriptor."""

from pathlib import Path
from typing import Optional


class PomGenError(Exception):
    """Base exception for descriptor generation."""
    pass


class ValidationError(PomGenError):
    """Raised when a required identity input is blank or missing.

    Always raised before anything is written.
    """
    pass


class TemplateLoadError(PomGenError):
    """Raised when a POM template cannot be read or parsed."""
    def __init__(self, template: str, reason: str):
        super().__init__(f"Cannot load POM template '{template}': {reason}")
        self.template = template
        self.reason = reason


class PersistenceError(PomGenError):
    """Raised when a generated file cannot be written."""
    def __init__(self, path: Optional[Path], reason: str):
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason
