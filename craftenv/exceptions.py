"""
Custom exception hierarchy for craftenv.

Managers raise these at the point of failure; the pipeline converts them
into failed step results so the CLI can report them without duplicating
logging or exit logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class CraftenvError(Exception):
    """Base exception carrying structured error metadata."""

    message: str
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    exit_code: int = 1

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class BoxConfigError(CraftenvError):
    """Raised when Homestead.yaml cannot be read, parsed or written."""


class CommandFailedError(CraftenvError):
    """Raised when an external command exits with a non-zero status."""
