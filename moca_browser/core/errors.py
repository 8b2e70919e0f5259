"""Shared error types.

Launch failures raised by Qt are not wrapped; these cover configuration and
CLI input handled at the entry point.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class ValidationError(AppError):
    """Invalid user input or configuration."""


class InfrastructureError(AppError):
    """IO/OS/FS failures."""
