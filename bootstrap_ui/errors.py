"""Exceptions raised by the markup helpers."""
from __future__ import annotations


class HelperOptionsError(ValueError):
    """Raised when a helper receives options it cannot render."""

    def __init__(self, helper: str, message: str) -> None:
        super().__init__(f"{helper}: {message}")
        self.helper = helper
        self.message = message


__all__ = ["HelperOptionsError"]
