"""
Custom exceptions for the certification pipeline.
"""

from typing import Optional


class CertgenError(Exception):
    """Base exception for certgen."""

    pass


class InvalidArgumentError(CertgenError, ValueError):
    """A required argument was missing (None)."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"{argument} cannot be None")


class DocumentRenderError(CertgenError):
    """A certification letter could not be written."""

    def __init__(self, full_name: str, message: str):
        self.full_name = full_name
        self.message = message
        super().__init__(f"Error generating document for {full_name}: {message}")
