"""Analysis failures"""
from typing import Optional


class AnalysisError(Exception):
    """Base class for a failed analysis call"""


class ValidationError(AnalysisError):
    """The input was rejected before any request was made."""


class RequestError(AnalysisError):
    """Transport, authentication or remote service failure."""


class SchemaError(AnalysisError):
    """The response could not be parsed into a valid analysis result."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw
