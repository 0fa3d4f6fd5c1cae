"""
Crocodoc API client - Download API

Core Components:
- download: DownloadClient for documents, extracted text and thumbnails
- transport: requests-backed request collaborator
- config: YAML configuration and environment overrides
- exceptions: error hierarchy
"""

from .download import DownloadClient, DownloadRequest, normalize_annotation_filter
from .exceptions import (
    APIError,
    ConfigFileError,
    ConfigurationError,
    CrocodocError,
    NetworkError,
    ValidationError,
)
from .transport import CrocodocTransport, Requester

__all__ = [
    # Download API
    "DownloadClient",
    "DownloadRequest",
    "normalize_annotation_filter",
    # Transport
    "CrocodocTransport",
    "Requester",
    # Errors
    "APIError",
    "ConfigFileError",
    "ConfigurationError",
    "CrocodocError",
    "NetworkError",
    "ValidationError",
]
