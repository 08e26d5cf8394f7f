"""Error types raised by the CreateOS client layers."""

from __future__ import annotations


class CreateOSError(RuntimeError):
    """Base class for every terminal CreateOS CLI failure."""


class ConfigurationError(CreateOSError):
    """Raised when required configuration such as the API key is missing."""


class TransportError(CreateOSError):
    """Raised when the API cannot be reached (connection, DNS, timeout)."""


class ProtocolError(CreateOSError):
    """Raised when the API returns a body that is not valid JSON."""


class ApplicationError(CreateOSError):
    """Raised when a well-formed API response reports a logical failure."""


class TooManyFilesError(CreateOSError):
    """Raised when an upload set exceeds the per-request file cap."""


class EncodingError(CreateOSError):
    """Raised when a file cannot be encoded for a text-mode upload."""


class NotFoundError(CreateOSError):
    """Raised when a referenced path, environment or resource does not exist."""


class FileReadError(CreateOSError):
    """Raised when a file selected for upload cannot be read."""
