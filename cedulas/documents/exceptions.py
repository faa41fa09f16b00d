class DocumentError(Exception):
    """Base exception for document handling errors."""


class DocumentReadError(DocumentError):
    """Raised when the bytes cannot be parsed as the declared format."""


class UnsupportedFormatError(DocumentError):
    """Raised when no text backend handles the file extension."""


class StorageError(DocumentError):
    """Raised when a stored document cannot be downloaded."""
