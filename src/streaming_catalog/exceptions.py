"""Custom exceptions for the streaming catalog."""


class StreamingCatalogError(Exception):
    """Base exception for streaming catalog errors."""
    pass


class ConfigurationError(StreamingCatalogError):
    """Raised when there's an error in configuration."""
    pass
