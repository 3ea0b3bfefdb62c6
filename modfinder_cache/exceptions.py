"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class ModCacheError(Exception):
    """Base exception for all application-specific errors."""


class UnsupportedKindError(ModCacheError):
    """Raised when a cache operation is requested for a mod kind it cannot handle."""


class ManifestLoadError(ModCacheError):
    """Raised when the cache manifest cannot be read or parsed."""


class ManifestSaveError(ModCacheError):
    """Raised when the cache manifest cannot be written to disk."""


class ConfigurationError(ModCacheError):
    """Raised for issues related to configuration loading or validation."""


class InvalidModDirectoryError(ModCacheError):
    """Raised when a path cannot be used as an installed mod directory."""
