"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DirectoryFetchError(ApplicationError):
    """Raised when applications cannot be retrieved from the directory."""


class TokenAcquisitionError(DirectoryFetchError):
    """Raised when no access token can be obtained for the directory."""


class ConfigurationError(ApplicationError, ValueError):
    """Raised when configuration is invalid."""
