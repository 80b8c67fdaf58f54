"""Custom exceptions for universal search."""


class UniversalSearchError(Exception):
    """Base exception for universal search operations."""
    pass


class SearchError(UniversalSearchError):
    """Exception raised during search operations."""
    pass


class ValidationError(UniversalSearchError):
    """Exception raised during input validation."""
    pass


class ConfigurationError(UniversalSearchError):
    """Exception raised for configuration issues."""
    pass
