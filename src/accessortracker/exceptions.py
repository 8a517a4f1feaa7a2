"""
Exception classes for accessortracker.
"""


class AccessorTrackerError(Exception):
    """Base exception for all accessortracker errors."""
    pass


class CodeAnalysisError(AccessorTrackerError):
    """Exception raised when source code cannot be turned into a class model."""
    pass


class ConfigurationError(AccessorTrackerError):
    """Exception raised for configuration errors."""
    pass
