"""
Custom exceptions for the Infrastructure layer.
"""

class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class ConfigurationError(InfrastructureError):
    """Raised when settings are missing or invalid; fatal at startup."""
    pass


class RepositoryError(InfrastructureError):
    """Raised when a store or query operation fails."""
    pass
