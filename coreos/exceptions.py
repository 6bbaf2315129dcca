"""
Exception classes for CoreOS.
"""


class CoreOSError(Exception):
    """Base exception for all CoreOS errors."""
    pass


class ConfigurationError(CoreOSError):
    """Raised when the configuration file has an invalid shape."""
    pass


class DirectoryUnavailableError(CoreOSError):
    """Raised when the host designates no path for a standard directory."""

    def __init__(self, domain: str):
        super().__init__(f"No standard directory available for domain: {domain}")
        self.domain = domain
