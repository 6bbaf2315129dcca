# CoreOS - Core Module
"""
Infrastructure for CoreOS.
This module provides the configuration, diagnostic log and host providers
that the feature modules depend on.
"""

from .config import Settings, load_settings
from .exceptions import CoreOSError, ConfigurationError, DirectoryUnavailableError
from .logger import DiagnosticLog, DiagnosticEntry, OperationKind
from .providers import LocalFileSystem, Bundle, BundleLocator

__all__ = [
    "Settings",
    "load_settings",
    "CoreOSError",
    "ConfigurationError",
    "DirectoryUnavailableError",
    "DiagnosticLog",
    "DiagnosticEntry",
    "OperationKind",
    "LocalFileSystem",
    "Bundle",
    "BundleLocator",
]

__version__ = "0.1.0"
