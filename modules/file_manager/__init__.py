"""
File manager module for CoreOS.

Provides guarded file, folder and resource operations.
"""

from .file_ops import FileManager, OperationResult, OutcomeStatus, get_file_manager

__all__ = ['FileManager', 'OperationResult', 'OutcomeStatus', 'get_file_manager']
