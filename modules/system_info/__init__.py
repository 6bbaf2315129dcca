"""
System info module for CoreOS.

Reports device and operating system metadata.
"""

from .device import SystemInfo

__all__ = ['SystemInfo']
