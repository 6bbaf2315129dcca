"""
Device and OS metadata for CoreOS.
"""

import platform
from typing import Optional

from rich.console import Console


class SystemInfo:
    """Device model and operating system of the host."""

    def __init__(
        self,
        os_name: Optional[str] = None,
        os_version: Optional[str] = None,
        device_model: Optional[str] = None
    ):
        self.os_name = os_name if os_name is not None else platform.system()
        self.os_version = os_version if os_version is not None else platform.release()
        self.device_model = device_model if device_model is not None else (platform.machine() or "Unknown")

    def summary(self) -> str:
        return (
            f"Device Model: {self.device_model}\n"
            f"OS Name: {self.os_name}\n"
            f"OS Version: {self.os_version}\n"
        )

    def system_information(self, console: Optional[Console] = None) -> str:
        """
        Print the device model, OS name and OS version.

        Args:
            console: Console to print to (default: stdout console)

        Returns:
            The printed text
        """
        text = self.summary()
        (console or Console(highlight=False)).print(text, markup=False)
        return text
