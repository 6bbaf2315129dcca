"""
Configuration loading for CoreOS.

Settings are read from a YAML file, either at the document root or nested
under a top-level ``coreos`` key. A missing or unreadable file yields the
defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError


DOCUMENTS = "documents"
CACHE = "cache"


def _default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return {
        "directories": {
            DOCUMENTS: ["~/Documents"],
            CACHE: ["~/.cache/coreos"],
        },
        "resources": None,
        "create_missing_directories": True,
        "logging": {
            "log_path": "data/diagnostics.jsonl",
            "echo": True,
        },
    }


def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))


@dataclass
class Settings:
    """Resolved CoreOS settings."""
    directories: Dict[str, List[str]] = field(default_factory=dict)
    resources: Optional[str] = None
    create_missing_directories: bool = True
    log_path: str = "data/diagnostics.jsonl"
    echo: bool = True

    def search_paths(self, domain: str) -> List[str]:
        """Candidate paths for a standard directory domain, in priority order."""
        return list(self.directories.get(domain, []))

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Settings":
        """
        Build settings from a configuration mapping.

        Keys missing from ``config`` take their default values.

        Raises:
            ConfigurationError: If a section has the wrong shape
        """
        defaults = _default_config()

        directories = dict(defaults["directories"])
        configured = config.get("directories") or {}
        if not isinstance(configured, dict):
            raise ConfigurationError("'directories' must be a mapping of domain to paths")
        for domain, paths in configured.items():
            if paths is None:
                paths = []
            elif isinstance(paths, str):
                paths = [paths]
            elif not isinstance(paths, list):
                raise ConfigurationError(f"Invalid paths for directory domain '{domain}'")
            directories[domain] = [_expand(str(p)) for p in paths]
        for domain in defaults["directories"]:
            if domain not in configured:
                directories[domain] = [_expand(p) for p in directories[domain]]

        logging_config = config.get("logging") or {}
        if not isinstance(logging_config, dict):
            raise ConfigurationError("'logging' must be a mapping")

        resources = config.get("resources", defaults["resources"])

        return cls(
            directories=directories,
            resources=_expand(str(resources)) if resources else None,
            create_missing_directories=bool(
                config.get("create_missing_directories", defaults["create_missing_directories"])
            ),
            log_path=str(logging_config.get("log_path", defaults["logging"]["log_path"])),
            echo=bool(logging_config.get("echo", defaults["logging"]["echo"])),
        )


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Settings built from the file, or the defaults if it can't be read
    """
    path = Path(config_path)
    if not path.exists():
        return Settings.from_dict({})

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return Settings.from_dict({})

    if not isinstance(config, dict):
        return Settings.from_dict({})

    section = config.get("coreos", config) or {}
    if not isinstance(section, dict):
        raise ConfigurationError("'coreos' must be a mapping")

    return Settings.from_dict(section)
