"""
Host collaborators for CoreOS.

The file-system provider and the bundle locator wrap the host OS. They
raise on failure and never log; reporting is left to the caller.
"""

import os
import shutil
from pathlib import Path
from typing import Dict, Generator, List, Optional

from .config import Settings


class LocalFileSystem:
    """File-system provider backed by the local OS."""

    def __init__(
        self,
        search_paths: Optional[Dict[str, List[str]]] = None,
        create_missing: bool = True
    ):
        """
        Initialize the provider.

        Args:
            search_paths: Candidate paths per standard directory domain
            create_missing: Create a standard directory on first lookup
        """
        self._search_paths = search_paths or {}
        self.create_missing = create_missing

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalFileSystem":
        return cls(
            search_paths=settings.directories,
            create_missing=settings.create_missing_directories
        )

    def exists(self, path: str) -> bool:
        """Check if an entry exists. Dangling symlinks count as entries."""
        return os.path.lexists(path)

    def current_directory(self) -> str:
        return os.getcwd()

    def search_paths(self, domain: str) -> List[str]:
        """
        Paths designated for a standard directory domain.

        When ``create_missing`` is set, the first path is created if absent.
        """
        paths = list(self._search_paths.get(domain, []))
        if paths and self.create_missing:
            Path(paths[0]).mkdir(parents=True, exist_ok=True)
        return paths

    def remove(self, path: str) -> None:
        """Remove a file, symlink or directory tree."""
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.unlink(path)

    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or directory tree.

        Raises:
            FileExistsError: If the destination already exists
        """
        if os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")
        if os.path.isdir(source) and not os.path.islink(source):
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination, follow_symlinks=False)

    def move(self, source: str, destination: str) -> None:
        """
        Move a file or directory tree.

        Raises:
            FileExistsError: If the destination already exists
        """
        if os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")
        shutil.move(source, destination)

    def enumerate(self, directory: str) -> Generator[str, None, None]:
        """
        Recursively yield entries under a directory, relative to it.

        A subdirectory is yielded before its contents. Symlinked
        directories are yielded but not descended into, and a subdirectory
        that can't be read is yielded without its contents.

        Raises:
            OSError: If ``directory`` itself can't be read
        """
        with os.scandir(directory) as it:
            entries = list(it)
        yield from self._walk(directory, "", entries)

    def _walk(self, root: str, prefix: str, entries) -> Generator[str, None, None]:
        for entry in entries:
            relative = os.path.join(prefix, entry.name) if prefix else entry.name
            yield relative
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                with os.scandir(os.path.join(root, relative)) as it:
                    children = list(it)
            except OSError:
                continue
            yield from self._walk(root, relative, children)


class Bundle:
    """A directory of packaged resources."""

    def __init__(self, path: str):
        self.path = path

    @property
    def resource_path(self) -> str:
        return self.path

    def paths_for_resources(self, of_type: str) -> List[str]:
        """
        Absolute paths of resources whose name ends with the given type.

        Only regular files at the top of the resource root are considered.
        An empty type matches every resource.

        Args:
            of_type: Type suffix such as "txt" or "tar.gz", leading dot optional
        """
        suffix = of_type.lstrip(".").lower()
        root = Path(self.path).resolve()

        paths = []
        for item in sorted(root.iterdir(), key=lambda p: p.name):
            if not item.is_file():
                continue
            if suffix and not item.name.lower().endswith("." + suffix):
                continue
            paths.append(str(item))
        return paths


class BundleLocator:
    """Locates bundles on disk."""

    def __init__(self, main_path: Optional[str] = None):
        """
        Initialize the locator.

        Args:
            main_path: Resource root of the main bundle (default: cwd)
        """
        self.main_path = main_path

    @classmethod
    def from_settings(cls, settings: Settings) -> "BundleLocator":
        return cls(main_path=settings.resources)

    def main_bundle(self) -> Optional[Bundle]:
        return self.bundle_at(self.main_path or os.getcwd())

    def bundle_at(self, path: str) -> Optional[Bundle]:
        """The bundle at ``path``, or None if it isn't an existing directory."""
        if not path or not os.path.isdir(path):
            return None
        return Bundle(str(Path(path).resolve()))
