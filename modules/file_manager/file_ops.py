"""
File operations module for CoreOS.

Provides guarded, best-effort file operations. Preconditions that are not
met skip the operation; host failures are reported to the diagnostic log
and never raised to the caller.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import PurePath
from typing import List, Optional

from coreos.config import Settings, load_settings, DOCUMENTS, CACHE
from coreos.exceptions import DirectoryUnavailableError
from coreos.logger import DiagnosticLog, OperationKind
from coreos.providers import LocalFileSystem, BundleLocator, Bundle


class OutcomeStatus(Enum):
    """Outcome of an operation."""
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class OperationResult:
    """Result of a file operation."""
    kind: OperationKind
    status: OutcomeStatus
    source: str
    destination: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK

    @property
    def skipped(self) -> bool:
        return self.status == OutcomeStatus.SKIPPED

    @property
    def failed(self) -> bool:
        return self.status == OutcomeStatus.FAILED


class FileManager:
    """Guarded file operations over injected host providers."""

    def __init__(
        self,
        file_system: Optional[LocalFileSystem] = None,
        bundles: Optional[BundleLocator] = None,
        sink: Optional[DiagnosticLog] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize FileManager.

        Args:
            file_system: File-system provider
            bundles: Bundle locator
            sink: Diagnostic log that failures are reported to
            settings: Settings used to build any missing collaborator
        """
        if file_system is None or bundles is None or sink is None:
            settings = settings or load_settings()
        self.fs = file_system or LocalFileSystem.from_settings(settings)
        self.bundles = bundles or BundleLocator.from_settings(settings)
        self.sink = sink or DiagnosticLog(log_path=settings.log_path, echo=settings.echo)

    # Locations

    def exists(self, path: str) -> bool:
        """
        Check whether an entry exists at a path.

        Args:
            path: Path to verify

        Returns:
            True if the entry exists, False otherwise
        """
        return self.fs.exists(path)

    def current_directory(self) -> str:
        """Working directory of the process."""
        return self.fs.current_directory()

    def _standard_directory(self, domain: str) -> str:
        try:
            paths = self.fs.search_paths(domain)
        except OSError as e:
            self.sink.report(OperationKind.LOOKUP, e, source=domain)
            raise DirectoryUnavailableError(domain) from e

        if not paths:
            error = DirectoryUnavailableError(domain)
            self.sink.report(OperationKind.LOOKUP, error, source=domain)
            raise error
        return paths[0]

    def application_documents_directory(self) -> str:
        """
        Location of the application's documents directory.

        Raises:
            DirectoryUnavailableError: If no documents directory is designated
        """
        return self._standard_directory(DOCUMENTS)

    def application_cache_directory(self) -> str:
        """
        Location of the application's cache directory.

        Raises:
            DirectoryUnavailableError: If no cache directory is designated
        """
        return self._standard_directory(CACHE)

    def application_resources_directory(self) -> str:
        """Resource root of the main bundle, or "" if there is none."""
        bundle = self.bundles.main_bundle()
        if bundle is None:
            return ""
        return bundle.resource_path

    # Operations

    def delete_file(self, path: str) -> OperationResult:
        """
        Delete a file or directory. Skipped if nothing exists at the path.

        Args:
            path: Path of the entry to delete
        """
        if not self.exists(path):
            return OperationResult(OperationKind.DELETE, OutcomeStatus.SKIPPED, path)

        try:
            self.fs.remove(path)
        except OSError as e:
            self.sink.report(OperationKind.DELETE, e, source=path)
            return OperationResult(OperationKind.DELETE, OutcomeStatus.FAILED, path, error=str(e))

        return OperationResult(OperationKind.DELETE, OutcomeStatus.OK, path)

    def copy_file(self, source: str, destination: str) -> OperationResult:
        """
        Copy a file to a destination path.

        Never overwrites: skipped unless the source exists and the
        destination does not.

        Args:
            source: Path of the entry to copy
            destination: Full path of the copy, including its file name
        """
        if not (self.exists(source) and not self.exists(destination)):
            return OperationResult(OperationKind.COPY, OutcomeStatus.SKIPPED, source, destination)

        try:
            self.fs.copy(source, destination)
        except OSError as e:
            self.sink.report(OperationKind.COPY, e, source=source, destination=destination)
            return OperationResult(OperationKind.COPY, OutcomeStatus.FAILED, source, destination, str(e))

        return OperationResult(OperationKind.COPY, OutcomeStatus.OK, source, destination)

    def overwrite_file(self, source: str, destination: str) -> OperationResult:
        """
        Replace an existing destination with a copy of the source.

        Skipped unless BOTH paths already exist. A missing destination is
        not created; call copy_file for that.

        Args:
            source: Path of the entry to copy
            destination: Existing path to replace
        """
        if not (self.exists(source) and self.exists(destination)):
            return OperationResult(OperationKind.OVERWRITE, OutcomeStatus.SKIPPED, source, destination)

        step = self.delete_file(destination)
        if not step.failed:
            step = self.copy_file(source, destination)
        return replace(step, kind=OperationKind.OVERWRITE, source=source, destination=destination)

    def move_file(self, source: str, destination: str) -> OperationResult:
        """
        Move a file to a destination path. Skipped if the source is missing.

        Unlike copy_file, the destination is not checked first. If the host
        refuses to replace it, the failure is reported.

        Args:
            source: Path of the entry to move
            destination: Full path to move it to, including its file name
        """
        if not self.exists(source):
            return OperationResult(OperationKind.MOVE, OutcomeStatus.SKIPPED, source, destination)

        try:
            self.fs.move(source, destination)
        except OSError as e:
            self.sink.report(OperationKind.MOVE, e, source=source, destination=destination)
            return OperationResult(OperationKind.MOVE, OutcomeStatus.FAILED, source, destination, str(e))

        return OperationResult(OperationKind.MOVE, OutcomeStatus.OK, source, destination)

    # Listings

    def contents_of_directory(self, directory: str) -> List[str]:
        """
        Recursively list every entry under a directory.

        Args:
            directory: Directory to list

        Returns:
            Paths relative to ``directory``, in enumeration order. Empty if
            the directory can't be read.
        """
        try:
            return list(self.fs.enumerate(directory))
        except OSError:
            return []

    def _paths_for_resources(self, of_type: str, bundle: Optional[Bundle]) -> List[str]:
        if bundle is None:
            return []
        try:
            return bundle.paths_for_resources(of_type)
        except OSError:
            return []

    def application_paths_for_resources(self, of_type: str) -> List[str]:
        """Paths of resources of a type in the main bundle."""
        return self._paths_for_resources(of_type, self.bundles.main_bundle())

    def paths_for_resources(self, of_type: str, bundle_path: str) -> List[str]:
        """
        Paths of resources of a type in the bundle at a location.

        Args:
            of_type: File extension to search for
            bundle_path: Location of the bundle

        Returns:
            Matching paths, or an empty list if no bundle is found there
        """
        return self._paths_for_resources(of_type, self.bundles.bundle_at(bundle_path))

    # Path decomposition

    def file_path_for_file(self, name: str, directory: str) -> Optional[str]:
        """
        Path of a file name inside a directory.

        Returns:
            The joined path, or None if the directory doesn't exist
        """
        if not self.exists(directory):
            return None
        return os.path.join(directory, name)

    @staticmethod
    def file_name(path: str) -> str:
        """Last component of a path, extension included."""
        return PurePath(path).name

    @staticmethod
    def file_name_without_extension(path: str) -> str:
        """Last component of a path without its final extension."""
        return PurePath(path).stem

    @staticmethod
    def directory_from_path(path: str) -> str:
        """
        Every component of a path before the last one.

        ``/a/b/c.txt`` gives ``/a/b``; a bare file name gives "".
        """
        if not path:
            return ""
        return os.path.dirname(os.path.normpath(path))


def get_file_manager(config_path: str = "config.yaml") -> FileManager:
    """Get a FileManager configured from a YAML file."""
    return FileManager(settings=load_settings(config_path))
