"""Exceptions raised while migrating event directories."""

from __future__ import annotations

from pathlib import Path


class MigrationError(Exception):
    """Base class for failures that abort a single directory or the run."""


class ListingError(MigrationError):
    """The input root could not be enumerated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot list {path}: {reason}")
        self.path = path


class MissingManifestFile(MigrationError):
    def __init__(self, directory: Path, manifest_name: str) -> None:
        super().__init__(f"No {manifest_name} in {directory.name}")
        self.directory = directory
        self.manifest_name = manifest_name


class ManifestParseError(MigrationError):
    """The manifest is not a YAML sequence holding a mapping."""


class MissingField(MigrationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing field: {field}")
        self.field = field


class UnresolvableAsset(MigrationError):
    def __init__(self, field: str, path: str) -> None:
        super().__init__(f"Cannot open {field}: {path}")
        self.field = field
        self.path = path


__all__ = [
    "ListingError",
    "ManifestParseError",
    "MigrationError",
    "MissingField",
    "MissingManifestFile",
    "UnresolvableAsset",
]
