"""Parsing and validation of event manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import ManifestParseError, MissingField, MissingManifestFile, UnresolvableAsset
from .types_manifest import ASSET_FIELDS, REQUIRED_FIELDS, Manifest
from .util_fs import read_text


def parse_manifest(raw: str) -> Manifest:
    """Return the first mapping of a manifest document.

    Scalars are loaded with ``BaseLoader`` so every value keeps the exact
    text written in the file. Missing keys are left for ``validate_manifest``.
    """

    try:
        document: Any = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Invalid YAML: {exc}") from exc

    if not isinstance(document, list) or not document:
        raise ManifestParseError("Manifest must be a YAML sequence with one mapping")
    first = document[0]
    if not isinstance(first, dict):
        raise ManifestParseError("First manifest entry must be a mapping")
    return first  # type: ignore[return-value]


def validate_directory(directory: Path, manifest_name: str = "manifest.yml") -> Path:
    """Ensure the event directory holds a manifest and return its path."""

    manifest_path = directory / manifest_name
    if not manifest_path.is_file():
        raise MissingManifestFile(directory, manifest_name)
    return manifest_path


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and not value)


def _resolves_inside(directory: Path, relative: str) -> bool:
    if Path(relative).is_absolute():
        return False
    target = directory / relative
    return target.resolve().is_relative_to(directory.resolve()) and target.is_file()


def validate_manifest(manifest: Manifest, directory: Path) -> Manifest:
    """Check required fields in order, resolving asset paths as they come.

    The first problem wins: an asset field is checked for existence on disk
    before the next field is looked at. Asset paths must stay inside directory.
    """

    for field in REQUIRED_FIELDS:
        value = manifest.get(field)
        if _is_missing(value):
            raise MissingField(field)
        if field in ASSET_FIELDS:
            if not isinstance(value, str) or not _resolves_inside(directory, value):
                raise UnresolvableAsset(field, str(value))
    return manifest


def load_manifest(directory: Path, manifest_name: str = "manifest.yml") -> Manifest:
    """Read, parse and validate the manifest of an event directory."""

    raw = read_text(directory / manifest_name)
    return validate_manifest(parse_manifest(raw), directory)


__all__ = ["load_manifest", "parse_manifest", "validate_directory", "validate_manifest"]
