"""Assembling, copying and writing the migrated files."""

from __future__ import annotations

import shutil
from pathlib import Path

from .frontmatter import banner_filename
from .types_manifest import Manifest
from .util_fs import read_text, write_text


def build_file_contents(front_matter: str, source_dir: Path, manifest: Manifest) -> str:
    """Append the description text verbatim after a blank line."""

    description = read_text(source_dir / manifest["description"])
    return f"{front_matter}\n{description}"


def copy_banner(
    manifest: Manifest, source_dir: Path, image_dir: Path, *, banner_suffix: str = "-banner"
) -> Path:
    """Copy the banner into image_dir under a name derived from the event id.

    image_dir must already exist; an existing copy is overwritten.
    """

    src = source_dir / manifest["banner"]
    dest = image_dir / banner_filename(manifest["id"], manifest["banner"], banner_suffix)
    shutil.copyfile(src, dest)
    return dest


def write_markdown(contents: str, manifest: Manifest, output_dir: Path) -> Path:
    return write_text(output_dir / f"{manifest['id']}.md", contents)


__all__ = ["build_file_contents", "copy_banner", "write_markdown"]
