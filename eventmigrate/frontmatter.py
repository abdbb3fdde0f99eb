"""Front matter emission for migrated event pages."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

from .types_manifest import Manifest
from .util_fs import read_text

FENCE = "---"

# Keys that never appear as plain scalars in the front matter.
_BODY_FIELDS = ("summary", "description")


def banner_extension(banner: str) -> str:
    """Return the text after the last dot of the banner path, or ''."""

    _, dot, extension = banner.rpartition(".")
    return extension if dot else ""


def banner_filename(event_id: str, banner: str, suffix: str = "-banner") -> str:
    return f"{event_id}{suffix}.{banner_extension(banner)}"


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(_scalar_text(item) for item in value)
    return str(value)


def emit_front_matter(
    pairs: Iterable[Tuple[str, Any]],
    block_scalars: Sequence[Tuple[str, str]] = (),
    *,
    indent: int = 2,
) -> str:
    """Render a front matter block with one ``key: value`` line per pair.

    Values are written as-is without YAML quoting. Each block scalar becomes a
    ``key: |`` header followed by every line of its text, indented by
    ``indent`` spaces.
    """

    pad = " " * indent
    lines: List[str] = [FENCE]
    for key, value in pairs:
        lines.append(f"{key}: {_scalar_text(value)}")
    for key, text in block_scalars:
        lines.append(f"{key}: |")
        lines.extend(f"{pad}{line}" for line in text.split("\n"))
    lines.append(FENCE)
    return "\n".join(lines) + "\n"


def front_matter_fields(
    manifest: Mapping[str, Any], image_dir: Union[str, Path], *, banner_suffix: str = "-banner"
) -> List[Tuple[str, Any]]:
    """Manifest entries for the front matter, with banner pointing at its copy.

    A string image_dir is written exactly as given.
    """

    fields: List[Tuple[str, Any]] = []
    for key, value in manifest.items():
        if key in _BODY_FIELDS:
            continue
        if key == "banner":
            name = banner_filename(manifest["id"], value, banner_suffix)
            prefix = image_dir if isinstance(image_dir, str) else image_dir.as_posix()
            value = f"{prefix}/{name}"
        fields.append((key, value))
    return fields


def build_front_matter(
    manifest: Manifest,
    source_dir: Path,
    image_dir: Union[str, Path],
    *,
    banner_suffix: str = "-banner",
    indent: int = 2,
) -> str:
    summary = read_text(source_dir / manifest["summary"])
    fields = front_matter_fields(manifest, image_dir, banner_suffix=banner_suffix)
    return emit_front_matter(fields, [("summary", summary)], indent=indent)


__all__ = [
    "banner_extension",
    "banner_filename",
    "build_front_matter",
    "emit_front_matter",
    "front_matter_fields",
]
