"""Filesystem utilities for eventmigrate."""

from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


def list_subdirectories(root: PathLike) -> tuple[List[Path], List[Path]]:
    """Return (directories, other entries) directly under root, sorted by name.

    Raises OSError when root cannot be listed.
    """

    directories: List[Path] = []
    others: List[Path] = []
    for entry in sorted(Path(root).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            directories.append(entry)
        else:
            others.append(entry)
    return directories, others


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file inside an existing directory."""

    file_path = Path(path)
    # newline="" keeps the document byte-for-byte on every platform.
    with file_path.open("w", encoding=encoding, newline="") as fh:
        fh.write(content)
    return file_path


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    with Path(path).open("r", encoding=encoding, newline="") as fh:
        return fh.read()


__all__ = ["list_subdirectories", "read_text", "write_text"]
