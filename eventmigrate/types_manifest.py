"""Event manifest type definitions."""

from __future__ import annotations

from typing import TypedDict


class Manifest(TypedDict, total=False):
    id: str
    name: str
    start: str
    end: str
    location: str
    mapLink: str
    summary: str
    description: str
    banner: str


REQUIRED_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "start",
    "end",
    "location",
    "mapLink",
    "summary",
    "description",
    "banner",
)

# Fields naming a file inside the event directory.
ASSET_FIELDS: frozenset[str] = frozenset({"summary", "description", "banner"})
