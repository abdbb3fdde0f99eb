"""Configuration and result models for event migration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MigrationConfig(BaseModel):
    """Paths and naming rules for one migration run."""

    input_dir: Path = Field(..., alias="in", description="Root holding one folder per event.")
    output_dir: Path = Field(
        ..., alias="out", description="Existing directory receiving {id}.md files."
    )
    image_dir: Path = Field(
        ..., alias="images", description="Existing directory receiving banner images."
    )
    manifest_name: str = Field(
        "manifest.yml", description="File every event folder must contain."
    )
    banner_suffix: str = Field(
        "-banner", description="Appended to the event id when naming the banner copy."
    )
    summary_indent: int = Field(
        2, ge=1, description="Spaces prefixed to each line of the summary block."
    )
    banner_prefix: str = Field(
        "", description="Directory written before banner names in front matter, as given."
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_banner_prefix(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("banner_prefix"):
            images = data.get("images", data.get("image_dir"))
            if isinstance(images, Path):
                images = images.as_posix()
            if images is not None:
                data = {**data, "banner_prefix": str(images)}
        return data


@dataclass
class DirectoryOutcome:
    """Result of migrating a single event directory."""

    name: str
    ok: bool
    failed_stage: Optional[str] = None
    error: Optional[str] = None
    markdown_path: Optional[Path] = None
    banner_path: Optional[Path] = None
