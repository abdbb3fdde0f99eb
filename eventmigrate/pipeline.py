"""Per-directory migration pipeline and the batch runner around it."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import ListingError
from .frontmatter import build_front_matter
from .io_utils import info, warn
from .manifest import load_manifest, validate_directory
from .models import DirectoryOutcome, MigrationConfig
from .output import build_file_contents, copy_banner, write_markdown
from .types_manifest import Manifest
from .util_fs import list_subdirectories


@dataclass
class TaskContext:
    """State threaded through the stages of one directory."""

    config: MigrationConfig
    source_dir: Path
    manifest: Optional[Manifest] = None
    front_matter: Optional[str] = None
    file_contents: Optional[str] = None
    banner_path: Optional[Path] = None
    markdown_path: Optional[Path] = None

    @property
    def name(self) -> str:
        return self.source_dir.name


def _validate_directory(ctx: TaskContext) -> None:
    validate_directory(ctx.source_dir, ctx.config.manifest_name)


def _validate_manifest(ctx: TaskContext) -> None:
    ctx.manifest = load_manifest(ctx.source_dir, ctx.config.manifest_name)


def _build_front_matter(ctx: TaskContext) -> None:
    ctx.front_matter = build_front_matter(
        ctx.manifest,
        ctx.source_dir,
        ctx.config.banner_prefix,
        banner_suffix=ctx.config.banner_suffix,
        indent=ctx.config.summary_indent,
    )


def _build_file_contents(ctx: TaskContext) -> None:
    ctx.file_contents = build_file_contents(ctx.front_matter, ctx.source_dir, ctx.manifest)


def _copy_banner(ctx: TaskContext) -> None:
    ctx.banner_path = copy_banner(
        ctx.manifest,
        ctx.source_dir,
        ctx.config.image_dir,
        banner_suffix=ctx.config.banner_suffix,
    )


def _write_markdown(ctx: TaskContext) -> None:
    ctx.markdown_path = write_markdown(ctx.file_contents, ctx.manifest, ctx.config.output_dir)


Stage = Tuple[str, Callable[[TaskContext], None]]

STAGES: Sequence[Stage] = (
    ("Validate directory", _validate_directory),
    ("Validate manifest", _validate_manifest),
    ("Build front matter", _build_front_matter),
    ("Build file contents", _build_file_contents),
    ("Copy banner", _copy_banner),
    ("Write markdown", _write_markdown),
)


async def migrate_directory(
    source_dir: Path, config: MigrationConfig, stages: Sequence[Stage] = STAGES
) -> DirectoryOutcome:
    """Run the stages in order for one directory, stopping at the first failure.

    Any exception raised by a stage ends up in the outcome.
    """

    ctx = TaskContext(config=config, source_dir=source_dir)
    for title, stage in stages:
        try:
            await asyncio.to_thread(stage, ctx)
        except Exception as exc:  # noqa: BLE001
            warn(f"[{ctx.name}] {title} ... failed: {exc}")
            return DirectoryOutcome(name=ctx.name, ok=False, failed_stage=title, error=str(exc))
        info(f"[{ctx.name}] {title} ... ok")
    return DirectoryOutcome(
        name=ctx.name,
        ok=True,
        markdown_path=ctx.markdown_path,
        banner_path=ctx.banner_path,
    )


def discover_directories(config: MigrationConfig) -> List[Path]:
    info(f"Looking for folders in {config.input_dir}")
    try:
        directories, others = list_subdirectories(config.input_dir)
    except OSError as exc:
        raise ListingError(config.input_dir, exc.strerror or str(exc)) from exc
    for entry in others:
        warn(f"Skipping {entry.name}: not a directory")
    info(f"Found {len(directories)} folders.")
    return directories


async def migrate_all(config: MigrationConfig) -> List[DirectoryOutcome]:
    """Migrate every event folder under the input root.

    Each folder runs as its own task; outcomes come back in folder order.
    Raises ListingError when the input root cannot be listed.
    """

    directories = discover_directories(config)
    tasks = [migrate_directory(directory, config) for directory in directories]
    results = await asyncio.gather(*tasks, return_exceptions=True)
    outcomes: List[DirectoryOutcome] = []
    for directory, result in zip(directories, results):
        if isinstance(result, BaseException):
            warn(f"[{directory.name}] failed: {result}")
            result = DirectoryOutcome(name=directory.name, ok=False, error=str(result))
        outcomes.append(result)
    return outcomes


def report_outcomes(outcomes: Sequence[DirectoryOutcome]) -> None:
    for outcome in outcomes:
        if outcome.ok:
            info(f"PASS {outcome.name} -> {outcome.markdown_path}")
        else:
            warn(f"FAIL {outcome.name} ({outcome.failed_stage}): {outcome.error}")
    migrated = sum(1 for outcome in outcomes if outcome.ok)
    info(f"Migrated {migrated} of {len(outcomes)} directories.")


__all__ = [
    "STAGES",
    "TaskContext",
    "discover_directories",
    "migrate_all",
    "migrate_directory",
    "report_outcomes",
]
