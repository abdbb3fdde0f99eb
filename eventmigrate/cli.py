"""CLI entrypoint for migrating event folders to Markdown pages."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .errors import ListingError
from .io_utils import info, warn
from .models import MigrationConfig
from .pipeline import migrate_all, report_outcomes

USAGE = (
    "Usage: migrate-events --in <source directory> --out <markdown output directory> "
    "--images <images output directory>"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migrate-events",
        description="Migrate event manifests into Markdown pages with YAML front matter",
        usage=USAGE[len("Usage: ") :],
        add_help=False,
    )
    parser.add_argument("-i", "--in", dest="input", help="Directory holding one folder per event")
    parser.add_argument("-o", "--out", dest="output", help="Output directory for Markdown files")
    parser.add_argument(
        "--images", "--img", dest="images", help="Output directory for banner images"
    )
    parser.add_argument("-h", "--help", action="store_true", dest="show_help", help="Show usage")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.show_help or not (args.input and args.output and args.images):
        info(USAGE)
        return 0

    try:
        config = MigrationConfig.model_validate(
            {"in": args.input, "out": args.output, "images": args.images}
        )
    except ValidationError as exc:
        warn(f"Invalid arguments: {exc}")
        return 1

    info("Event Migration Tool")
    try:
        outcomes = asyncio.run(migrate_all(config))
    except ListingError as exc:
        warn(str(exc))
        return 1
    except Exception as exc:  # noqa: BLE001
        warn(f"Migration aborted: {exc}")
        return 1

    report_outcomes(outcomes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
