from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

FIELDS = {
    "id": "freshers-social",
    "name": "Freshers Social",
    "start": "2019-10-01 18:00",
    "end": "2019-10-01 21:00",
    "location": "The Courtyard",
    "mapLink": "https://maps.example.org/?q=courtyard",
    "summary": "summary.txt",
    "description": "description.md",
    "banner": "banner.png",
}


def manifest_yaml(fields: Dict[str, str]) -> str:
    lines = []
    for index, (key, value) in enumerate(fields.items()):
        prefix = "- " if index == 0 else "  "
        lines.append(f"{prefix}{key}: {value}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_event(tmp_path: Path) -> Callable[..., Path]:
    """Create an event folder under tmp_path/events with all assets present."""

    def _make(
        name: str = "freshers",
        *,
        drop: Optional[str] = None,
        missing_files: tuple = (),
        **overrides: str,
    ) -> Path:
        event_dir = tmp_path / "events" / name
        event_dir.mkdir(parents=True)
        fields = dict(FIELDS, **overrides)
        if drop:
            del fields[drop]
        (event_dir / "manifest.yml").write_text(manifest_yaml(fields), encoding="utf-8")
        assets = {
            "summary": "Welcome to uni.\nCome and meet everyone!\n",
            "description": "# Freshers\n\nFree pizza.\n",
            "banner": "PNGDATA",
        }
        for field, content in assets.items():
            target = fields.get(field)
            if target and field not in missing_files:
                (event_dir / target).write_text(content, encoding="utf-8")
        return event_dir

    return _make
