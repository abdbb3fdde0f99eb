from pathlib import Path

import pytest
import yaml

from conftest import FIELDS
from eventmigrate.frontmatter import (
    banner_extension,
    banner_filename,
    build_front_matter,
    emit_front_matter,
    front_matter_fields,
)


@pytest.mark.parametrize(
    ("banner", "expected"),
    [
        ("banner.png", "png"),
        ("banner.final.JPG", "JPG"),
        ("images/banner", ""),
        ("banner", ""),
        ("banner.", ""),
    ],
)
def test_banner_extension_is_text_after_last_dot(banner, expected):
    assert banner_extension(banner) == expected


def test_banner_filename_keeps_trailing_dot_without_extension():
    assert banner_filename("talk", "banner") == "talk-banner."
    assert banner_filename("talk", "pic.jpeg", "-hero") == "talk-hero.jpeg"


def test_emit_front_matter_writes_values_verbatim():
    text = emit_front_matter(
        [("name", "Talk: part 1"), ("tags", ["a", "b"])],
        [("summary", "one\ntwo")],
    )

    assert text == "---\nname: Talk: part 1\ntags: a,b\nsummary: |\n  one\n  two\n---\n"


def test_emit_front_matter_honours_indent():
    text = emit_front_matter([], [("summary", "x")], indent=4)

    assert text == "---\nsummary: |\n    x\n---\n"


def test_front_matter_fields_drop_body_fields_and_rewrite_banner():
    manifest = dict(FIELDS, extra="kept")

    fields = front_matter_fields(manifest, Path("static/images"))

    assert [key for key, _ in fields] == [
        "id",
        "name",
        "start",
        "end",
        "location",
        "mapLink",
        "banner",
        "extra",
    ]
    assert dict(fields)["banner"] == "static/images/freshers-social-banner.png"


def test_build_front_matter_layout(make_event):
    event_dir = make_event()

    text = build_front_matter(dict(FIELDS), event_dir, Path("img"))

    assert text.startswith("---\nid: freshers-social\nname: Freshers Social\n")
    assert "banner: img/freshers-social-banner.png\n" in text
    assert "description:" not in text
    assert "summary: |\n  Welcome to uni.\n  Come and meet everyone!\n  \n---\n" in text
    assert text.endswith("---\n")


def test_summary_block_round_trips_through_yaml(make_event):
    event_dir = make_event()
    original = (event_dir / "summary.txt").read_text(encoding="utf-8")

    text = build_front_matter(dict(FIELDS), event_dir, Path("img"))
    body = text[len("---\n") : -len("---\n")]
    parsed = yaml.safe_load(body)

    assert parsed["summary"] == original
    assert "description" not in parsed


def test_string_image_dir_is_written_as_given():
    fields = dict(front_matter_fields(dict(FIELDS), "./static/img"))

    assert fields["banner"] == "./static/img/freshers-social-banner.png"
