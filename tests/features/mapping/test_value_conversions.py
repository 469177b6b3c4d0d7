"""Tests for tag value conversions shared by every mapper."""

from __future__ import annotations

import pytest

from musicmeta.features.mapping.usecases._tag_utils import (
    fix_picture_mime_type,
    normalize_track,
    parse_genre,
    parse_slash_separated,
    parse_year,
    to_bool,
    to_float,
    to_int,
)
from musicmeta.shared.models import Picture, TrackNo


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("3/12", (3, 12)),
        ("3", (3, None)),
        ("/12", (None, 12)),
        ("x/y", (None, None)),
        ("", (None, None)),
    ],
)
def test_parse_slash_separated(value: str, expected: tuple[int | None, int | None]) -> None:
    assert parse_slash_separated(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, TrackNo(no=3)),
        ("3", TrackNo(no=3)),
        (" 3 / 12 ", TrackNo(no=3, of=12)),
        ((2, 9), TrackNo(no=2, of=9)),
        ((0, 0), TrackNo()),
        (TrackNo(no=1, of=1), TrackNo(no=1, of=1)),
    ],
)
def test_normalize_track(value: object, expected: TrackNo) -> None:
    assert normalize_track(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("(17)", "Rock"),
        ("17", "Rock"),
        ("(4)(Eurodisco)", "Disco/Eurodisco"),
        ("Jazz", "Jazz"),
        ("(999)", None),
        ("", None),
    ],
)
def test_parse_genre(value: str, expected: str | None) -> None:
    assert parse_genre(value) == expected


def test_parse_year() -> None:
    assert parse_year("2016-04-12") == 2016
    assert parse_year("1999") == 1999
    assert parse_year("99") is None
    assert parse_year("n/a 2001") is None


def test_scalar_conversions() -> None:
    assert to_int("42") == 42
    assert to_int("-1") == -1
    assert to_int("4.5") is None
    assert to_int(True) == 1
    assert to_float("0.25") == 0.25
    assert to_float("abc") is None
    assert to_bool("1") is True
    assert to_bool("true") is True
    assert to_bool("0") is False
    assert to_bool(1) is True


@pytest.mark.parametrize(
    ("mime", "expected"),
    [
        ("jpg", "image/jpeg"),
        ("image/jpg", "image/jpeg"),
        ("PNG", "image/png"),
        ("image/png", "image/png"),
    ],
)
def test_fix_picture_mime_type(mime: str, expected: str) -> None:
    picture = Picture(format=mime, data=b"\x89", description="front", type="Cover (front)")

    fixed = fix_picture_mime_type(picture)

    assert fixed.format == expected
    assert fixed.data == b"\x89"
    assert fixed.description == "front"
    assert fixed.type == "Cover (front)"
