from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from maps_api_client.core.query import (
    encode_query,
    format_timestamp,
    percent_encode,
    to_datetime,
    to_epoch_seconds,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Toronto", "Toronto"),
        ("Toronto, ON", "Toronto%2C%20ON"),
        ("a-b_c.d~e", "a%2Db%5Fc%2Ed%7Ee"),
        ("tolls|ferries", "tolls%7Cferries"),
        ("place_id:ChIJ", "place%5Fid%3AChIJ"),
        ("Zürich", "Z%C3%BCrich"),
        ("", ""),
    ],
)
def test_percent_encode_keeps_only_ascii_alphanumerics(text, expected):
    assert percent_encode(text) == expected


def test_encode_query_joins_pairs_in_order():
    pairs = [("origin", "A B"), ("key", "k"), ("mode", "driving")]
    assert encode_query(pairs) == "origin=A%20B&key=k&mode=driving"


def test_to_epoch_seconds_treats_naive_datetime_as_utc():
    assert to_epoch_seconds(datetime(2026, 1, 1)) == 1767225600
    aware = datetime(2026, 1, 1, 9, tzinfo=timezone(timedelta(hours=9)))
    assert to_epoch_seconds(aware) == 1767225600


def test_to_epoch_seconds_passes_integers_through():
    assert to_epoch_seconds(1700000000) == 1700000000


def test_timestamp_helpers_reject_bool():
    with pytest.raises(TypeError):
        to_epoch_seconds(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        to_datetime(False)  # type: ignore[arg-type]


def test_to_datetime_converts_epoch_seconds_to_utc():
    assert to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_format_timestamp_uses_twelve_hour_clock():
    assert format_timestamp(datetime(2026, 3, 4, 15, 6, 7)) == "2026-03-04 03:06:07 PM"
