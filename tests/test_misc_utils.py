from datetime import datetime, timezone

import pytest

from mention_tracker.utils.misc_utils import parse_article_date


class TestParseArticleDate:
    def test_iso_date(self) -> None:
        assert parse_article_date("2024-05-01") == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_iso_datetime_with_z(self) -> None:
        assert parse_article_date("2024-05-01T10:30:00Z") == datetime(
            2024, 5, 1, 10, 30, tzinfo=timezone.utc
        )

    def test_offset_is_converted_to_utc(self) -> None:
        assert parse_article_date("2024-05-01T01:00:00+02:00") == datetime(
            2024, 4, 30, 23, 0, tzinfo=timezone.utc
        )

    def test_rfc_2822(self) -> None:
        assert parse_article_date("Wed, 01 May 2024 10:30:00 GMT") == datetime(
            2024, 5, 1, 10, 30, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("value", [None, "", "yesterday", 20240501])
    def test_unparseable(self, value: object) -> None:
        assert parse_article_date(value) is None  # type: ignore[arg-type]

    def test_out_of_range_offset(self) -> None:
        assert parse_article_date("0001-01-01T00:00:00+01:00") is None
