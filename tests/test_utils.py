"""Tests for utility modules."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from mailosaur.types import Message, MessageSummary
from mailosaur.utils import format_rfc3339, parse_iso_timestamp
from mailosaur.utils.message_utils import (
    parse_addresses,
    parse_message,
    parse_message_list,
    parse_message_summary,
)


class TestFormatRfc3339:
    """Tests for format_rfc3339."""

    def test_utc_uses_z(self) -> None:
        """Test UTC timestamps end in Z."""
        assert format_rfc3339(datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)) == (
            "2006-01-02T15:04:05Z"
        )

    def test_negative_offset(self) -> None:
        """Test negative offsets are written as -HH:MM."""
        tz = timezone(-timedelta(hours=7))
        assert format_rfc3339(datetime(2006, 1, 2, 15, 4, 5, tzinfo=tz)) == (
            "2006-01-02T15:04:05-07:00"
        )

    def test_positive_offset_with_minutes(self) -> None:
        """Test offsets with minutes are written in full."""
        tz = timezone(timedelta(hours=5, minutes=30))
        assert format_rfc3339(datetime(2020, 12, 31, 23, 59, 59, tzinfo=tz)) == (
            "2020-12-31T23:59:59+05:30"
        )

    def test_microseconds_dropped(self) -> None:
        """Test sub-second precision is not sent."""
        value = datetime(2020, 1, 1, 0, 0, 0, 987654, tzinfo=timezone.utc)
        assert format_rfc3339(value) == "2020-01-01T00:00:00Z"

    def test_naive_treated_as_utc(self) -> None:
        """Test naive datetimes are formatted as UTC."""
        assert format_rfc3339(datetime(2020, 1, 1, 8, 0, 0)) == "2020-01-01T08:00:00Z"


class TestParseIsoTimestamp:
    """Tests for parse_iso_timestamp."""

    def test_z_suffix(self) -> None:
        """Test the Z suffix parses as UTC."""
        assert parse_iso_timestamp("2019-03-04T15:43:48Z") == datetime(
            2019, 3, 4, 15, 43, 48, tzinfo=timezone.utc
        )

    def test_seven_digit_fraction(self) -> None:
        """Test fractions longer than microseconds are truncated."""
        parsed = parse_iso_timestamp("2019-03-04T15:43:48.1234567Z")
        assert parsed.microsecond == 123456

    def test_short_fraction(self) -> None:
        """Test short fractions are padded."""
        assert parse_iso_timestamp("2019-03-04T15:43:48.5+00:00").microsecond == 500000

    def test_round_trips_format(self) -> None:
        """Test formatted timestamps parse back to the same instant."""
        value = datetime(2021, 7, 8, 9, 10, 11, tzinfo=timezone(timedelta(hours=-3)))
        assert parse_iso_timestamp(format_rfc3339(value)) == value

    def test_invalid(self) -> None:
        """Test malformed timestamps raise ValueError."""
        with pytest.raises(ValueError):
            parse_iso_timestamp("yesterday")

    @pytest.mark.parametrize(
        "value", ["2019-03-04T15:43:48", "2019-03-04", "2019-03-04T15:43:48.123"]
    )
    def test_missing_offset_rejected(self, value: str) -> None:
        """Test timestamps without a UTC offset raise ValueError."""
        with pytest.raises(ValueError, match="UTC offset"):
            parse_iso_timestamp(value)


class TestParseMessages:
    """Tests for message decoding."""

    def test_parse_addresses_none(self) -> None:
        """Test a missing address list is empty."""
        assert parse_addresses(None) == []

    def test_parse_addresses_null_values(self) -> None:
        """Test null address fields decode as empty strings."""
        assert parse_addresses([{"name": None, "email": "a@b.c"}]) == [
            {"name": "", "email": "a@b.c"}
        ]

    def test_parse_addresses_rejects_non_list(self) -> None:
        """Test an address field that is not a list is rejected."""
        with pytest.raises(TypeError):
            parse_addresses("a@b.c")

    def test_parse_message_missing_fields_use_zero_values(self) -> None:
        """Test absent fields decode to zero values."""
        message = parse_message({"id": "abc"})
        assert message == Message(id="abc")

    def test_parse_message_wire_names(self) -> None:
        """Test from and hateosLinks map to their Python names."""
        message = parse_message(
            {
                "id": "abc",
                "from": [{"email": "x@example.com"}],
                "hateosLinks": [{"rel": "self"}],
                "html": None,
            }
        )
        assert message.from_ == [{"email": "x@example.com"}]
        assert message.hateos_links == [{"rel": "self"}]
        assert message.html is None

    def test_parse_message_bad_timestamp(self) -> None:
        """Test a malformed received timestamp is a ValueError."""
        with pytest.raises(ValueError):
            parse_message({"id": "abc", "received": "not a date"})

    def test_parse_message_naive_timestamp(self) -> None:
        """Test a received timestamp without an offset is a ValueError."""
        with pytest.raises(ValueError):
            parse_message({"id": "abc", "received": "2019-03-04T15:43:48"})

    def test_parse_message_empty_timestamp(self) -> None:
        """Test an empty received string is rejected rather than treated as absent."""
        with pytest.raises(ValueError):
            parse_message({"id": "abc", "received": ""})

    def test_parse_message_null_timestamp(self) -> None:
        """Test a null received field decodes to None."""
        assert parse_message({"id": "abc", "received": None}).received is None

    def test_parse_message_wrong_field_type(self) -> None:
        """Test a non-string subject is a TypeError."""
        with pytest.raises(TypeError):
            parse_message({"id": "abc", "subject": 42})

    def test_parse_summary_attachment_count(self) -> None:
        """Test summaries carry the attachment count."""
        summary = parse_message_summary({"id": "abc", "attachments": 3})
        assert summary == MessageSummary(id="abc", attachments=3)

    def test_parse_summary_rejects_attachment_list(self) -> None:
        """Test a full attachment list is not accepted as a count."""
        with pytest.raises(TypeError):
            parse_message_summary({"id": "abc", "attachments": [{"id": "x"}]})

    def test_parse_message_list_keeps_order(self) -> None:
        """Test summaries keep server order."""
        summaries = parse_message_list({"items": [{"id": "2"}, {"id": "1"}]})
        assert [s.id for s in summaries] == ["2", "1"]

    def test_parse_message_list_rejects_non_object(self) -> None:
        """Test a top-level array is not a valid envelope."""
        with pytest.raises(TypeError):
            parse_message_list([{"id": "1"}])

    def test_parse_message_list_rejects_non_object_item(self) -> None:
        """Test items must be objects."""
        with pytest.raises(TypeError):
            parse_message_list({"items": ["1"]})
