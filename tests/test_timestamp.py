"""Test the date-time codec."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from zentral.sdk.timestamp import Timestamp, format_timestamp, parse_timestamp


class Event(BaseModel):
    created_at: Timestamp
    updated_at: Optional[Timestamp] = None


class TestTimestamp:
    """Test parsing and formatting Zentral date-times."""

    def test_parse(self):
        """Test parsing the wire format."""
        assert parse_timestamp("2022-07-22T01:02:03.444444") == datetime(2022, 7, 22, 1, 2, 3, 444444)

    def test_parse_without_microseconds(self):
        """Test parsing without microseconds."""
        assert parse_timestamp("2022-07-22T01:02:03") == datetime(2022, 7, 22, 1, 2, 3)

    def test_parse_utc_suffix(self):
        """Test parsing a Z suffix."""
        assert parse_timestamp("2022-07-22T01:02:03.500Z") == datetime(2022, 7, 22, 1, 2, 3, 500000)

    def test_parse_offset_is_converted_to_utc(self):
        """Test that offsets are converted to UTC."""
        assert parse_timestamp("2022-07-22T03:02:03+02:00") == datetime(2022, 7, 22, 1, 2, 3)

    def test_parse_invalid(self):
        """Test invalid timestamps."""
        with pytest.raises(ValueError):
            parse_timestamp("22/07/2022")

    def test_format(self):
        """Test formatting."""
        assert format_timestamp(datetime(2022, 7, 22, 1, 2, 3)) == "2022-07-22T01:02:03.000000"

    def test_format_aware(self):
        """Test formatting an aware datetime."""
        value = datetime(2022, 7, 22, 3, 2, 3, 444444, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2022-07-22T01:02:03.444444"

    def test_model_field(self):
        """Test a timestamp model field."""
        event = Event.model_validate_json(
            '{"created_at": "2022-07-22T01:02:03.444444", "updated_at": null}'
        )
        assert event.created_at == datetime(2022, 7, 22, 1, 2, 3, 444444)
        assert event.updated_at is None
        assert event.model_dump_json() == (
            '{"created_at":"2022-07-22T01:02:03.444444","updated_at":null}'
        )

    def test_model_field_invalid(self):
        """Test an invalid timestamp model field."""
        with pytest.raises(ValidationError):
            Event.model_validate({"created_at": "yolo"})
