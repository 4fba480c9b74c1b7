import unittest
from datetime import datetime, timedelta, timezone

from app.utils.time_utils import ensure_utc, parse_timestamp, utcnow


class TestTimeUtils(unittest.TestCase):
    def test_utcnow_is_aware(self):
        self.assertEqual(utcnow().tzinfo, timezone.utc)

    def test_ensure_utc_naive_is_treated_as_utc(self):
        self.assertEqual(
            ensure_utc(datetime(2024, 1, 1, 8, 0)),
            datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc),
        )

    def test_ensure_utc_converts_offsets(self):
        plus_two = timezone(timedelta(hours=2))
        converted = ensure_utc(datetime(2024, 1, 1, 10, 0, tzinfo=plus_two))
        self.assertEqual(converted, datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc))
        self.assertEqual(converted.tzinfo, timezone.utc)

    def test_parse_timestamp_strings(self):
        expected = datetime(2024, 3, 5, 7, 30, tzinfo=timezone.utc)
        self.assertEqual(parse_timestamp("2024-03-05T07:30:00Z"), expected)
        self.assertEqual(parse_timestamp("2024-03-05T09:30:00+02:00"), expected)
        self.assertEqual(parse_timestamp("2024-03-05 07:30:00"), expected)

    def test_parse_timestamp_unusable_values(self):
        for value in (None, "", "   ", "not a date", 12345):
            self.assertIsNone(parse_timestamp(value))
