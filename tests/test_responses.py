"""
Unit tests for player API response handling.
"""

import unittest
from xtream_channel_lister.responses import (
    UNNAMED_CHANNEL,
    Category,
    count_streams,
    extract_channel_names,
    is_valid_json,
    parse_categories
)


class TestIsValidJson(unittest.TestCase):
    """Test cases for is_valid_json."""

    def test_valid_json_values(self):
        self.assertTrue(is_valid_json('[]'))
        self.assertTrue(is_valid_json('{"user_info": {"auth": 0}}'))
        self.assertTrue(is_valid_json('42'))
        self.assertTrue(is_valid_json('"text"'))
        self.assertTrue(is_valid_json('null'))

    def test_invalid_json(self):
        self.assertFalse(is_valid_json(''))
        self.assertFalse(is_valid_json('   \n'))
        self.assertFalse(is_valid_json('<html><body>Access denied</body></html>'))
        self.assertFalse(is_valid_json('[{"name": "Ch1"}'))


class TestParseCategories(unittest.TestCase):
    """Test cases for parse_categories."""

    def test_keeps_provider_order(self):
        payload = [
            {"category_id": "3", "category_name": "Zeta"},
            {"category_id": "1", "category_name": "Alpha"},
        ]
        self.assertEqual(parse_categories(payload), [Category("3", "Zeta"), Category("1", "Alpha")])

    def test_skips_malformed_entries(self):
        payload = [
            {"category_id": "1", "category_name": "Good"},
            {"category_name": "No ID"},
            {"category_id": "2"},
            {"category_id": None, "category_name": "Null ID"},
            "not an object",
            {"category_id": 7, "category_name": "Numeric ID"},
        ]
        self.assertEqual(parse_categories(payload), [Category("1", "Good"), Category("7", "Numeric ID")])

    def test_non_list_payload(self):
        self.assertEqual(parse_categories({"user_info": {}}), [])


class TestExtractChannelNames(unittest.TestCase):
    """Test cases for extract_channel_names."""

    def test_names_in_order(self):
        payload = [{"name": "Ch1", "stream_id": 1}, {"name": "Ch2", "stream_id": 2}]
        self.assertEqual(extract_channel_names(payload), ["Ch1", "Ch2"])

    def test_missing_or_null_name(self):
        payload = [{"stream_id": 1}, {"name": None}]
        self.assertEqual(extract_channel_names(payload), [UNNAMED_CHANNEL, UNNAMED_CHANNEL])

    def test_empty_names_are_skipped(self):
        payload = [{"name": ""}, {"name": "Ch1"}]
        self.assertEqual(extract_channel_names(payload), ["Ch1"])

    def test_non_list_and_non_object_entries(self):
        self.assertEqual(extract_channel_names({"name": "Ch1"}), [])
        self.assertEqual(extract_channel_names(["Ch1", {"name": "Ch2"}]), ["Ch2"])

    def test_count_streams(self):
        self.assertEqual(count_streams([]), 0)
        self.assertEqual(count_streams([{"name": ""}, {}]), 2)
        self.assertEqual(count_streams({"a": 1}), 0)


if __name__ == '__main__':
    unittest.main()
