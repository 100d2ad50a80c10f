"""
Unit tests for utility module.
"""

import logging
import unittest
from unittest.mock import patch

from xtream_channel_lister.utils import (
    SanitizedLogger,
    first_lines,
    mask_url,
    register_secret,
    sanitize_log_message
)


class TestSanitizing(unittest.TestCase):
    """Test cases for log sanitizing."""

    def test_mask_url_hides_password_parameter(self):
        url = 'http://panel.example.com:8080/player_api.php?username=alice&password=hunter22&action=get_live_categories'
        self.assertEqual(
            mask_url(url),
            'http://panel.example.com:8080/player_api.php?username=alice&password=********&action=get_live_categories'
        )

    def test_mask_url_hides_embedded_credentials(self):
        self.assertEqual(mask_url('https://user:pw@storage.example.com/bucket'), 'https://***@storage.example.com/bucket')

    @patch.dict('os.environ', {}, clear=True)
    def test_registered_secret_is_masked(self):
        register_secret('correct-horse-battery')
        message = sanitize_log_message("Password correct-horse-battery rejected")
        self.assertNotIn('correct-horse-battery', message)
        self.assertTrue(message.startswith("Password cor"))

    @patch.dict('os.environ', {'XTREAM_PASSWORD': 'envpass1'}, clear=True)
    def test_password_from_environment_is_masked(self):
        self.assertEqual(sanitize_log_message("using envpass1"), "using ********")

    @patch.dict('os.environ', {}, clear=True)
    def test_short_secret_only_masked_in_urls(self):
        register_secret('ew')
        message = sanitize_log_message(
            "Failed to fetch streams for category 'UK News' "
            "from http://panel.example.com/player_api.php?username=a&password=ew&action=get_live_streams"
        )
        self.assertIn("category 'UK News'", message)
        self.assertIn("password=********&", message)
        self.assertNotIn("password=ew", message)

    def test_sanitized_logger(self):
        logger = SanitizedLogger(logging.getLogger('xtream_channel_lister.tests'))
        with self.assertLogs('xtream_channel_lister.tests', level='INFO') as logs:
            logger.info('GET http://panel.example.com/player_api.php?username=a&password=b&action=x')
        self.assertIn('password=********', logs.output[0])
        self.assertNotIn('password=b&', logs.output[0])

    def test_first_lines(self):
        text = "\n".join(str(i) for i in range(20))
        self.assertEqual(first_lines(text), [str(i) for i in range(10)])
        self.assertEqual(first_lines("one"), ["one"])
        self.assertEqual(first_lines(""), [])


if __name__ == '__main__':
    unittest.main()
