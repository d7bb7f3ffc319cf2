import os
import unittest
from unittest.mock import patch

from chat_notifications.config import Settings, get_settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        settings = Settings(_env_file=None)
        self.assertEqual(settings.function_region, "us-central1")
        self.assertEqual(settings.chat_notification_default_body, "(No text message)")
        self.assertFalse(settings.chat_notification_dry_run)

    @patch.dict(
        os.environ,
        {"CHAT_NOTIFICATION_DRY_RUN": "true", "FUNCTION_REGION": "europe-west1"},
    )
    def test_reads_environment(self):
        settings = Settings(_env_file=None)
        self.assertTrue(settings.chat_notification_dry_run)
        self.assertEqual(settings.function_region, "europe-west1")

    def test_get_settings_is_cached(self):
        self.assertIs(get_settings(), get_settings())


if __name__ == "__main__":
    unittest.main()
