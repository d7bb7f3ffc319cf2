import os
import unittest
from unittest.mock import patch

from firebase_admin import messaging

from chat_notifications.config import Settings
from chat_notifications.sender import (
    build_chat_notification,
    send_chat_notification,
    to_fcm_message,
)
from shared.types import ChatNotification


class SenderTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings()

    def test_build_chat_notification(self):
        notification = build_chat_notification(
            sender="t1", text="Hello", chat_id="c1", token="TOK123",
            settings=self.settings,
        )
        self.assertEqual(
            notification,
            ChatNotification(
                title="💬 New message from t1",
                body="Hello",
                token="TOK123",
                data={"click_action": "FLUTTER_NOTIFICATION_CLICK", "chatId": "c1"},
            ),
        )

    def test_build_uses_configured_title_and_click_action(self):
        settings = Settings(
            chat_notification_title="{sender} wrote",
            chat_notification_click_action="OPEN_CHAT",
        )
        notification = build_chat_notification(
            sender="p1", text="Hi", chat_id="c9", token="T", settings=settings
        )
        self.assertEqual(notification.title, "p1 wrote")
        self.assertEqual(notification.data["click_action"], "OPEN_CHAT")

    def test_to_fcm_message(self):
        message = to_fcm_message(
            ChatNotification(title="t", body="b", token="TOK", data={"chatId": "c1"})
        )
        self.assertIsInstance(message, messaging.Message)
        self.assertEqual(message.token, "TOK")
        self.assertEqual(message.notification.title, "t")
        self.assertEqual(message.notification.body, "b")
        self.assertEqual(message.data, {"chatId": "c1"})

    @patch.dict(os.environ, {"FUNCTIONS_EMULATOR": "false"})
    @patch("chat_notifications.sender.messaging.send")
    def test_send_returns_message_id(self, mock_send):
        mock_send.return_value = "projects/p/messages/1"
        notification = ChatNotification(title="t", body="b", token="TOK")

        message_id = send_chat_notification(notification, self.settings)

        self.assertEqual(message_id, "projects/p/messages/1")
        self.assertFalse(mock_send.call_args.kwargs["dry_run"])
        self.assertEqual(mock_send.call_args.args[0].token, "TOK")

    @patch.dict(os.environ, {"FUNCTIONS_EMULATOR": "true"})
    @patch("chat_notifications.sender.messaging.send")
    def test_send_is_dry_run_in_emulator(self, mock_send):
        send_chat_notification(
            ChatNotification(title="t", body="b", token="TOK"), self.settings
        )
        self.assertTrue(mock_send.call_args.kwargs["dry_run"])

    @patch.dict(os.environ, {"FUNCTIONS_EMULATOR": "false"})
    @patch("chat_notifications.sender.messaging.send")
    def test_send_is_dry_run_when_configured(self, mock_send):
        send_chat_notification(
            ChatNotification(title="t", body="b", token="TOK"),
            Settings(chat_notification_dry_run=True),
        )
        self.assertTrue(mock_send.call_args.kwargs["dry_run"])


if __name__ == "__main__":
    unittest.main()
