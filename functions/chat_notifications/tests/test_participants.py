import unittest

from chat_notifications.participants import has_participants, resolve_recipient
from shared.types import Chat, Recipient


class ParticipantsTests(unittest.TestCase):
    def setUp(self):
        self.chat = Chat(teacher_username="t1", parent_username="p1")

    def test_teacher_message_goes_to_parent(self):
        self.assertEqual(
            resolve_recipient(self.chat, "t1"),
            Recipient(collection="parents", username="p1"),
        )

    def test_parent_message_goes_to_teacher(self):
        self.assertEqual(
            resolve_recipient(self.chat, "p1"),
            Recipient(collection="teachers", username="t1"),
        )

    def test_unknown_sender(self):
        self.assertIsNone(resolve_recipient(self.chat, "someone-else"))
        self.assertIsNone(resolve_recipient(self.chat, "Unknown"))

    def test_teacher_wins_when_usernames_collide(self):
        chat = Chat(teacher_username="same", parent_username="same")
        self.assertEqual(resolve_recipient(chat, "same").collection, "parents")

    def test_has_participants(self):
        self.assertTrue(has_participants(self.chat))
        self.assertFalse(has_participants(Chat(teacher_username="t1")))
        self.assertFalse(has_participants(Chat(teacher_username="", parent_username="p1")))
        self.assertFalse(has_participants(Chat()))


if __name__ == "__main__":
    unittest.main()
