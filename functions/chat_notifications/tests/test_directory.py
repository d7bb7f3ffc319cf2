import unittest
from unittest.mock import MagicMock

from google.cloud.firestore_v1.base_query import FieldFilter

from chat_notifications.directory import get_chat, lookup_directory_entry
from main_testing_utils import create_mock_classroom_db
from shared.types import Chat, DirectoryEntry, Recipient


class DirectoryTests(unittest.TestCase):
    def setUp(self):
        self.db = create_mock_classroom_db(teacher_token=None, parent_token="TOK123")

    def test_get_chat(self):
        self.assertEqual(
            get_chat(self.db, "c1"), Chat(teacher_username="t1", parent_username="p1")
        )

    def test_get_chat_missing(self):
        self.assertIsNone(get_chat(self.db, "nope"))

    def test_lookup_entry_with_token(self):
        entry = lookup_directory_entry(self.db, Recipient("parents", "p1"))
        self.assertEqual(entry, DirectoryEntry(username="p1", fcm_token="TOK123"))

    def test_lookup_entry_without_token(self):
        entry = lookup_directory_entry(self.db, Recipient("teachers", "t1"))
        self.assertEqual(entry.username, "t1")
        self.assertIsNone(entry.fcm_token)

    def test_lookup_entry_missing(self):
        self.assertIsNone(lookup_directory_entry(self.db, Recipient("parents", "p2")))

    def test_lookup_queries_username_with_limit(self):
        db = MagicMock()
        query = db.collection.return_value.where.return_value
        query.limit.return_value.get.return_value = []

        lookup_directory_entry(db, Recipient("teachers", "t1"))

        db.collection.assert_called_once_with("teachers")
        used_filter = db.collection.return_value.where.call_args.kwargs["filter"]
        self.assertIsInstance(used_filter, FieldFilter)
        self.assertEqual(used_filter.field_path, "username")
        self.assertEqual(used_filter.op_string, "==")
        self.assertEqual(used_filter.value, "t1")
        query.limit.assert_called_once_with(1)


if __name__ == "__main__":
    unittest.main()
