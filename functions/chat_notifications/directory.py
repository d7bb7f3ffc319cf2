# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Firestore reads used to resolve chats and recipients."""

from typing import Optional

from dacite import from_dict, Config
from google.cloud.firestore_v1.base_query import FieldFilter

from shared.firebase_constants import CHATS_COLLECTION, USERNAME_FIELD
from shared.json_utils import convert_keys
from shared.types import Chat, DirectoryEntry, Recipient


def get_chat(db, chat_id: str) -> Optional[Chat]:
    """Loads chats/{chat_id}, or returns None if the document does not exist."""
    doc = db.collection(CHATS_COLLECTION).document(chat_id).get()
    if not doc.exists:
        return None
    return from_dict(
        data_class=Chat,
        data=convert_keys(doc.to_dict() or {}, "camel_to_snake"),
        config=Config(check_types=False),
    )


def lookup_directory_entry(db, recipient: Recipient) -> Optional[DirectoryEntry]:
    """
    Finds the recipient's profile in the teachers or parents collection.

    Usernames are stored as a field rather than as the document id, so this
    runs an equality query and keeps the first match.
    """
    docs = (
        db.collection(recipient.collection)
        .where(filter=FieldFilter(USERNAME_FIELD, "==", recipient.username))
        .limit(1)
        .get()
    )
    if not docs:
        return None
    return from_dict(
        data_class=DirectoryEntry,
        data=convert_keys(docs[0].to_dict() or {}, "camel_to_snake"),
        config=Config(check_types=False),
    )
