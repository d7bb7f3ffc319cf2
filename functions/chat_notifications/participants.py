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
"""Works out which chat participant should receive a notification."""

from typing import Optional

from shared.firebase_constants import PARENTS_COLLECTION, TEACHERS_COLLECTION
from shared.types import Chat, Recipient


def has_participants(chat: Chat) -> bool:
    return bool(chat.teacher_username) and bool(chat.parent_username)


def resolve_recipient(chat: Chat, sender: str) -> Optional[Recipient]:
    """
    Returns the participant on the other side of the chat from `sender`.

    A teacher's message goes to the parent and a parent's message goes to the
    teacher. Returns None when `sender` is neither participant.
    """
    if sender == chat.teacher_username:
        return Recipient(collection=PARENTS_COLLECTION, username=chat.parent_username)
    if sender == chat.parent_username:
        return Recipient(collection=TEACHERS_COLLECTION, username=chat.teacher_username)
    return None
