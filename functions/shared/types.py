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

from enum import StrEnum
from dataclasses import dataclass, field
from typing import Dict, Optional


class DispatchOutcome(StrEnum):
    """How a single chat notification dispatch ended."""

    SENT = "SENT"
    MISSING_MESSAGE_DATA = "MISSING_MESSAGE_DATA"
    CHAT_NOT_FOUND = "CHAT_NOT_FOUND"
    CHAT_MISSING_PARTICIPANTS = "CHAT_MISSING_PARTICIPANTS"
    UNKNOWN_SENDER = "UNKNOWN_SENDER"
    RECIPIENT_NOT_FOUND = "RECIPIENT_NOT_FOUND"
    MISSING_FCM_TOKEN = "MISSING_FCM_TOKEN"
    LOOKUP_FAILED = "LOOKUP_FAILED"
    DELIVERY_FAILED = "DELIVERY_FAILED"


@dataclass
class Chat:
    """Chat metadata stored at chats/{chatId}."""

    teacher_username: Optional[str] = None
    parent_username: Optional[str] = None


@dataclass
class ChatMessage:
    """A message stored at chats/{chatId}/messages/{messageId}."""

    sender: Optional[str] = None
    text: Optional[str] = None


@dataclass
class DirectoryEntry:
    """A user in the teachers or parents collection."""

    username: Optional[str] = None
    fcm_token: Optional[str] = None


@dataclass
class Recipient:
    collection: str
    username: str


@dataclass
class ChatNotification:
    """Push notification payload addressed to a single device token."""

    title: str
    body: str
    token: str
    data: Dict[str, str] = field(default_factory=dict)


@dataclass
class DispatchResult:
    outcome: DispatchOutcome
    chat_id: str
    sender: Optional[str] = None
    recipient: Optional[Recipient] = None
    message_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def sent(self) -> bool:
        return self.outcome == DispatchOutcome.SENT
