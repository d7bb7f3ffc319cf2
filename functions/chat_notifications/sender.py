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
"""Builds chat notifications and delivers them with Firebase Cloud Messaging."""

import os
from typing import Optional

from firebase_admin import messaging

from chat_notifications.config import Settings, get_settings
from shared.firebase_constants import CHAT_ID_PARAM
from shared.types import ChatNotification


def _is_locally_emulated() -> bool:
    """Returns True if the function is running in the local emulator."""
    return os.environ.get("FUNCTIONS_EMULATOR") == "true"


def build_chat_notification(
    sender: str,
    text: str,
    chat_id: str,
    token: str,
    settings: Optional[Settings] = None,
) -> ChatNotification:
    """
    Creates the notification for a new chat message.

    The data payload carries the chat id so the app can open the right
    conversation when the notification is tapped.
    """
    settings = settings or get_settings()
    return ChatNotification(
        title=settings.chat_notification_title.format(sender=sender),
        body=text,
        token=token,
        data={
            "click_action": settings.chat_notification_click_action,
            CHAT_ID_PARAM: chat_id,
        },
    )


def to_fcm_message(notification: ChatNotification) -> messaging.Message:
    return messaging.Message(
        notification=messaging.Notification(
            title=notification.title,
            body=notification.body,
        ),
        data=notification.data,
        token=notification.token,
    )


def send_chat_notification(
    notification: ChatNotification, settings: Optional[Settings] = None
) -> str:
    """
    Sends the notification to its device token.

    Returns:
        The FCM message id.

    Raises:
        firebase_admin.exceptions.FirebaseError: If FCM rejects the message.
    """
    settings = settings or get_settings()
    dry_run = settings.chat_notification_dry_run or _is_locally_emulated()
    return messaging.send(to_fcm_message(notification), dry_run=dry_run)
