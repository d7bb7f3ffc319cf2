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
"""
Turns a newly created chat message into at most one push notification.

Every step that cannot continue logs why and returns a DispatchResult instead
of raising, so a bad message never surfaces as a function failure.
"""

from typing import Optional

from dacite import from_dict, Config
from firebase_admin import messaging
from firebase_functions import logger
from google.api_core import exceptions

from chat_notifications import directory, participants, sender as fcm_sender
from chat_notifications.config import Settings, get_settings
from shared.json_utils import convert_keys
from shared.types import ChatMessage, DispatchOutcome, DispatchResult

UNKNOWN_SENDER = "Unknown"


def dispatch_chat_notification(
    db,
    chat_id: str,
    message_data: Optional[dict],
    settings: Optional[Settings] = None,
) -> DispatchResult:
    """
    Notifies the other chat participant about a new message.

    Args:
        db: A Firestore client.
        chat_id (str): Id of the parent chat document.
        message_data (dict | None): The new message document, as stored.
        settings (Settings | None): Overrides the environment settings.

    Returns:
        A DispatchResult describing whether a notification was sent, and if
        not, at which step the dispatch stopped.
    """
    settings = settings or get_settings()

    if not message_data:
        logger.warn(f"No message data found for chat {chat_id}")
        return DispatchResult(DispatchOutcome.MISSING_MESSAGE_DATA, chat_id=chat_id)

    message = from_dict(
        data_class=ChatMessage,
        data=convert_keys(message_data, "camel_to_snake"),
        config=Config(check_types=False),
    )
    sender = message.sender or UNKNOWN_SENDER
    text = message.text or settings.chat_notification_default_body
    logger.info(f"New message in {chat_id} from {sender}: {text}")

    try:
        chat = directory.get_chat(db, chat_id)
    except exceptions.GoogleAPIError as e:
        logger.error(f"Failed to load chat {chat_id} (sender {sender}): {e}")
        return DispatchResult(
            DispatchOutcome.LOOKUP_FAILED, chat_id=chat_id, sender=sender, error=str(e)
        )

    if chat is None:
        logger.error(f"Chat document not found: {chat_id} (sender {sender})")
        return DispatchResult(
            DispatchOutcome.CHAT_NOT_FOUND, chat_id=chat_id, sender=sender
        )

    if not participants.has_participants(chat):
        logger.warn(
            f"Chat {chat_id} metadata missing teacher/parent usernames (sender {sender})"
        )
        return DispatchResult(
            DispatchOutcome.CHAT_MISSING_PARTICIPANTS, chat_id=chat_id, sender=sender
        )

    recipient = participants.resolve_recipient(chat, sender)
    if recipient is None:
        logger.warn(
            f"Sender {sender} does not match chat {chat_id} participants "
            f"(teacher={chat.teacher_username}, parent={chat.parent_username}), skipping"
        )
        return DispatchResult(
            DispatchOutcome.UNKNOWN_SENDER, chat_id=chat_id, sender=sender
        )

    target = f"{recipient.collection}/{recipient.username}"
    logger.info(f"Receiver for chat {chat_id} from {sender}: {target}")

    try:
        entry = directory.lookup_directory_entry(db, recipient)
    except exceptions.GoogleAPIError as e:
        logger.error(
            f"Failed to look up {target} for chat {chat_id} (sender {sender}): {e}"
        )
        return DispatchResult(
            DispatchOutcome.LOOKUP_FAILED,
            chat_id=chat_id,
            sender=sender,
            recipient=recipient,
            error=str(e),
        )

    if entry is None:
        logger.warn(
            f"Receiver {recipient.username} not found in {recipient.collection} "
            f"for chat {chat_id} (sender {sender})"
        )
        return DispatchResult(
            DispatchOutcome.RECIPIENT_NOT_FOUND,
            chat_id=chat_id,
            sender=sender,
            recipient=recipient,
        )

    if not entry.fcm_token:
        logger.warn(f"No FCM token for {target} in chat {chat_id} (sender {sender})")
        return DispatchResult(
            DispatchOutcome.MISSING_FCM_TOKEN,
            chat_id=chat_id,
            sender=sender,
            recipient=recipient,
        )

    notification = fcm_sender.build_chat_notification(
        sender=sender,
        text=text,
        chat_id=chat_id,
        token=entry.fcm_token,
        settings=settings,
    )

    try:
        message_id = fcm_sender.send_chat_notification(notification, settings)
    except messaging.UnregisteredError as e:
        logger.error(
            f"FCM token for {target} is no longer registered "
            f"(chat {chat_id}, sender {sender}): {e}"
        )
        return DispatchResult(
            DispatchOutcome.DELIVERY_FAILED,
            chat_id=chat_id,
            sender=sender,
            recipient=recipient,
            error=str(e),
        )
    except Exception as e:
        logger.error(
            f"Error sending notification for chat {chat_id} (sender {sender}): {e}"
        )
        return DispatchResult(
            DispatchOutcome.DELIVERY_FAILED,
            chat_id=chat_id,
            sender=sender,
            recipient=recipient,
            error=str(e),
        )

    logger.info(
        f"Notification sent to {target} for chat {chat_id} from {sender} ({message_id})"
    )
    return DispatchResult(
        DispatchOutcome.SENT,
        chat_id=chat_id,
        sender=sender,
        recipient=recipient,
        message_id=message_id,
    )
