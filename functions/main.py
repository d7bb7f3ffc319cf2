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

# Cloud functions for the classroom chat backend - chat push notifications.
#
# This file containing Python cloud functions must be named main.py.
# See https://cloud.google.com/run/docs/write-functions#python for more info.

# Standard library imports
from typing import Optional

# Third-party library imports
from firebase_admin import initialize_app, firestore
from firebase_functions import logger
from firebase_functions.firestore_fn import (
    on_document_created,
    Event,
    DocumentSnapshot,
)

# Local application imports
from chat_notifications.config import get_settings
from chat_notifications.dispatcher import dispatch_chat_notification
from shared.firebase_constants import (
    CHAT_ID_PARAM,
    CHAT_MESSAGE_DOCUMENT,
    MESSAGE_ID_PARAM,
)
from shared.types import DispatchResult

initialize_app()


def handle_message_created(
    event: Event[Optional[DocumentSnapshot]],
) -> Optional[DispatchResult]:
    """
    Dispatches a push notification for a newly created chat message.

    Returns the DispatchResult, or None if the dispatch failed unexpectedly.
    Never raises.
    """
    chat_id = event.params.get(CHAT_ID_PARAM)
    message_id = event.params.get(MESSAGE_ID_PARAM)
    try:
        message_data = event.data.to_dict() if event.data else None
        result = dispatch_chat_notification(
            firestore.client(), chat_id, message_data
        )
    except Exception as e:
        logger.error(
            f"Error sending notification for chat {chat_id}, message {message_id}: {e}"
        )
        return None

    logger.info(
        f"Chat {chat_id} message {message_id} dispatch finished: {result.outcome}"
    )
    return result


@on_document_created(
    document=CHAT_MESSAGE_DOCUMENT,
    region=get_settings().function_region,
)
def send_chat_notification(event: Event[Optional[DocumentSnapshot]]) -> None:
    """
    Notifies the other participant of a chat.
    Triggered by every new document under chats/{chatId}/messages.
    """
    handle_message_created(event)
