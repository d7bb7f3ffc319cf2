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

# Firestore collection names
CHATS_COLLECTION = "chats"
MESSAGES_COLLECTION = "messages"
TEACHERS_COLLECTION = "teachers"
PARENTS_COLLECTION = "parents"

# Document path params
CHAT_ID_PARAM = "chatId"
MESSAGE_ID_PARAM = "messageId"

CHAT_MESSAGE_DOCUMENT = (
    CHATS_COLLECTION
    + "/{"
    + CHAT_ID_PARAM
    + "}/"
    + MESSAGES_COLLECTION
    + "/{"
    + MESSAGE_ID_PARAM
    + "}"
)

# Field queried in the teachers/parents directory collections
USERNAME_FIELD = "username"
