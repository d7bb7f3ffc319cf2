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
"""In-memory stand-ins for the Firestore client used in tests."""

from typing import Dict, List, Optional


class FakeDocumentSnapshot:
    def __init__(self, doc_id: str, data: Optional[dict]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[dict]:
        return dict(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, collection: "FakeCollection", doc_id: str):
        self._collection = collection
        self.id = doc_id

    def get(self) -> FakeDocumentSnapshot:
        return FakeDocumentSnapshot(self.id, self._collection.docs.get(self.id))


class FakeQuery:
    """Supports the equality filters and limits used by the functions."""

    def __init__(self, collection: "FakeCollection", filters=None, limit=None):
        self._collection = collection
        self._filters = filters or []
        self._limit = limit

    def where(self, *, filter) -> "FakeQuery":
        if filter.op_string != "==":
            raise NotImplementedError(f"Unsupported operator: {filter.op_string}")
        return FakeQuery(
            self._collection,
            self._filters + [(filter.field_path, filter.value)],
            self._limit,
        )

    def limit(self, count: int) -> "FakeQuery":
        return FakeQuery(self._collection, self._filters, count)

    def get(self) -> List[FakeDocumentSnapshot]:
        self._collection.query_count += 1
        matches = [
            FakeDocumentSnapshot(doc_id, data)
            for doc_id, data in self._collection.docs.items()
            if all(data.get(field) == value for field, value in self._filters)
        ]
        if self._limit is not None:
            matches = matches[: self._limit]
        return matches


class FakeCollection(FakeQuery):
    def __init__(self, name: str):
        super().__init__(self)
        self.name = name
        self.docs: Dict[str, dict] = {}
        self.query_count = 0

    def document(self, doc_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self, doc_id)


class FakeFirestore:
    """A tiny Firestore client backed by dictionaries."""

    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def collection(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    def add_doc(self, collection: str, doc_id: str, data: dict) -> None:
        self.collection(collection).docs[doc_id] = data


def create_mock_classroom_db(
    teacher_token: Optional[str] = None, parent_token: Optional[str] = "TOK123"
) -> FakeFirestore:
    """
    Creates a database with chat "c1" between teacher "t1" and parent "p1".

    A token of None leaves the fcmToken field off that user's profile.
    """
    db = FakeFirestore()
    db.add_doc("chats", "c1", {"teacherUsername": "t1", "parentUsername": "p1"})

    teacher = {"username": "t1", "name": "Teacher One"}
    if teacher_token:
        teacher["fcmToken"] = teacher_token
    db.add_doc("teachers", "teacher-doc-1", teacher)

    parent = {"username": "p1", "name": "Parent One"}
    if parent_token:
        parent["fcmToken"] = parent_token
    db.add_doc("parents", "parent-doc-1", parent)
    return db
