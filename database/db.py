# file: database/db.py

import logging
from typing import List

import firebase_admin
from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from models.user import UserRecord

logger = logging.getLogger(__name__)


class UserStore:
    """Read-only access to the users collection in Cloud Firestore."""

    def __init__(self, client, collection: str = "usuarios"):
        self._client = client
        self._collection = collection

    @classmethod
    def from_app(cls, app: firebase_admin.App, collection: str = "usuarios") -> "UserStore":
        return cls(firestore.client(app), collection)

    def find_by_role(self, role: str) -> List[UserRecord]:
        # Firestore turns `== None` into an IS_NULL filter.
        if role is None:
            raise ValueError("role is required")
        query = self._client.collection(self._collection).where(filter=FieldFilter("rol", "==", role))
        records = [UserRecord.model_validate(doc.to_dict() or {}) for doc in query.stream()]
        logger.info(f"Found {len(records)} users with role {role!r} in {self._collection}")
        return records
