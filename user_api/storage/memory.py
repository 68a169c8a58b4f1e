from dataclasses import dataclass
from datetime import datetime, timezone
import threading
from typing import Dict, List, Optional

from user_api.core.errors import DuplicateKey
from user_api.schemas.user import UserPublic


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class MemoryUser:
    internal_id: int
    id: str
    password: str
    created_at: str

    def public(self) -> UserPublic:
        return UserPublic(internal_id=self.internal_id, id=self.id, created_at=self.created_at)


class MemoryStore:
    """Users keyed by normalized identifier, kept in insertion order.

    Identifiers must already be validated and normalized by the caller.
    """

    def __init__(self) -> None:
        self._users: Dict[str, MemoryUser] = {}
        self._next_internal_id = 1
        self._lock = threading.Lock()

    def create_user(self, user_id: str, password: str) -> UserPublic:
        with self._lock:
            if user_id in self._users:
                raise DuplicateKey(user_id)
            user = MemoryUser(
                internal_id=self._next_internal_id,
                id=user_id,
                password=password,
                created_at=utc_timestamp(),
            )
            self._next_internal_id += 1
            self._users[user_id] = user
        return user.public()

    def get_user(self, user_id: str) -> Optional[UserPublic]:
        with self._lock:
            user = self._users.get(user_id)
        return user.public() if user else None

    def list_users(self) -> List[UserPublic]:
        with self._lock:
            users = list(self._users.values())
        return [user.public() for user in users]

    def delete_user(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def user_exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._users

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)
