"""
In-memory user storage backing the GraphQL resolvers
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from .logging import get_logger

logger = get_logger(__name__)


class UserNotFoundError(LookupError):
    """Raised when an operation targets a user id that is not in the store."""

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


@dataclass(frozen=True)
class UserRecord:
    id: str
    username: str
    email: str


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(id="1", username="john_doe", email="john@example.com"),
    UserRecord(id="2", username="jane_smith", email="jane@example.com"),
)


class UserStore:
    """
    Process-local list of users.

    Records keep insertion order. Ids come from a counter that only moves
    forward, so an id is never handed out twice even after deletes.
    No locking: every method runs to completion without awaiting.
    """

    def __init__(self, seed: Iterable[UserRecord] = SEED_USERS):
        self._seed = tuple(seed)
        self._users: list[UserRecord] = []
        self._last_id = 0
        self.reset()

    def reset(self) -> None:
        """Restore the seeded records and rewind the id counter."""
        self._users = [replace(record) for record in self._seed]
        self._last_id = max(
            (int(record.id) for record in self._seed if record.id.isdigit()),
            default=0,
        )

    def __len__(self) -> int:
        return len(self._users)

    def list(self) -> list[UserRecord]:
        return list(self._users)

    def get(self, user_id: str) -> UserRecord | None:
        for record in self._users:
            if record.id == user_id:
                return record
        return None

    def create(self, username: str, email: str) -> UserRecord:
        self._last_id += 1
        record = UserRecord(id=str(self._last_id), username=username, email=email)
        self._users.append(record)
        logger.info("User created", user_id=record.id, username=username)
        return record

    def delete(self, user_id: str) -> UserRecord:
        """Remove and return the first record with ``user_id``.

        Raises:
            UserNotFoundError: no record has that id; the list is untouched.
        """
        for index, record in enumerate(self._users):
            if record.id == user_id:
                del self._users[index]
                logger.info("User deleted", user_id=user_id)
                return record

        logger.info("User not found for deletion", user_id=user_id)
        raise UserNotFoundError(user_id)


# Shared store for the running process
_store = UserStore()


def get_user_store() -> UserStore:
    """Get the process-wide user store."""
    return _store
