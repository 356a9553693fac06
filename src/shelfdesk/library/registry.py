"""User registry: user-ID keyed storage."""

import logging
from typing import Optional

from .exceptions import DuplicateRecordError, InvalidRecordError
from .models import User, is_blank

logger = logging.getLogger(__name__)


class Registry:
    """In-memory store of registered users keyed by user ID."""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._users: dict[str, User] = {}

    def register(self, user: Optional[User]) -> None:
        """Register a user; an already registered ID keeps the first user."""
        if user is None:
            if self.strict:
                raise InvalidRecordError("Cannot register a null user")
            logger.warning("Attempted to register a null user")
            return
        if user.user_id in self._users:
            if self.strict:
                raise DuplicateRecordError("User", user.user_id)
            logger.debug("User %s already registered, keeping existing record", user.user_id)
            return
        self._users[user.user_id] = user
        logger.debug("Registered user %s (%s)", user.user_id, user.name)

    def find_by_key(self, user_id: Optional[str]) -> Optional[User]:
        """Look up a user by exact ID; None for an unknown or blank ID."""
        if is_blank(user_id):
            return None
        return self._users.get(user_id)

    def all_records(self) -> list[User]:
        """Snapshot of every registered user, in no particular order."""
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return isinstance(user_id, str) and user_id in self._users
