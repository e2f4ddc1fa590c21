"""Protocol for draft storage backends."""

import re
from typing import Optional, Protocol

USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


def validate_user_id(user_id: str) -> str:
    """Return the user id unchanged, raising ValueError if it is not a safe identifier."""
    if not USER_ID_PATTERN.fullmatch(user_id or ""):
        raise ValueError(f"Invalid user id: {user_id!r}")
    return user_id


class DraftStore(Protocol):
    """Protocol for durable per-user storage of unsubmitted input text."""

    async def load(self, user_id: str) -> Optional[str]:
        """Load the saved draft of a user, None if there is none."""
        ...

    async def save(self, user_id: str, content: str) -> None:
        """Persist the draft of a user, replacing any previous one."""
        ...
