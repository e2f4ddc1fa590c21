"""File based implementation of the draft store port."""

import asyncio
import json
import logging
import os
import tempfile
from typing import Optional

from ...domain.ports.draft_store import DraftStore, validate_user_id

logger = logging.getLogger(__name__)


class FileDraftStore(DraftStore):
    """Stores one JSON document per user in a directory.

    Each file holds ``{"content": "<draft text>"}``.
    """

    def __init__(self, directory: str):
        """Initialize the store.

        Args:
            directory: Directory holding the draft files (created on first save)
        """
        self._directory = directory

    @property
    def directory(self) -> str:
        return self._directory

    def _path_for(self, user_id: str) -> str:
        return os.path.join(self._directory, f"{validate_user_id(user_id)}.json")

    async def load(self, user_id: str) -> Optional[str]:
        """Load the saved draft of a user."""
        path = self._path_for(user_id)
        return await asyncio.to_thread(self._read, path)

    async def save(self, user_id: str, content: str) -> None:
        """Persist the draft of a user."""
        path = self._path_for(user_id)
        await asyncio.to_thread(self._write, path, content)
        logger.info(f"💾 Draft saved for user {user_id} ({len(content)} chars)")

    @staticmethod
    def _read(path: str) -> Optional[str]:
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        content = data.get("content")
        return content if isinstance(content, str) else None

    def _write(self, path: str, content: str) -> None:
        os.makedirs(self._directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"content": content}, f, ensure_ascii=False)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
