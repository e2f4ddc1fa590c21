"""Domain service for debounced draft persistence."""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from ..ports.draft_store import DraftStore, validate_user_id

logger = logging.getLogger(__name__)


class DraftService:
    """Keeps the latest input text of each user, writing it after a quiet period.

    Every update restarts the user's timer, so a burst of keystrokes results in
    a single write of the final text.
    """

    def __init__(self, store: DraftStore, debounce_seconds: float = 1.0):
        """Initialize service with a draft store.

        Args:
            store: Draft store port implementation
            debounce_seconds: Quiet period before a draft is written
        """
        self._store = store
        self._debounce_seconds = debounce_seconds
        # Waiting for the debounce timer; cancellable by update()
        self._pending: Dict[str, Tuple[str, asyncio.Task]] = {}
        # Timer expired, store.save() in progress
        self._in_flight: Dict[str, Tuple[str, asyncio.Task]] = {}

    @property
    def pending_users(self) -> List[str]:
        """Users with a draft not yet written to the store."""
        return list(dict.fromkeys([*self._pending, *self._in_flight]))

    async def update(self, user_id: str, content: str) -> None:
        """Schedule a save of the user's draft, replacing any pending one."""
        validate_user_id(user_id)
        previous = self._pending.pop(user_id, None)
        if previous is not None:
            previous[1].cancel()

        task = asyncio.create_task(self._save_later(user_id, content))
        self._pending[user_id] = (content, task)

    async def _save_later(self, user_id: str, content: str) -> None:
        await asyncio.sleep(self._debounce_seconds)

        task = asyncio.current_task()
        entry = self._pending.get(user_id)
        if entry is None or entry[1] is not task:
            return
        del self._pending[user_id]
        previous = self._in_flight.get(user_id)
        self._in_flight[user_id] = (content, task)

        try:
            # Writes for one user land in update order
            if previous is not None:
                await asyncio.wait([previous[1]])
            await self._store.save(user_id, content)
        except Exception as e:
            logger.error(f"❌ Failed to save draft for user {user_id}: {e}", exc_info=True)
        finally:
            current = self._in_flight.get(user_id)
            if current is not None and current[1] is task:
                del self._in_flight[user_id]

    async def load(self, user_id: str) -> Optional[str]:
        """Return the user's draft, preferring one that has not reached the store yet."""
        validate_user_id(user_id)
        for waiting in (self._pending, self._in_flight):
            entry = waiting.get(user_id)
            if entry is not None:
                return entry[0]
        return await self._store.load(user_id)

    async def flush(self) -> List[str]:
        """Wait for saves in progress, then write all pending drafts immediately.

        Every draft is attempted even if an earlier one fails. Drafts that
        could not be written stay pending.

        Returns:
            Ids of the users whose draft could not be saved
        """
        pending = list(self._pending.items())
        for _, (_, task) in pending:
            task.cancel()

        in_flight = [task for _, task in self._in_flight.values()]
        if in_flight:
            await asyncio.wait(in_flight)

        failed: List[str] = []
        for user_id, (content, task) in pending:
            try:
                await self._store.save(user_id, content)
            except Exception as e:
                logger.error(f"❌ Failed to flush draft for user {user_id}: {e}", exc_info=True)
                failed.append(user_id)
                continue
            current = self._pending.get(user_id)
            if current is not None and current[1] is task:
                del self._pending[user_id]

        saved = len(pending) - len(failed)
        if saved:
            logger.info(f"💾 Flushed {saved} pending drafts")
        if failed:
            logger.warning(f"⚠️ {len(failed)} drafts could not be flushed: {', '.join(failed)}")
        return failed
