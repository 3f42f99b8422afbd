"""Index provisioning service

Lazily creates the remote vector store backing a collection. Creation is
serialized per collection key, so concurrent first uploads to the same
collection share one vector store instead of leaking a second one.
"""
import asyncio
import logging
from typing import Dict

from domain_models import Collection

logger = logging.getLogger(__name__)


class IndexProvisioner:
    """Ensures each collection has a vector store, creating it at most once"""

    def __init__(self, upstream):
        """
        Args:
            upstream: AsyncOpenAIAdapter (or anything with create_vector_store)
        """
        self.upstream = upstream
        self._locks: Dict[str, asyncio.Lock] = {}

    async def ensure_index(self, collection: Collection) -> str:
        """Return the collection's vector store id, creating it if needed

        Raises:
            UpstreamError: if creation fails; the collection stays
                unprovisioned so the next call retries
        """
        if collection.index_id:
            return collection.index_id

        async with self._lock_for(collection.key):
            # Another request may have finished provisioning while we waited
            if collection.index_id:
                return collection.index_id

            index_id = await self.upstream.create_vector_store(collection.index_name)
            collection.assign_index(index_id)
            logger.info(
                f'Created vector store {index_id} for collection "{collection.key}". '
                f"Set {collection.config_env_hint} to reuse."
            )
            return index_id

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock
