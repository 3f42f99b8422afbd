"""Orphan attachment cleanup service

An orphan is a vector store attachment whose stored file has been deleted
independently. Orphans are hidden from listings and detached from the
vector store opportunistically; cleanup failures are only logged.
"""
import logging

from value_objects import RemovalResult

logger = logging.getLogger(__name__)


class OrphanCleaner:
    """Best-effort removal of dangling vector store attachments

    Example:
        cleaner = OrphanCleaner(upstream)
        result = await cleaner.prune("vs_123", "file_abc")
    """

    def __init__(self, upstream):
        self.upstream = upstream

    async def prune(self, index_id: str, file_id: str) -> RemovalResult:
        """Detach an orphaned file from its vector store

        Never raises; the outcome is returned for callers that care.
        """
        logger.warning(f"Removing orphaned entry {file_id} from vector store {index_id}")
        result = await self.upstream.detach_file(index_id, file_id)
        if result.is_failed:
            logger.warning(f"Failed to delete orphaned entry {file_id}: {result.error_message}")
        return result
