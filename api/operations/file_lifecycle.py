"""File lifecycle service

Uploads, lists and deletes the files attached to a collection's vector
store, keeping the vector store and file storage consistent.
"""
import asyncio
import logging
from typing import List, Optional

from domain_models import COMPLETED_STATUS, Collection, RemoteFile, read_field
from errors import NotFoundError, UpstreamError, ValidationError
from operations.orphan_cleaner import OrphanCleaner
from value_objects import RemovalOutcome

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_FILENAME = "upload.dat"
MISSING_FILE_MESSAGE = "A file must be provided."
UNPROVISIONED_MESSAGE = "No vector store configured for this collection yet."


class FileLifecycleManager:
    """Manages files attached to collection vector stores"""

    def __init__(self, upstream, provisioner, orphan_cleaner: OrphanCleaner = None,
                 file_purpose: str = "assistants"):
        self.upstream = upstream
        self.provisioner = provisioner
        self.orphan_cleaner = orphan_cleaner or OrphanCleaner(upstream)
        self.file_purpose = file_purpose

    async def list_files(self, collection: Collection) -> List[RemoteFile]:
        """List completed files, newest first

        Unprovisioned collections have no files, so no remote call is made.
        Orphans are dropped from the result and detached as a side effect.
        """
        if not collection.index_id:
            return []

        index_id = collection.index_id
        attachments = await self.upstream.list_vector_store_files(index_id)
        completed = [a for a in attachments if read_field(a, 'status') == COMPLETED_STATUS]

        enriched = await asyncio.gather(
            *(self._enrich(index_id, attachment) for attachment in completed)
        )
        files = [f for f in enriched if f is not None]
        files.sort(key=lambda f: f.sort_key, reverse=True)
        return files

    async def upload_file(self, collection: Collection, raw_bytes: bytes,
                          filename: Optional[str] = None) -> RemoteFile:
        """Store bytes and attach them to the collection's vector store

        Raises:
            ValidationError: if the payload is empty
            UpstreamError: if any remote step fails; a stored file that could
                not be attached is deleted again
        """
        if not raw_bytes:
            raise ValidationError(MISSING_FILE_MESSAGE)

        index_id = await self.provisioner.ensure_index(collection)
        stored = await self.upstream.upload_file(
            raw_bytes, filename or DEFAULT_UPLOAD_FILENAME, self.file_purpose
        )
        stored_id = read_field(stored, 'id')
        try:
            attachment = await self.upstream.attach_file(index_id, stored_id)
        except UpstreamError:
            await self._discard_upload(stored_id)
            raise
        return RemoteFile.from_attachment(attachment, index_id, stored=stored)

    async def delete_file(self, collection: Collection, file_id: str) -> None:
        """Detach a file from the vector store and delete it from storage

        Safe to repeat: files already gone from either side are not errors.

        Raises:
            NotFoundError: if the collection has no vector store yet
            UpstreamError: if detaching fails for a reason other than 404
        """
        if not collection.index_id:
            raise NotFoundError(UNPROVISIONED_MESSAGE)

        detached = await self.upstream.detach_file(collection.index_id, file_id)
        if detached.is_failed:
            raise UpstreamError(detached.error_message)

        deleted = await self.upstream.delete_file(file_id)
        if deleted.is_failed:
            logger.warning(f"Unable to delete OpenAI file {file_id}: {deleted.error_message}")
        elif deleted.outcome is RemovalOutcome.ALREADY_ABSENT:
            logger.debug(f"OpenAI file {file_id} was already deleted")

    async def _discard_upload(self, file_id: str) -> None:
        """Delete a stored file left behind by a failed attach"""
        result = await self.upstream.delete_file(file_id)
        if result.is_failed:
            logger.warning(f"Unable to delete unattached OpenAI file {file_id}: {result.error_message}")

    async def _enrich(self, index_id: str, attachment) -> Optional[RemoteFile]:
        """Join an attachment with its storage record; None for orphans"""
        file_id = read_field(attachment, 'id')
        try:
            stored = await self.upstream.retrieve_file(file_id)
        except UpstreamError as e:
            logger.warning(f"Unable to load metadata for {file_id}: {e.message}")
            return RemoteFile.from_attachment(attachment, index_id)

        if stored is None:
            await self.orphan_cleaner.prune(index_id, file_id)
            return None
        return RemoteFile.from_attachment(attachment, index_id, stored=stored)
