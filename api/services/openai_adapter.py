# Copyright (c) 2024 Hiring Assistant API Contributors
# SPDX-License-Identifier: MIT

"""
Async adapter for the OpenAI client using thread pool execution.

This adapter wraps the sync OpenAI SDK client and provides an async interface
using asyncio.to_thread() so one slow upstream call never blocks the event
loop for other requests.

Architecture:
- Wraps sync OpenAI client
- Uses asyncio.to_thread() for all operations
- Translates SDK errors into UpstreamError at this boundary
- Delete calls report a RemovalResult instead of raising
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from errors import UpstreamError
from value_objects import RemovalResult

logger = logging.getLogger(__name__)

NOT_FOUND = 404


def create_openai_client(openai_config) -> OpenAI:
    """Build the sync SDK client from OpenAIConfig"""
    return OpenAI(api_key=openai_config.api_key, max_retries=openai_config.max_retries)


def classify_removal_error(error: UpstreamError) -> RemovalResult:
    """Map a failed delete onto already-absent (404) or failed"""
    if error.status_code == NOT_FOUND:
        return RemovalResult.already_absent()
    return RemovalResult.failed(error.message)


class AsyncOpenAIAdapter:
    """Async adapter that wraps the sync OpenAI client.

    Covers the three upstream surfaces the service consumes: file storage,
    vector stores and the Responses endpoint. No call carries its own
    timeout; the SDK retry/timeout defaults apply.
    """

    def __init__(self, client: OpenAI):
        """Initialize adapter with a sync OpenAI client.

        Args:
            client: OpenAI SDK client instance to wrap
        """
        self._client = client

    # === Vector stores ===

    async def create_vector_store(self, name: str) -> str:
        """Create a vector store and return its id"""
        store = await self._call(self._client.vector_stores.create, name=name)
        return store.id

    async def list_vector_store_files(self, vector_store_id: str) -> List[Any]:
        """List every file attached to a vector store.

        The SDK page object auto-paginates when iterated, so the whole
        listing is drained inside the worker thread.
        """
        return await self._call(self._drain_vector_store_files, vector_store_id)

    def _drain_vector_store_files(self, vector_store_id: str) -> List[Any]:
        return list(self._client.vector_stores.files.list(vector_store_id=vector_store_id))

    async def attach_file(self, vector_store_id: str, file_id: str) -> Any:
        """Attach a stored file to a vector store"""
        return await self._call(
            self._client.vector_stores.files.create,
            vector_store_id=vector_store_id,
            file_id=file_id
        )

    async def detach_file(self, vector_store_id: str, file_id: str) -> RemovalResult:
        """Remove a file from a vector store (the stored file is untouched)"""
        return await self._remove(
            self._client.vector_stores.files.delete,
            file_id=file_id,
            vector_store_id=vector_store_id
        )

    # === File storage ===

    async def upload_file(self, data: bytes, filename: str, purpose: str) -> Any:
        """Store raw bytes as an OpenAI file"""
        return await self._call(
            self._client.files.create,
            file=(filename, data),
            purpose=purpose
        )

    async def retrieve_file(self, file_id: str) -> Optional[Any]:
        """Fetch a stored file's metadata.

        Returns:
            The file object, or None when the file no longer exists

        Raises:
            UpstreamError: for any failure other than 404
        """
        try:
            return await self._call(self._client.files.retrieve, file_id)
        except UpstreamError as e:
            if e.status_code == NOT_FOUND:
                return None
            raise

    async def delete_file(self, file_id: str) -> RemovalResult:
        """Delete a stored file"""
        return await self._remove(self._client.files.delete, file_id)

    # === Responses ===

    async def create_response(self, request: Dict[str, Any]) -> Any:
        """Send a Responses API request"""
        return await self._call(self._client.responses.create, **request)

    # === Helpers ===

    async def _call(self, fn, *args, **kwargs):
        """Run a sync SDK call in the thread pool, translating SDK errors"""
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except openai.APIError as e:
            raise UpstreamError(
                getattr(e, 'message', None) or str(e),
                status_code=getattr(e, 'status_code', None)
            ) from e

    async def _remove(self, fn, *args, **kwargs) -> RemovalResult:
        try:
            await self._call(fn, *args, **kwargs)
        except UpstreamError as e:
            return classify_removal_error(e)
        return RemovalResult.removed()
