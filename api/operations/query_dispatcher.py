"""Query dispatch

Builds Responses API requests, picks which vector stores file_search may
use, and flattens the reply to plain text.
"""
import logging
from typing import Iterable, List, Optional

from config import MAX_SEARCH_INDEXES
from operations.response_normalizer import extract_text

logger = logging.getLogger(__name__)


def unique_ids(ids: Iterable[Optional[str]]) -> List[str]:
    """Drop empties and duplicates, keeping first-seen order"""
    seen = []
    for index_id in ids:
        if index_id and index_id not in seen:
            seen.append(index_id)
    return seen


class QueryDispatcher:
    """Sends conversational and structured queries to the Responses API"""

    def __init__(self, upstream, registry, model: str, legacy_index_ids: Iterable[str] = ()):
        """
        Args:
            upstream: AsyncOpenAIAdapter
            registry: CollectionRegistry used for index selection
            model: Responses model name
            legacy_index_ids: operator-pinned ids used to pad conversation searches
        """
        self.upstream = upstream
        self.registry = registry
        self.model = model
        self.legacy_index_ids = list(legacy_index_ids)

    async def ask(self, input_text: str, instructions: str, index_ids: List[str]) -> str:
        """Send one query and return the response text

        Raises:
            UpstreamError: if the call fails or returns no usable text
        """
        request = self.build_request(input_text, instructions, index_ids)
        response = await self.upstream.create_response(request)
        return extract_text(response)

    def build_request(self, input_text: str, instructions: str, index_ids: List[str]) -> dict:
        """Build the Responses payload; file_search only when there is something to search"""
        request = {
            'model': self.model,
            'instructions': instructions,
            'input': input_text,
        }
        scoped = unique_ids(index_ids)[:MAX_SEARCH_INDEXES]
        if scoped:
            request['tools'] = [{'type': 'file_search', 'vector_store_ids': scoped}]
        logger.debug(f"Responses request for model {self.model} searching {scoped or 'no vector stores'}")
        return request

    def conversation_index_ids(self) -> List[str]:
        """Provisioned indices first, padded with pinned legacy ids, capped at two"""
        ids = unique_ids(self.registry.provisioned_index_ids())
        for legacy_id in self.legacy_index_ids:
            if len(ids) >= MAX_SEARCH_INDEXES:
                break
            if legacy_id and legacy_id not in ids:
                ids.append(legacy_id)
        return ids[:MAX_SEARCH_INDEXES]

    def priority_index_ids(self, keys: Iterable[str]) -> List[str]:
        """Indices of the named collections in the given order, capped at two

        Unknown keys are skipped.
        """
        ids = []
        for key in keys:
            if key in self.registry:
                ids.append(self.registry.resolve(key).index_id)
        return unique_ids(ids)[:MAX_SEARCH_INDEXES]
