"""Training recommendation service

Asks the model for training recommendations as JSON, either picked from an
uploaded training catalog or generated freely. A reply that cannot be
parsed degrades to an empty recommendation list instead of failing.
"""
import json
import logging
import re
from typing import Any, Dict

from config import TRAINING_COLLECTION_KEY, TRAINING_SEARCH_PRIORITY
from errors import ValidationError
from prompts import (
    CATALOG_INSTRUCTIONS, CATALOG_PROMPT, GENERATED_INSTRUCTIONS, GENERATED_PROMPT
)

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Both jobDescription and candidateInfo are required."
NO_CATALOG_MESSAGE = "No training file uploaded. Please upload a training programs file first."

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)
_CODE_FENCE = re.compile(r"^```[A-Za-z0-9_-]*\s*|\s*```$")


def parse_recommendations(text: str) -> Dict[str, Any]:
    """Extract the {"recommendations": [...]} object from a model reply

    Code fences and surrounding prose are tolerated. Anything unparsable
    yields an empty recommendation list.
    """
    if not text:
        return {'recommendations': []}

    match = _JSON_OBJECT.search(_CODE_FENCE.sub("", text.strip()))
    if not match:
        return {'recommendations': []}

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        logger.warning("Model reply contained malformed JSON; returning no recommendations")
        return {'recommendations': []}

    if not isinstance(data, dict):
        return {'recommendations': []}
    if not isinstance(data.get('recommendations'), list):
        data['recommendations'] = []
    return data


class RecommendationService:
    """Builds training recommendation queries on top of QueryDispatcher"""

    def __init__(self, dispatcher, registry):
        self.dispatcher = dispatcher
        self.registry = registry

    async def recommend_from_catalog(self, job_description: str, candidate_info: str) -> Dict[str, Any]:
        """Recommend programs that exist in the uploaded training catalog

        Raises:
            ValidationError: missing input, or no training catalog uploaded yet
            UpstreamError: if the model call fails
        """
        self._validate(job_description, candidate_info)
        if not self.registry.resolve(TRAINING_COLLECTION_KEY).index_id:
            raise ValidationError(NO_CATALOG_MESSAGE)

        index_ids = self.dispatcher.priority_index_ids(TRAINING_SEARCH_PRIORITY)
        prompt = CATALOG_PROMPT.format(job_description=job_description, candidate_info=candidate_info)
        text = await self.dispatcher.ask(prompt, CATALOG_INSTRUCTIONS, index_ids)
        return parse_recommendations(text)

    async def recommend_generated(self, job_description: str, candidate_info: str) -> Dict[str, Any]:
        """Let the model generate recommendations from the job and résumé

        Raises:
            ValidationError: missing input
            UpstreamError: if the model call fails
        """
        self._validate(job_description, candidate_info)

        index_ids = self.dispatcher.conversation_index_ids()
        prompt = GENERATED_PROMPT.format(job_description=job_description, candidate_info=candidate_info)
        text = await self.dispatcher.ask(prompt, GENERATED_INSTRUCTIONS, index_ids)
        return parse_recommendations(text)

    @staticmethod
    def _validate(job_description, candidate_info):
        if not job_description or not candidate_info:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
