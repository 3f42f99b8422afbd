"""Training recommendation routes module."""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from errors import UpstreamError, ValidationError
from models import TrainingRequest
from routes.deps import get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/training")


@router.post("/from-file")
async def recommend_from_file(request: Request, request_data: Optional[TrainingRequest] = None):
    """Recommend programs from the uploaded training catalog

    Returns 400 until a training programs file has been uploaded.
    """
    data = request_data or TrainingRequest()
    service = get_app_state(request).get_recommendations()
    try:
        return await service.recommend_from_catalog(data.jobDescription, data.candidateInfo)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamError:
        logger.exception("Error generating recommendations from file")
        raise HTTPException(status_code=500, detail="Failed to generate recommendations.")


@router.post("/ai-generate")
async def recommend_generated(request: Request, request_data: Optional[TrainingRequest] = None):
    """Generate training recommendations with the model"""
    data = request_data or TrainingRequest()
    service = get_app_state(request).get_recommendations()
    try:
        return await service.recommend_generated(data.jobDescription, data.candidateInfo)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamError:
        logger.exception("Error generating AI recommendations")
        raise HTTPException(status_code=500, detail="Failed to generate recommendations.")
