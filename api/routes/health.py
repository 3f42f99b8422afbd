"""Health and discovery routes."""
from fastapi import APIRouter, Request

from models import CollectionsResponse, HealthResponse
from routes.deps import get_app_state

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Hiring Assistant API",
        "docs": "/docs",
        "health": "/health"
    }


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check"""
    return HealthResponse(status="ok")


@router.get("/file-collections", response_model=CollectionsResponse)
async def list_collections(request: Request):
    """List document collections and their vector store ids"""
    app_state = get_app_state(request)
    return {"collections": [c.to_dict() for c in app_state.list_collections()]}
