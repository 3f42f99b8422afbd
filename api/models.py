from pydantic import BaseModel, Field
from typing import Any, List, Optional


class ChatRequest(BaseModel):
    # Validated in the route so a missing message maps to 400, not 422
    message: Optional[Any] = Field(default=None, description="User message for the assistant")


class ChatResponse(BaseModel):
    response: str
    vector_store_ids: List[str] = []


class TrainingRequest(BaseModel):
    jobDescription: Optional[Any] = Field(default=None, description="Job title or description to match")
    candidateInfo: Optional[Any] = Field(default=None, description="Candidate name or summary to match")


class HealthResponse(BaseModel):
    status: str


class CollectionSummary(BaseModel):
    key: str
    label: str
    vector_store_id: Optional[str] = None


class CollectionsResponse(BaseModel):
    collections: List[CollectionSummary]


class FileRecord(BaseModel):
    """Vector store attachment joined with its storage metadata"""
    id: str
    status: Optional[str] = None
    usage_bytes: Optional[int] = None
    created_at: Optional[int] = None
    vector_store_id: Optional[str] = None
    last_error: Optional[Any] = None
    filename: Optional[str] = None
    bytes: Optional[int] = None
    mime_type: Optional[str] = None
    purpose: Optional[str] = None


class FileListResponse(BaseModel):
    files: List[FileRecord]


class FileUploadResponse(BaseModel):
    file: FileRecord


class DeleteResponse(BaseModel):
    ok: bool
