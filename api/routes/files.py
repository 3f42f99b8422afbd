"""File routes module.

Upload, list and delete the files attached to a collection's vector store.
"""
import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.datastructures import UploadFile

from errors import NotFoundError, ServiceError, ValidationError
from models import DeleteResponse, FileListResponse, FileUploadResponse
from operations.file_lifecycle import MISSING_FILE_MESSAGE
from routes.deps import get_app_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/files/{collection_key}", response_model=FileListResponse)
async def list_files(collection_key: str, request: Request):
    """List completed files in a collection, newest first"""
    app_state = get_app_state(request)
    try:
        collection = app_state.resolve_collection(collection_key)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        files = await app_state.get_file_manager().list_files(collection)
        return {"files": [f.to_dict() for f in files]}
    except ServiceError:
        logger.exception(f"Error listing files for {collection.key}")
        raise HTTPException(status_code=500, detail="Failed to list files.")


@router.post("/files/{collection_key}", status_code=201, response_model=FileUploadResponse)
async def upload_file(collection_key: str, request: Request):
    """Upload a file (multipart field "file") into a collection

    The collection's vector store is created on first upload. A missing
    field, or one sent as plain text instead of a file part, is a 400.
    """
    app_state = get_app_state(request)
    try:
        collection = app_state.resolve_collection(collection_key)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise HTTPException(status_code=400, detail=MISSING_FILE_MESSAGE)
        raw_bytes = await file.read()
        filename = file.filename

    try:
        remote_file = await app_state.get_file_manager().upload_file(
            collection, raw_bytes, filename
        )
        return {"file": remote_file.to_dict()}
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ServiceError:
        logger.exception(f"Error uploading file to {collection.key}")
        raise HTTPException(status_code=500, detail="Failed to upload file.")


@router.delete("/files/{collection_key}/{file_id}", response_model=DeleteResponse)
async def delete_file(collection_key: str, file_id: str, request: Request):
    """Remove a file from a collection and from file storage

    Deleting a file that is already gone still succeeds.
    """
    app_state = get_app_state(request)
    try:
        collection = app_state.resolve_collection(collection_key)
        await app_state.get_file_manager().delete_file(collection, file_id)
        return {"ok": True}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ServiceError:
        logger.exception(f"Error deleting file {file_id} from {collection_key}")
        raise HTTPException(status_code=500, detail="Failed to delete file.")
