"""Test package for the hiring assistant API

Shared test utilities: the api/ import path, an in-memory upstream and a
config builder that never reads the environment.
"""
import asyncio
import itertools
import sys
from pathlib import Path
from types import SimpleNamespace

# Add api directory to path for imports
# Detect if running in Docker (./api:/app mount) vs host (./api exists)
api_path = Path(__file__).parent.parent / "api"
if not api_path.exists():
    # Running in Docker where api contents are at /app directly
    api_path = Path(__file__).parent.parent
sys.path.insert(0, str(api_path))

from config import (  # noqa: E402
    Config, OpenAIConfig, ServerConfig, LoggingConfig, CollectionConfig, COLLECTION_DEFINITIONS
)
from errors import UpstreamError  # noqa: E402
from value_objects import RemovalResult  # noqa: E402


# =============================================================================
# Fake upstream
# =============================================================================

class FakeUpstream:
    """In-memory stand-in for AsyncOpenAIAdapter

    Keeps vector stores and stored files in dicts and records every call
    so tests can assert on remote traffic. Failures are injected by setting
    the *_error attributes.
    """

    def __init__(self):
        self.vector_stores = {}
        self.files = {}
        self.created_names = []
        self.detach_calls = []
        self.delete_calls = []
        self.requests = []
        self.response = {"output_text": "ok"}
        self.create_store_error = None
        self.create_response_error = None
        self.attach_error = None
        self.detach_errors = {}
        self.delete_errors = {}
        self.retrieve_errors = {}
        self._ids = itertools.count(1)
        self._clock = itertools.count(100, 100)

    # --- vector stores ---

    async def create_vector_store(self, name):
        await asyncio.sleep(0)
        if self.create_store_error:
            raise self.create_store_error
        self.created_names.append(name)
        store_id = f"vs_{next(self._ids)}"
        self.vector_stores[store_id] = {}
        return store_id

    async def list_vector_store_files(self, vector_store_id):
        return list(self.vector_stores.get(vector_store_id, {}).values())

    async def attach_file(self, vector_store_id, file_id):
        if self.attach_error:
            raise self.attach_error
        attachment = make_attachment(file_id, vector_store_id, created_at=next(self._clock))
        self.vector_stores.setdefault(vector_store_id, {})[file_id] = attachment
        return attachment

    async def detach_file(self, vector_store_id, file_id):
        self.detach_calls.append((vector_store_id, file_id))
        if file_id in self.detach_errors:
            return RemovalResult.failed(self.detach_errors[file_id])
        if self.vector_stores.get(vector_store_id, {}).pop(file_id, None) is None:
            return RemovalResult.already_absent()
        return RemovalResult.removed()

    # --- file storage ---

    async def upload_file(self, data, filename, purpose):
        stored = make_stored_file(f"file_{next(self._ids)}", filename, len(data), purpose)
        self.files[stored.id] = stored
        return stored

    async def retrieve_file(self, file_id):
        if file_id in self.retrieve_errors:
            raise UpstreamError(self.retrieve_errors[file_id], status_code=500)
        return self.files.get(file_id)

    async def delete_file(self, file_id):
        self.delete_calls.append(file_id)
        if file_id in self.delete_errors:
            return RemovalResult.failed(self.delete_errors[file_id])
        if self.files.pop(file_id, None) is None:
            return RemovalResult.already_absent()
        return RemovalResult.removed()

    # --- responses ---

    async def create_response(self, request):
        self.requests.append(request)
        if self.create_response_error:
            raise self.create_response_error
        return self.response

    # --- test helpers ---

    def seed_file(self, vector_store_id, file_id, status="completed", created_at=None,
                  filename=None, stored=True):
        """Put an attachment (and by default its storage record) in place"""
        self.vector_stores.setdefault(vector_store_id, {})[file_id] = make_attachment(
            file_id, vector_store_id, status=status, created_at=created_at
        )
        if stored:
            self.files[file_id] = make_stored_file(file_id, filename or f"{file_id}.pdf", 1024)


def make_attachment(file_id, vector_store_id, status="completed", created_at=None):
    return SimpleNamespace(
        id=file_id,
        status=status,
        usage_bytes=2048,
        created_at=created_at,
        vector_store_id=vector_store_id,
        last_error=None,
    )


def make_stored_file(file_id, filename, size, purpose="assistants"):
    return SimpleNamespace(
        id=file_id,
        filename=filename,
        bytes=size,
        purpose=purpose,
        mime_type=None,
    )


def make_config(pins=None, model="gpt-test"):
    """Build Config without touching the environment

    Args:
        pins: optional {env_var: vector_store_id} operator pins
    """
    pins = pins or {}
    return Config(
        openai=OpenAIConfig(api_key="sk-test", responses_model=model),
        server=ServerConfig(),
        logging=LoggingConfig(),
        collections=[
            CollectionConfig(
                key=key,
                label=label,
                index_name=index_name,
                env_var=env_var,
                pinned_index_id=pins.get(env_var)
            )
            for key, label, index_name, env_var in COLLECTION_DEFINITIONS
        ],
    )


