"""Domain models for document collections"""
from dataclasses import dataclass
from typing import Any, Optional

COMPLETED_STATUS = "completed"


@dataclass
class Collection:
    """A named bucket of documents mapped to one remote vector store

    `index_id` starts out empty (or pinned by the operator) and is set at most
    once by the IndexProvisioner for the lifetime of the process.
    """
    key: str
    label: str
    index_name: str
    config_env_hint: str
    index_id: Optional[str] = None

    @property
    def is_provisioned(self) -> bool:
        return bool(self.index_id)

    def assign_index(self, index_id: str) -> None:
        """Record the vector store backing this collection

        Raises:
            ValueError: if a different vector store is already assigned
        """
        if self.index_id and self.index_id != index_id:
            raise ValueError(
                f'Collection "{self.key}" is already bound to {self.index_id}'
            )
        self.index_id = index_id

    def to_dict(self) -> dict:
        """Discovery view used by /file-collections"""
        return {
            'key': self.key,
            'label': self.label,
            'vector_store_id': self.index_id,
        }


@dataclass
class RemoteFile:
    """A vector store attachment joined with its storage record

    Storage fields stay None when the metadata lookup failed for a reason
    other than the file being gone.
    """
    id: str
    status: str
    size_bytes: Optional[int] = None
    created_at: Optional[int] = None
    owner_index_id: Optional[str] = None
    last_error: Optional[Any] = None
    filename: Optional[str] = None
    byte_count: Optional[int] = None
    mime_type: Optional[str] = None
    purpose: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED_STATUS

    @property
    def sort_key(self) -> int:
        """Creation time used for newest-first ordering (missing counts as 0)"""
        return self.created_at or 0

    @classmethod
    def from_attachment(cls, attachment, index_id: str, stored=None) -> 'RemoteFile':
        """Build from an upstream vector store file and optional file object"""
        remote = cls(
            id=read_field(attachment, 'id'),
            status=read_field(attachment, 'status'),
            size_bytes=read_field(attachment, 'usage_bytes'),
            created_at=read_field(attachment, 'created_at'),
            owner_index_id=read_field(attachment, 'vector_store_id') or index_id,
            last_error=_plain(read_field(attachment, 'last_error')),
        )
        if stored is not None:
            remote.filename = read_field(stored, 'filename')
            remote.byte_count = read_field(stored, 'bytes')
            remote.mime_type = read_field(stored, 'mime_type')
            remote.purpose = read_field(stored, 'purpose')
        return remote

    def to_dict(self) -> dict:
        """Wire shape returned by the /files routes"""
        return {
            'id': self.id,
            'status': self.status,
            'usage_bytes': self.size_bytes,
            'created_at': self.created_at,
            'vector_store_id': self.owner_index_id,
            'last_error': self.last_error,
            'filename': self.filename,
            'bytes': self.byte_count,
            'mime_type': self.mime_type,
            'purpose': self.purpose,
        }


def read_field(obj, name: str):
    """Read a field from an SDK model or a plain dict"""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _plain(value):
    """Turn SDK models into JSON-friendly dicts"""
    if value is None or isinstance(value, (str, int, float, bool, dict)):
        return value
    if hasattr(value, 'model_dump'):
        return value.model_dump()
    return str(value)
