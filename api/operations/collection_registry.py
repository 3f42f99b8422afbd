"""Collection registry

In-memory mapping from collection key to Collection. The set of collections
is fixed at startup; only their vector store ids change afterwards.
"""
from typing import Dict, Iterable, List

from domain_models import Collection
from errors import NotFoundError


class CollectionRegistry:
    """Owns the Collection objects for one process

    Example:
        registry = CollectionRegistry.from_config(default_config)
        collection = registry.resolve("primary")
    """

    def __init__(self, collections: Iterable[Collection]):
        self._collections: Dict[str, Collection] = {}
        for collection in collections:
            self._collections[collection.key] = collection

    @classmethod
    def from_config(cls, config) -> 'CollectionRegistry':
        """Build collections from static config, seeding pinned vector stores"""
        return cls(
            Collection(
                key=c.key,
                label=c.label,
                index_name=c.index_name,
                config_env_hint=c.env_var,
                index_id=c.pinned_index_id,
            )
            for c in config.collections
        )

    def resolve(self, key: str) -> Collection:
        """Look up a collection by key

        Raises:
            NotFoundError: if the key is empty or unknown
        """
        collection = self._collections.get(key) if key else None
        if collection is None:
            raise NotFoundError(f'Unknown file collection "{key}".')
        return collection

    def list_all(self) -> List[Collection]:
        """All collections in registry order"""
        return list(self._collections.values())

    def provisioned_index_ids(self) -> List[str]:
        """Vector store ids of provisioned collections, in registry order"""
        return [c.index_id for c in self._collections.values() if c.index_id]

    def __contains__(self, key: str) -> bool:
        return key in self._collections

    def __len__(self) -> int:
        return len(self._collections)
