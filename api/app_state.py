from operations.collection_registry import CollectionRegistry
from operations.file_lifecycle import FileLifecycleManager
from operations.index_provisioner import IndexProvisioner
from operations.orphan_cleaner import OrphanCleaner
from operations.query_dispatcher import QueryDispatcher
from operations.recommendation_service import RecommendationService


class CoreServices:
    """Core service dependencies

    Holds the upstream adapter and the collection state it operates on.
    """

    def __init__(self, upstream=None, registry: CollectionRegistry = None):
        self.upstream = upstream
        self.registry = registry


class CollectionServices:
    """Collection lifecycle services

    Separated from query services to maintain SRP.
    """

    def __init__(self, provisioner=None, file_manager=None):
        self.provisioner = provisioner
        self.file_manager = file_manager


class QueryServices:
    """Query-related services"""

    def __init__(self, dispatcher=None, recommendations=None):
        self.dispatcher = dispatcher
        self.recommendations = recommendations


class AppState:
    """Application state container

    Composes focused state objects; routes go through the delegation
    methods instead of reaching into nested attributes (Law of Demeter).
    """

    def __init__(self):
        self.core = CoreServices()
        self.collections = CollectionServices()
        self.query = QueryServices()

    def wire(self, config, upstream, registry: CollectionRegistry = None) -> 'AppState':
        """Wire all services around one upstream adapter and registry

        Tests pass a fake upstream and a fresh registry per run.
        """
        registry = registry or CollectionRegistry.from_config(config)
        provisioner = IndexProvisioner(upstream)
        dispatcher = QueryDispatcher(
            upstream,
            registry,
            model=config.openai.responses_model,
            legacy_index_ids=config.legacy_index_ids()
        )

        self.core = CoreServices(upstream=upstream, registry=registry)
        self.collections = CollectionServices(
            provisioner=provisioner,
            file_manager=FileLifecycleManager(
                upstream,
                provisioner,
                orphan_cleaner=OrphanCleaner(upstream),
                file_purpose=config.openai.file_purpose
            )
        )
        self.query = QueryServices(
            dispatcher=dispatcher,
            recommendations=RecommendationService(dispatcher, registry)
        )
        return self

    # === Service Access Delegation (for route handlers) ===

    def get_registry(self) -> CollectionRegistry:
        """Get the collection registry"""
        return self.core.registry

    def get_upstream(self):
        """Get the async OpenAI adapter"""
        return self.core.upstream

    def get_provisioner(self) -> IndexProvisioner:
        return self.collections.provisioner

    def get_file_manager(self) -> FileLifecycleManager:
        """Get the file lifecycle manager"""
        return self.collections.file_manager

    def get_dispatcher(self) -> QueryDispatcher:
        """Get the query dispatcher"""
        return self.query.dispatcher

    def get_recommendations(self) -> RecommendationService:
        """Get the training recommendation service"""
        return self.query.recommendations

    # === Collection Access Delegation ===

    def resolve_collection(self, key: str):
        """Resolve a collection key (raises NotFoundError)"""
        return self.core.registry.resolve(key)

    def list_collections(self):
        """All collections for discovery endpoints"""
        if self.core.registry is None:
            return []
        return self.core.registry.list_all()

    def is_ready(self) -> bool:
        """True once startup has wired the services"""
        return self.core.upstream is not None and self.core.registry is not None
