"""Startup manager - orchestrates application initialization.

Validates configuration, configures logging and wires the services into
AppState before the first request is served.
"""
import logging

from app_state import AppState
from logging_config import configure_logging
from services.openai_adapter import AsyncOpenAIAdapter, create_openai_client
from startup.config_validator import ConfigValidator

logger = logging.getLogger(__name__)


class StartupManager:
    """Manages application startup.

    Phases:
    - Configuration: logging, validate config
    - Component: OpenAI adapter, registry and services
    """

    def __init__(self, app_state: AppState, config, upstream=None):
        """
        Args:
            app_state: state container shared with the routes
            config: Config instance
            upstream: optional pre-built adapter (skips client creation)
        """
        self.state = app_state
        self.config = config
        self.upstream = upstream

    async def initialize(self):
        """Initialize all components"""
        configure_logging(self.config.logging.level)
        self._validate_config()
        self._init_components()
        self._log_collections()
        logger.info("Hiring assistant API ready")

    # ============ Configuration Phase ============

    def _validate_config(self):
        """Validate configuration before startup"""
        ConfigValidator(self.config).validate()

    # ============ Component Phase ============

    def _init_components(self):
        """Build the upstream adapter and wire services"""
        upstream = self.upstream or AsyncOpenAIAdapter(create_openai_client(self.config.openai))
        self.state.wire(self.config, upstream)

    def _log_collections(self):
        """Report which collections start with a pinned vector store"""
        for collection in self.state.list_collections():
            if collection.index_id:
                logger.info(f'Collection "{collection.key}" using vector store {collection.index_id}')
            else:
                logger.info(
                    f'Collection "{collection.key}" has no vector store yet; '
                    f"one is created on first upload"
                )
