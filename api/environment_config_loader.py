"""
Environment configuration loader.

Fixes Feature Envy: Logic for reading environment variables
lives with the data source (environment) rather than in Config dataclass.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

from config import (
    Config, OpenAIConfig, ServerConfig, LoggingConfig, CollectionConfig,
    COLLECTION_DEFINITIONS, DEFAULT_RESPONSES_MODEL
)


class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def __init__(self, dotenv_path: Optional[str] = None, use_dotenv: bool = True):
        self.dotenv_path = dotenv_path
        self.use_dotenv = use_dotenv

    def load(self) -> Config:
        """Create Config from environment variables"""
        if self.use_dotenv:
            load_dotenv(self.dotenv_path, override=True)

        return Config(
            openai=self._load_openai_config(),
            server=self._load_server_config(),
            logging=self._load_logging_config(),
            collections=self._load_collections(),
        )

    def _load_openai_config(self) -> OpenAIConfig:
        """Load OpenAI client configuration from environment"""
        return OpenAIConfig(
            api_key=self._get_optional("OPENAI_API_KEY", ""),
            responses_model=self._get_optional("OPENAI_RESPONSES_MODEL", "") or DEFAULT_RESPONSES_MODEL,
            max_retries=self._get_int("OPENAI_MAX_RETRIES", 2)
        )

    def _load_server_config(self) -> ServerConfig:
        """Load HTTP server configuration from environment"""
        return ServerConfig(
            port=self._get_port("PORT", 8080),
            cors_allow_origins=self._get_list("CORS_ALLOW_ORIGINS", ["*"])
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(level=self._get_optional("LOG_LEVEL", "INFO").upper())

    def _load_collections(self) -> List[CollectionConfig]:
        """Load static collections, picking up operator-pinned vector stores"""
        return [
            CollectionConfig(
                key=key,
                label=label,
                index_name=index_name,
                env_var=env_var,
                pinned_index_id=self._get_optional(env_var, "") or None
            )
            for key, label, index_name, env_var in COLLECTION_DEFINITIONS
        ]

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default).strip()

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        return int(value)

    def _get_port(self, key: str, default: int) -> int:
        """Get port number, falling back to default on junk values"""
        try:
            port = int(os.getenv(key, ""))
        except ValueError:
            return default
        return port or default

    def _get_list(self, key: str, default: List[str]) -> List[str]:
        """Get comma-separated list environment variable"""
        value = os.getenv(key)
        if not value:
            return list(default)
        items = [item.strip() for item in value.split(",")]
        return [item for item in items if item] or list(default)
