"""
Configuration constants for the hiring assistant API
"""
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_RESPONSES_MODEL = "gpt-4.1"

# OpenAI file_search accepts at most this many vector stores per request
MAX_SEARCH_INDEXES = 2


@dataclass
class OpenAIConfig:
    """Upstream OpenAI client configuration"""
    api_key: str = ""
    responses_model: str = DEFAULT_RESPONSES_MODEL
    max_retries: int = 2  # SDK default; no explicit timeout is configured
    file_purpose: str = "assistants"


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def allows_any_origin(self) -> bool:
        return "*" in self.cors_allow_origins


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"


@dataclass
class CollectionConfig:
    """Static definition of one document collection"""
    key: str
    label: str
    index_name: str
    env_var: str
    pinned_index_id: Optional[str] = None


# Built-in collections, in default search priority order
COLLECTION_DEFINITIONS = (
    ("primary", "Job Description", "primary-knowledge-base", "VECTOR_STORE_ID_1"),
    ("secondary", "Candidate Resumes", "secondary-knowledge-base", "VECTOR_STORE_ID_2"),
    ("training", "Training Programs", "training-knowledge-base", "VECTOR_STORE_ID_3"),
)

# Pinned ids used to pad conversation searches, in order
LEGACY_PIN_VARIABLES = ("VECTOR_STORE_ID_1", "VECTOR_STORE_ID_2")

TRAINING_COLLECTION_KEY = "training"
TRAINING_SEARCH_PRIORITY = ("training", "secondary", "primary")


@dataclass
class Config:
    """Main configuration container"""
    openai: OpenAIConfig
    server: ServerConfig
    logging: LoggingConfig
    collections: List[CollectionConfig]

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

    def legacy_index_ids(self) -> List[str]:
        """Operator-pinned ids used to pad general conversation searches"""
        pinned = {c.env_var: c.pinned_index_id for c in self.collections}
        return [pinned[name] for name in LEGACY_PIN_VARIABLES if pinned.get(name)]


# Default instance
default_config = Config.from_env()
