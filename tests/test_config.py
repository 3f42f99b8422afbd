"""
Unit tests for config module and EnvironmentConfigLoader
"""
import pytest

from config import (
    Config,
    OpenAIConfig,
    ServerConfig,
    LoggingConfig,
    COLLECTION_DEFINITIONS,
    DEFAULT_RESPONSES_MODEL
)
from environment_config_loader import EnvironmentConfigLoader
from tests import make_config

ENV_VARS = [
    "OPENAI_API_KEY", "OPENAI_RESPONSES_MODEL", "OPENAI_MAX_RETRIES", "PORT",
    "CORS_ALLOW_ORIGINS", "LOG_LEVEL",
    "VECTOR_STORE_ID_1", "VECTOR_STORE_ID_2", "VECTOR_STORE_ID_3",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the loader reads

    setenv first so values written by load_dotenv are undone after the test.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def load():
    return EnvironmentConfigLoader(use_dotenv=False).load()


class TestOpenAIConfig:
    """Tests for OpenAIConfig"""

    def test_default_values(self):
        """Test default configuration values"""
        config = OpenAIConfig()
        assert config.api_key == ""
        assert config.responses_model == "gpt-4.1"
        assert config.max_retries == 2
        assert config.file_purpose == "assistants"


class TestServerConfig:
    """Tests for ServerConfig"""

    def test_default_values(self):
        config = ServerConfig()
        assert config.port == 8080
        assert config.cors_allow_origins == ["*"]
        assert config.allows_any_origin is True

    def test_explicit_origins(self):
        config = ServerConfig(cors_allow_origins=["https://hr.example.com"])
        assert config.allows_any_origin is False


class TestLegacyIndexIds:
    """Pinned ids used to pad conversation searches"""

    def test_no_pins(self):
        assert make_config().legacy_index_ids() == []

    def test_only_first_two_pins(self):
        config = make_config(pins={
            "VECTOR_STORE_ID_1": "vs_1", "VECTOR_STORE_ID_2": "vs_2", "VECTOR_STORE_ID_3": "vs_3"
        })
        assert config.legacy_index_ids() == ["vs_1", "vs_2"]

    def test_gap_in_pins(self):
        assert make_config(pins={"VECTOR_STORE_ID_2": "vs_2"}).legacy_index_ids() == ["vs_2"]


class TestEnvironmentConfigLoader:
    """Tests for loading from environment"""

    def test_defaults(self, clean_env):
        config = load()
        assert isinstance(config, Config)
        assert config.openai.api_key == ""
        assert config.openai.responses_model == DEFAULT_RESPONSES_MODEL
        assert config.server.port == 8080
        assert config.logging == LoggingConfig(level="INFO")
        assert [c.key for c in config.collections] == [d[0] for d in COLLECTION_DEFINITIONS]
        assert all(c.pinned_index_id is None for c in config.collections)

    def test_reads_openai_settings(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", " sk-live ")
        clean_env.setenv("OPENAI_RESPONSES_MODEL", "gpt-4o-mini")
        clean_env.setenv("OPENAI_MAX_RETRIES", "4")

        config = load()

        assert config.openai.api_key == "sk-live"
        assert config.openai.responses_model == "gpt-4o-mini"
        assert config.openai.max_retries == 4

    def test_blank_model_falls_back(self, clean_env):
        clean_env.setenv("OPENAI_RESPONSES_MODEL", "  ")
        assert load().openai.responses_model == DEFAULT_RESPONSES_MODEL

    def test_pinned_vector_stores(self, clean_env):
        clean_env.setenv("VECTOR_STORE_ID_3", "vs_training")
        clean_env.setenv("VECTOR_STORE_ID_1", "")

        pins = {c.key: c.pinned_index_id for c in load().collections}

        assert pins == {"primary": None, "secondary": None, "training": "vs_training"}

    @pytest.mark.parametrize("value,expected", [("9000", 9000), ("not-a-port", 8080), ("", 8080)])
    def test_port(self, clean_env, value, expected):
        clean_env.setenv("PORT", value)
        assert load().server.port == expected

    def test_cors_origin_list(self, clean_env):
        clean_env.setenv("CORS_ALLOW_ORIGINS", "https://a.example.com, https://b.example.com,")
        assert load().server.cors_allow_origins == ["https://a.example.com", "https://b.example.com"]

    def test_log_level_uppercased(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")
        assert load().logging.level == "DEBUG"

    def test_dotenv_file(self, clean_env, tmp_path):
        """Values from a .env file are picked up"""
        dotenv = tmp_path / ".env"
        dotenv.write_text("OPENAI_API_KEY=sk-from-file\nVECTOR_STORE_ID_2=vs_resumes\n")

        config = EnvironmentConfigLoader(dotenv_path=str(dotenv)).load()

        assert config.openai.api_key == "sk-from-file"
        assert config.collections[1].pinned_index_id == "vs_resumes"
