"""
Configuration validator for startup checks.

Validates configuration settings early to provide clear error messages
before the application attempts to talk to the OpenAI service.
"""
from typing import List


class ConfigValidationError(Exception):
    """Configuration validation failed"""
    pass


class ConfigValidator:
    """Validates configuration settings on startup"""

    def __init__(self, config):
        self.config = config
        self.errors: List[str] = []

    def validate(self) -> None:
        """Validate all configuration settings

        Raises:
            ConfigValidationError: If validation fails
        """
        self._validate_api_key()
        self._validate_model()
        self._validate_collections()

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            raise ConfigValidationError(error_msg)

    def _validate_api_key(self) -> None:
        """The upstream client cannot be built without an API key"""
        if not self.config.openai.api_key:
            self.errors.append(
                'Environment variable "OPENAI_API_KEY" is required.\n'
                "    Set it in the environment or in a .env file"
            )

    def _validate_model(self) -> None:
        if not self.config.openai.responses_model:
            self.errors.append(
                "No responses model configured\n"
                "    Set OPENAI_RESPONSES_MODEL or leave it unset for the default"
            )

    def _validate_collections(self) -> None:
        """Collection keys must be unique"""
        keys = [collection.key for collection in self.config.collections]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            self.errors.append(f"Duplicate collection keys: {', '.join(duplicates)}")
