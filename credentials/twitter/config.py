# credentials/twitter/config.py
"""
Configuration for the Twitter credential plugin
"""

from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings

from credentials.exceptions import ConfigError

REQUIRED_FIELDS = ("consumer_key", "consumer_secret", "callback_url")

# Application-wide keys consulted when neither the realm nor the credential
# configuration defines a field
APP_FALLBACK_KEYS = {
    "consumer_key": "twitter_consumer_key",
    "consumer_secret": "twitter_consumer_secret",
    "callback_url": "twitter_callback_url",
}


class TwitterSettings(BaseSettings):
    """
    Application-wide Twitter settings

    These settings can be configured via environment variables
    prefixed with TWITTER_, e.g., TWITTER_CONSUMER_KEY
    """
    CONSUMER_KEY: str = ""
    CONSUMER_SECRET: str = ""
    CALLBACK_URL: str = ""

    class Config:
        env_prefix = "TWITTER_"
        env_file = ".env"
        extra = "ignore"

    def as_app_config(self) -> Dict[str, str]:
        """Return the settings under the application-wide fallback keys."""
        return {
            "twitter_consumer_key": self.CONSUMER_KEY,
            "twitter_consumer_secret": self.CONSUMER_SECRET,
            "twitter_callback_url": self.CALLBACK_URL,
        }


@lru_cache()
def get_twitter_settings():
    """
    Get the Twitter settings, cached to avoid reloading
    """
    return TwitterSettings()


class CredentialConfig(BaseModel):
    """Consumer credentials and callback URL, resolved once per plugin instance."""

    consumer_key: str
    consumer_secret: str
    callback_url: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(
        cls,
        config: Optional[Mapping[str, Any]] = None,
        app_config: Optional[Mapping[str, Any]] = None,
        realm_config: Optional[Mapping[str, Any]] = None,
    ) -> "CredentialConfig":
        """
        Merge the configuration sources and build the resolved config.

        Realm configuration wins over the credential configuration; a field
        still unset after that merge falls back to the application-wide
        ``twitter_*`` key.

        Raises:
            ConfigError: If consumer_key, consumer_secret or callback_url
                remains unset
        """
        params = {**(config or {}), **(realm_config or {})}
        app_config = app_config or {}

        values = {}
        for field in REQUIRED_FIELDS:
            value = params.get(field) or app_config.get(APP_FALLBACK_KEYS[field])
            if not value:
                raise ConfigError(f"{field} not defined")
            values[field] = str(value)

        return cls(**values)
