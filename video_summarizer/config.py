"""
Configuration settings for the YouTube transcript summarizer.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from video_summarizer.models.schemas import SummaryConfig
from video_summarizer.utils.error_handling import ConfigError
from video_summarizer.utils.helpers import load_json


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Transcript Summarizer"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # Credential file holding {"token": "..."}
    CONFIG_PATH = os.getenv("CONFIG_PATH", "config.json")

    # Summarization endpoint
    HF_API_URL = os.getenv(
        "HF_API_URL",
        "https://api-inference.huggingface.co/models/facebook/bart-large-cnn",
    )
    # Numeric settings stay raw here and are validated by summary_config()
    CHUNK_MAX_LENGTH = os.getenv("CHUNK_MAX_LENGTH", "1024")
    SUMMARY_MAX_LENGTH = 150
    SUMMARY_MIN_LENGTH = 30
    REQUEST_TIMEOUT = os.getenv("REQUEST_TIMEOUT") or None

    # Transcript source: youtube | http | process
    TRANSCRIPT_SOURCE = os.getenv("TRANSCRIPT_SOURCE", "youtube")
    TRANSCRIPT_API_URL = os.getenv("TRANSCRIPT_API_URL")
    TRANSCRIPT_COMMAND = os.getenv("TRANSCRIPT_COMMAND")
    TRANSCRIPT_LANGUAGES = [
        lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
    ]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()


def load_api_token(path: Optional[str] = None) -> str:
    """
    Read the summarization API token from a JSON credential file.

    Args:
        path: Path to the credential file (defaults to config.CONFIG_PATH)

    Returns:
        The bearer token

    Raises:
        ConfigError: If the file is missing, unparseable or has no token
    """
    path = path or config.CONFIG_PATH
    try:
        data = load_json(path)
    except OSError as e:
        raise ConfigError(f"Failed to open config file at {path}") from e
    except ValueError as e:
        raise ConfigError(f"Failed to parse config file at {path}") from e

    token = data.get("token") if isinstance(data, dict) else None
    if not isinstance(token, str) or not token.strip():
        raise ConfigError(f"Config file at {path} has no 'token' field")
    return token.strip()


def summary_config(api_token: str) -> SummaryConfig:
    """
    Build the summarization settings from the active configuration.

    Raises:
        ConfigError: If a setting such as CHUNK_MAX_LENGTH is invalid
    """
    try:
        return SummaryConfig(
            api_url=config.HF_API_URL,
            api_token=api_token,
            chunk_size=config.CHUNK_MAX_LENGTH,
            max_length=config.SUMMARY_MAX_LENGTH,
            min_length=config.SUMMARY_MIN_LENGTH,
            timeout=config.REQUEST_TIMEOUT,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigError(f"Invalid summarization settings: {fields}") from e
