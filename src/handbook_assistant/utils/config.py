"""
Configuration utilities.
"""

import json
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from handbook_assistant.exceptions import ConfigError

DEFAULT_SYSTEM_PROMPT = (
    "You are a friendly and helpful assistant. You should remember and reference "
    "information from the conversation history, especially people's names and "
    "preferences. Be engaging and personable, using emojis occasionally to be more "
    "friendly. 😊"
)


class Config(BaseModel):
    """Base configuration class."""

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from file (YAML or JSON)."""
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        elif path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
            return cls(**data)
        else:
            raise ConfigError(f"Unsupported config file format: {path.suffix}")


class AssistantConfig(Config):
    """Configuration for the handbook assistant."""
    # Retrieval
    handbook_path: str = "data/employee_handbook.pdf"
    chunk_size: int = Field(default=800, ge=1)
    top_k: int = Field(default=3, ge=0)

    # Conversation
    default_session_id: str = "default"
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    max_history_turns: int | None = Field(default=None, ge=1)

    # Provider settings
    provider: Literal["openai", "azure"] = "azure"
    model: str = "gpt-4o-mini"
    api_key: str | None = None
    base_url: str | None = None
    azure_endpoint: str | None = None
    azure_deployment: str | None = None
    api_version: str = "2024-08-01-preview"
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, gt=0.0, le=1.0)
    max_tokens: int = Field(default=4096, ge=1)
    request_timeout: float | None = None

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    backend_url: str = "http://localhost:3001"
    log_level: str = "INFO"


# Environment variable -> config field
ENV_OVERRIDES: dict[str, str] = {
    "PROVIDER": "provider",
    "OPENAI_API_KEY": "api_key",
    "GITHUB_TOKEN": "api_key",
    "AZURE_INFERENCE_SDK_KEY": "api_key",
    "AZURE_INFERENCE_SDK_ENDPOINT": "base_url",
    "DEPLOYMENT_NAME": "azure_deployment",
    "HANDBOOK_PATH": "handbook_path",
    "MODEL_NAME": "model",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
    "BACKEND_URL": "backend_url",
}


def env_overrides(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Collect config values from environment variables.

    Later entries in ``ENV_OVERRIDES`` win when several map to one field.
    Without an explicit ``PROVIDER``, an inference endpoint and no Azure
    instance name select the OpenAI-compatible provider.
    """
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for var, field in ENV_OVERRIDES.items():
        if environ.get(var):
            values[field] = environ[var]
    if environ.get("INSTANCE_NAME"):
        values["azure_endpoint"] = f"https://{environ['INSTANCE_NAME']}.openai.azure.com"
    elif "base_url" in values and "provider" not in values:
        values["provider"] = "openai"
    if "provider" in values:
        values["provider"] = values["provider"].strip().lower()
    return values


def load_config(
    path: str | Path = "handbook_assistant.yaml",
    environ: dict[str, str] | None = None
) -> AssistantConfig:
    """
    Load assistant configuration from file, then apply environment overrides.

    Args:
        path: Path to config file; missing files fall back to defaults
        environ: Environment mapping (defaults to ``os.environ`` after
            loading ``.env``)

    Returns:
        AssistantConfig instance
    """
    if environ is None:
        load_dotenv()

    path = Path(path)
    try:
        base = AssistantConfig.from_file(path) if path.exists() else AssistantConfig()
        data = base.model_dump()
        data.update(env_overrides(environ))
        return AssistantConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
