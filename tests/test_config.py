"""Tests for configuration loading."""

import json
import logging

import pytest

from handbook_assistant.exceptions import ConfigError
from handbook_assistant.providers import OpenAIProvider, create_provider
from handbook_assistant.utils.config import AssistantConfig, env_overrides, load_config
from handbook_assistant.utils.logging import configure_logging, get_logger, parse_log_level, set_log_level


class TestAssistantConfig:
    def test_defaults(self):
        config = AssistantConfig()
        assert config.chunk_size == 800
        assert config.top_k == 3
        assert config.default_session_id == "default"
        assert config.temperature == 1.0
        assert config.top_p == 1.0
        assert config.max_tokens == 4096
        assert config.port == 3001
        assert config.max_history_turns is None

    @pytest.mark.parametrize("field,value", [
        ("chunk_size", 0),
        ("top_k", -1),
        ("temperature", 3.0),
        ("top_p", 0.0),
        ("provider", "zhipu"),
    ])
    def test_validation(self, field, value):
        with pytest.raises(ValueError):
            AssistantConfig(**{field: value})


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.yaml", environ={})
        assert config == AssistantConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "handbook_assistant.yaml"
        path.write_text("chunk_size: 400\ntop_k: 5\nprovider: openai\n")
        config = load_config(path, environ={})
        assert config.chunk_size == 400
        assert config.top_k == 5
        assert config.provider == "openai"

    def test_json_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"model": "gpt-4o", "port": 8080}))
        config = load_config(path, environ={})
        assert config.model == "gpt-4o"
        assert config.port == 8080

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "handbook_assistant.yaml"
        path.write_text("model: gpt-4o\nport: 8080\n")
        environ = {
            "AZURE_INFERENCE_SDK_KEY": "secret",
            "INSTANCE_NAME": "contoso",
            "DEPLOYMENT_NAME": "chat",
            "PORT": "9000",
        }
        config = load_config(path, environ=environ)
        assert config.api_key == "secret"
        assert config.azure_endpoint == "https://contoso.openai.azure.com"
        assert config.azure_deployment == "chat"
        assert config.port == 9000
        assert config.model == "gpt-4o"

    def test_env_key_precedence(self):
        values = env_overrides({"OPENAI_API_KEY": "openai", "AZURE_INFERENCE_SDK_KEY": "azure"})
        assert values["api_key"] == "azure"

    def test_inference_endpoint_selects_openai_provider(self, tmp_path):
        environ = {
            "AZURE_INFERENCE_SDK_ENDPOINT": "https://models.inference.ai.azure.com",
            "AZURE_INFERENCE_SDK_KEY": "secret",
        }
        config = load_config(tmp_path / "absent.yaml", environ=environ)
        assert config.provider == "openai"
        assert config.base_url == "https://models.inference.ai.azure.com"
        assert type(create_provider(config)) is OpenAIProvider

    def test_explicit_provider_wins(self):
        values = env_overrides({
            "PROVIDER": "Azure",
            "AZURE_INFERENCE_SDK_ENDPOINT": "https://models.inference.ai.azure.com",
        })
        assert values["provider"] == "azure"

    def test_instance_name_keeps_azure(self):
        values = env_overrides({
            "INSTANCE_NAME": "contoso",
            "AZURE_INFERENCE_SDK_ENDPOINT": "https://models.inference.ai.azure.com",
        })
        assert "provider" not in values

    def test_invalid_provider_env(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "absent.yaml", environ={"PROVIDER": "zhipu"})

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigError):
            load_config(path, environ={})

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "handbook_assistant.yaml"
        path.write_text("chunk_size: -5\n")
        with pytest.raises(ConfigError):
            load_config(path, environ={})

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "handbook_assistant.yaml"
        path.write_text("chunk_size: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path, environ={})


class TestLogging:
    def test_get_logger_adds_single_handler(self):
        logger = get_logger("handbook_assistant.test")
        get_logger("handbook_assistant.test")
        assert len(logger.handlers) == 1

    def test_set_log_level(self):
        set_log_level("debug")
        assert logging.getLogger("handbook_assistant").level == logging.DEBUG
        set_log_level(logging.INFO)
        assert logging.getLogger("handbook_assistant").level == logging.INFO

    @pytest.mark.parametrize("level,expected", [
        ("warning", logging.WARNING),
        (" Error ", logging.ERROR),
        (logging.DEBUG, logging.DEBUG),
    ])
    def test_parse_log_level(self, level, expected):
        assert parse_log_level(level) == expected

    @pytest.mark.parametrize("level", ["verbose", "", "basic_format"])
    def test_unknown_log_level(self, level):
        with pytest.raises(ConfigError) as exc_info:
            set_log_level(level)
        assert exc_info.value.code == "config_error"

    def test_configure_logging(self):
        logger = configure_logging("warning")
        assert logger.name == "handbook_assistant"
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        set_log_level(logging.INFO)
