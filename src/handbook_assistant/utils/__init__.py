"""Configuration and logging helpers."""

from handbook_assistant.utils.config import AssistantConfig, load_config
from handbook_assistant.utils.logging import configure_logging, get_logger, set_log_level

__all__ = ["AssistantConfig", "load_config", "configure_logging", "get_logger", "set_log_level"]
