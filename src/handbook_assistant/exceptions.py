"""
Assistant-specific exceptions.
"""


class AssistantError(Exception):
    """Base exception for handbook assistant errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class DocumentUnavailableError(AssistantError):
    """Raised when the reference document is missing or unreadable."""

    def __init__(self, path: str, message: str = "Document not found"):
        self.path = path
        super().__init__(f"{message}: {path}", code="document_unavailable")


class InferenceError(AssistantError):
    """Raised when the model endpoint call fails or returns nothing usable."""

    def __init__(self, message: str = "Model call failed"):
        super().__init__(message, code="inference_failure")


class ConfigError(AssistantError):
    """Raised when a configuration file cannot be used."""

    def __init__(self, message: str):
        super().__init__(message, code="config_error")
