"""
Error types raised while analyzing a photo or driving a session.

Every analysis failure carries a short machine ``code`` and a ``user_message``
that the page shows verbatim.
"""

GENERIC_RETRY_MESSAGE = "An unexpected error occurred. Please try again."


class ChefAIError(Exception):
    """Base class for errors surfaced to the user."""

    code = "chef_ai_error"

    def __init__(self, user_message: str = GENERIC_RETRY_MESSAGE):
        super().__init__(user_message)
        self.user_message = user_message


class ConfigurationError(ChefAIError):
    """Credential missing; not retryable without redeploying."""

    code = "configuration_error"

    def __init__(self, user_message: str = "API Key is missing. Please ensure the environment is configured correctly."):
        super().__init__(user_message)


class ServiceError(ChefAIError):
    """Transport failure, SDK failure or an empty reply from Gemini."""

    code = "service_error"


class StateTransitionError(ChefAIError):
    """Requested transition is not allowed from the current state."""

    code = "missing_image"

    def __init__(self, user_message: str = "Upload a photo before analyzing."):
        super().__init__(user_message)


class AnalysisInProgressError(StateTransitionError):
    code = "analysis_in_progress"

    def __init__(self, user_message: str = "An analysis is already running for this photo."):
        super().__init__(user_message)
