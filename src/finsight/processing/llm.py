"""LLM model factory for PydanticAI.

Supports web-search-capable models only:
- Google (Gemini with Google Search grounding) - default
- Anthropic (Claude with web search)
- OpenAI Responses API (including OpenAI-compatible endpoints)
"""

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIResponsesModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.openai import OpenAIProvider

from finsight.config import get_settings
from finsight.core.exceptions import ConfigurationError
from finsight.core.logging import get_logger

logger = get_logger(__name__)

_API_KEY_ENV = {
    "google": "GEMINI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def create_model() -> Model:
    """Create a PydanticAI model based on configuration.

    Returns:
        GoogleModel, AnthropicModel or OpenAIResponsesModel for ``llm_model``

    Raises:
        ConfigurationError: If the configured provider has no API key
    """
    settings = get_settings()
    secret = settings.get_llm_api_key()
    if secret is None or not secret.get_secret_value():
        raise ConfigurationError(
            f"{_API_KEY_ENV[settings.llm_provider]} is not set "
            f"(required for llm_provider={settings.llm_provider})"
        )
    api_key = secret.get_secret_value()
    model_name = settings.llm_model

    if settings.llm_provider == "google":
        logger.debug("Using Google model", model=model_name)
        return GoogleModel(model_name, provider=GoogleProvider(api_key=api_key))

    if settings.llm_provider == "anthropic":
        logger.debug("Using Anthropic model", model=model_name)
        return AnthropicModel(model_name, provider=AnthropicProvider(api_key=api_key))

    # Web search needs the Responses API rather than Chat Completions
    if settings.openai_base_url:
        provider = OpenAIProvider(base_url=settings.openai_base_url, api_key=api_key)
        logger.debug(
            "Using OpenAI-compatible model",
            model=model_name,
            base_url=settings.openai_base_url,
        )
    else:
        provider = OpenAIProvider(api_key=api_key)
        logger.debug("Using OpenAI model", model=model_name)

    return OpenAIResponsesModel(model_name, provider=provider)
