"""
Application Configuration
Load settings from environment variables with validation
"""
import os


class Settings:
    """Application configuration from environment variables"""

    # Text generation (OpenAI or any OpenAI-compatible endpoint, e.g. Groq)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "") or os.getenv("GROQ_API_KEY", "")
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")  # e.g. https://api.groq.com/openai/v1
    OPENAI_LLM_MODEL: str = os.getenv("OPENAI_LLM_MODEL", "gpt-4o")
    LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
    LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "3"))

    # Proposal sampling parameters
    PROPOSAL_TEMPERATURE: float = float(os.getenv("PROPOSAL_TEMPERATURE", "0.9"))
    PROPOSAL_TOP_P: float = float(os.getenv("PROPOSAL_TOP_P", "0.9"))
    PROPOSAL_FREQUENCY_PENALTY: float = float(os.getenv("PROPOSAL_FREQUENCY_PENALTY", "0.5"))
    PROPOSAL_PRESENCE_PENALTY: float = float(os.getenv("PROPOSAL_PRESENCE_PENALTY", "0.3"))
    PROPOSAL_MAX_TOKENS: int = int(os.getenv("PROPOSAL_MAX_TOKENS", "1500"))

    # Application Configuration
    APP_NAME: str = "Proposal Match Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def generation_enabled(self) -> bool:
        """Text generation needs an API key; without one the fallback proposal is used."""
        return bool(self.OPENAI_API_KEY)


# Initialize settings
settings = Settings()


def validate_settings() -> bool:
    """
    Validate that all required settings are configured

    Returns:
        True if all required settings are present

    Raises:
        ValueError: If required settings are missing or out of range
    """
    required_keys = {
        "OPENAI_API_KEY": settings.OPENAI_API_KEY,
        "OPENAI_LLM_MODEL": settings.OPENAI_LLM_MODEL,
    }

    missing_keys = [key for key, value in required_keys.items() if not value]
    if missing_keys:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_keys)}")

    if settings.LLM_MAX_RETRIES < 1:
        raise ValueError("LLM_MAX_RETRIES must be at least 1")

    return True
