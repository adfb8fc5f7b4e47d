import logging
from typing import Optional
from openai import OpenAI
import tiktoken
from tenacity import retry, wait_exponential, stop_after_attempt

from proposal_engine.config import settings
from proposal_engine.utils.exceptions import GenerationServiceError

logger = logging.getLogger(__name__)


class OpenAIService:
    """Service for text generation against OpenAI or an OpenAI-compatible endpoint (e.g. Groq)"""

    def __init__(
        self,
        api_key: str,
        llm_model: str = "gpt-4o",
        base_url: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize OpenAI service

        Args:
            api_key: API key for the endpoint
            llm_model: Model for text generation
            base_url: Alternate OpenAI-compatible endpoint; None for api.openai.com
            timeout: Request timeout in seconds
        """
        self.client = OpenAI(api_key=api_key, base_url=base_url or None, timeout=timeout)
        self.llm_model = llm_model
        self._encoding = None
        logger.info(f"OpenAI service initialized - LLM: {llm_model}, endpoint: {base_url or 'default'}")

    @property
    def encoding(self):
        """Tokenizer, loaded on first use"""
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding("o200k_base")
        return self._encoding

    def count_tokens(self, text: str) -> int:
        """
        Count tokens in text

        Args:
            text: Text to count tokens for

        Returns:
            Number of tokens (word count if the tokenizer is unavailable)
        """
        try:
            return len(self.encoding.encode(text))
        except Exception as e:
            logger.error(f"Error counting tokens: {str(e)}")
            return len(text.split())  # Fallback to word count

    # ===================== TEXT GENERATION =====================

    @retry(
        wait=wait_exponential(multiplier=1, min=2, max=10),
        stop=stop_after_attempt(settings.LLM_MAX_RETRIES),
        reraise=True,
    )
    def generate_text(
        self,
        prompt: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        top_p: float = 0.9,
        frequency_penalty: float = 0.0,
        presence_penalty: float = 0.0,
    ) -> str:
        """
        Generate text with the configured model

        Args:
            prompt: User prompt
            system_message: System message for context
            temperature: Temperature for generation
            max_tokens: Maximum tokens to generate
            top_p: Top p for nucleus sampling
            frequency_penalty: Penalize repeated tokens
            presence_penalty: Encourage new topics

        Returns:
            Generated text

        Raises:
            GenerationServiceError: If the model returns no content
        """
        try:
            messages = []

            if system_message:
                messages.append({"role": "system", "content": system_message})

            messages.append({"role": "user", "content": prompt})

            logger.debug(f"Generating text from prompt of {self.count_tokens(prompt)} tokens")

            response = self.client.chat.completions.create(
                model=self.llm_model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
                top_p=top_p,
                frequency_penalty=frequency_penalty,
                presence_penalty=presence_penalty,
            )

            generated_text = response.choices[0].message.content if response.choices else None
            if not generated_text:
                raise GenerationServiceError("Model returned an empty completion", model_name=self.llm_model)

            usage = getattr(response, "usage", None)
            if usage is not None:
                logger.info(f"Generated text with {usage.completion_tokens} tokens")
            return generated_text
        except Exception as e:
            logger.error(f"Error generating text: {str(e)}")
            raise


def build_openai_service() -> Optional[OpenAIService]:
    """OpenAIService wired from settings, or None when no API key is configured"""
    if not settings.generation_enabled:
        logger.info("No OPENAI_API_KEY/GROQ_API_KEY found, proposals will use the fallback template")
        return None
    return OpenAIService(
        api_key=settings.OPENAI_API_KEY,
        llm_model=settings.OPENAI_LLM_MODEL,
        base_url=settings.OPENAI_BASE_URL or None,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
