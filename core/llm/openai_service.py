"""
OpenAI Service - LLM implementation using the OpenAI chat completions API.

Works against any OpenAI-compatible endpoint (OpenAI, Gemini, Ollama).
"""
from typing import Dict, Any, Optional
import logging

from openai import OpenAI
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import DEFAULT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Generation is single-shot: the client is built with max_retries=0 and
    no retry decorator wraps the call, so callers see the first failure and
    can route straight to their fallback.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None
    ):
        client_kwargs: Dict[str, Any] = {'max_retries': 0}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url
        if timeout:
            client_kwargs['timeout'] = timeout

        self.client = OpenAI(**client_kwargs)

        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gemini-1.5-flash')
        self.temperature = self.model_config.get('temperature', 0.7)

    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Send one prompt and return the reply text.

        Args:
            prompt: Fully interpolated user instruction
            system_prompt: Optional system message. If None, uses default.

        Raises:
            openai.OpenAIError: On any transport, quota or server failure
            ValueError: If the response carries no message content
        """
        if system_prompt is None:
            system_prompt = DEFAULT_SYSTEM_PROMPT

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
        )

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            logger.error(f"Malformed completion response from {self.model}: {e}")
            raise ValueError(f"Malformed completion response: {e}") from e

        if content is None:
            raise ValueError(f"Empty completion response from {self.model}")

        logger.debug("Raw reply from %s (%d chars)", self.model, len(content))
        return content
