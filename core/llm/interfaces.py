"""
LLM Provider Interface - Abstract base for text generation providers.

This module defines the interface for LLM services (OpenAI, Gemini, Ollama, etc.).
"""
from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    """
    Abstract Interface for text generation providers.

    Implementations are treated as unreliable: they may raise on network,
    timeout or quota errors, and may return prose, markdown fences or
    malformed JSON instead of what the prompt asked for.
    """

    @abstractmethod
    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Send a single prompt and return the raw reply text.

        Args:
            prompt: Fully interpolated instruction text
            system_prompt: Optional system message; providers pick a default
        """
        pass
