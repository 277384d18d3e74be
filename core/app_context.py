from dataclasses import dataclass

from core.config_loader import AppConfig, LlmConfig
from core.generation import TolerantGenerator
from core.llm.interfaces import LLMProvider
from core.llm.openai_service import OpenAIService
from database.database import Database


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The Database is owned here and handed to whatever needs sessions;
    nothing else creates engines.
    """
    config: AppConfig
    database: Database
    llm: LLMProvider
    generator: TolerantGenerator

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        database = Database.from_config(config.database)
        llm = cls._build_ai_service(config.llm)

        return cls(
            config=config,
            database=database,
            llm=llm,
            generator=TolerantGenerator(llm)
        )

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI-compatible service from LLM configuration."""
        model_config = {
            'model': llm_config.model,
            'temperature': llm_config.temperature,
        }

        return OpenAIService(
            base_url=llm_config.base_url,
            api_key=llm_config.api_key,
            model_config=model_config,
            timeout=llm_config.request_timeout_seconds
        )

    def close(self) -> None:
        self.database.dispose()
