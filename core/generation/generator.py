"""
Tolerant-Extraction Generator.

One prompt, one call to the text-generation provider, then either a fully
defaulted record derived from the reply or the caller's static fallback.
Generation and parse failures never reach the caller as exceptions; the
outcome's status says which path was taken.
"""
import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from core.generation.extraction import extract_json_object
from core.generation.schema import ResultSchema
from core.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)

STATUS_COMPLETED = "completed"
STATUS_FALLBACK = "fallback"


@dataclass(frozen=True)
class GenerationRequest:
    """Instruction template plus the parameters interpolated into it.

    The template is a str.format string. Parameter values are inserted
    verbatim, including user-supplied text such as job descriptions.
    """
    template: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    system_prompt: Optional[str] = None

    def render(self) -> str:
        return self.template.format(**self.parameters)


@dataclass
class GenerationOutcome:
    result: Any
    status: str
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.status == STATUS_FALLBACK


Fallback = Union[Any, Callable[[], Any]]


def _resolve_fallback(fallback: Fallback) -> Any:
    if callable(fallback):
        return fallback()
    return copy.deepcopy(fallback)


class TolerantGenerator:
    """
    Runs GenerationRequests against an LLMProvider.

    The provider is called exactly once per request; retries, where wanted,
    belong to persistence rather than generation.
    """

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def _invoke(self, request: GenerationRequest) -> str:
        prompt = request.render()
        if request.system_prompt is not None:
            return self.llm.generate_text(prompt, system_prompt=request.system_prompt)
        return self.llm.generate_text(prompt)

    def generate(
        self,
        request: GenerationRequest,
        schema: ResultSchema,
        fallback: Fallback
    ) -> GenerationOutcome:
        """Generate a record conforming to schema.

        Args:
            request: Template and parameters
            schema: Declared fields and defaults
            fallback: Static record (deep-copied) or a zero-arg factory

        Returns:
            GenerationOutcome with status 'completed' and the defaulted
            record, or status 'fallback' and the fallback record.
        """
        try:
            raw = self._invoke(request)
            logger.debug(f"[{schema.name}] raw reply: {raw!r}")
            parsed = extract_json_object(raw)
            result = schema.apply(parsed)
        except Exception as e:
            logger.warning(f"[{schema.name}] generation failed, using fallback: {e}")
            return GenerationOutcome(
                result=_resolve_fallback(fallback),
                status=STATUS_FALLBACK,
                error=str(e)
            )

        logger.info(f"[{schema.name}] generated record with fields {list(result.keys())}")
        return GenerationOutcome(result=result, status=STATUS_COMPLETED)

    def generate_text(
        self,
        request: GenerationRequest,
        fallback: Fallback
    ) -> GenerationOutcome:
        """Generate free-form prose (e.g. a Markdown letter).

        The reply is only trimmed. An empty reply counts as a failure.
        """
        try:
            content = self._invoke(request).strip()
            if not content:
                raise ValueError("Empty reply")
        except Exception as e:
            logger.warning(f"Text generation failed, using fallback: {e}")
            return GenerationOutcome(
                result=_resolve_fallback(fallback),
                status=STATUS_FALLBACK,
                error=str(e)
            )

        return GenerationOutcome(result=content, status=STATUS_COMPLETED)
