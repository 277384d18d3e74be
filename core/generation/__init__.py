"""Tolerant generation - prompt, call, extract, default, fall back."""
from core.generation.extraction import (
    ExtractionError,
    extract_json_object,
    isolate_json_candidate,
    strip_code_fences,
)
from core.generation.generator import (
    STATUS_COMPLETED,
    STATUS_FALLBACK,
    GenerationOutcome,
    GenerationRequest,
    TolerantGenerator,
)
from core.generation.schema import FieldKind, FieldSpec, ResultSchema

__all__ = [
    'ExtractionError',
    'extract_json_object',
    'isolate_json_candidate',
    'strip_code_fences',
    'STATUS_COMPLETED',
    'STATUS_FALLBACK',
    'GenerationOutcome',
    'GenerationRequest',
    'TolerantGenerator',
    'FieldKind',
    'FieldSpec',
    'ResultSchema',
]
