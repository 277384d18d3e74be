"""
Best-effort recovery of a JSON payload from free-form model replies.

Models asked for "JSON only" still wrap the payload in prose or markdown
fences. The helpers here trim everything outside the outermost braces,
drop fence markers and parse what is left.

Known gap: the outermost-brace rule is not a parser. A reply holding two
separate JSON fragments, or prose with a stray brace after the payload,
produces a candidate that fails to parse. Callers must treat a parse
failure as routine and fall back.
"""
import json
import re
from typing import Any, Dict

# ``` optionally followed by a language tag (json, JSON, javascript, ...)
_CODE_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*")


class ExtractionError(ValueError):
    """Raised when no JSON object can be recovered from a reply."""
    pass


def isolate_json_candidate(raw: str) -> str:
    """Return the text from the first '{' to the last '}' inclusive.

    When either brace is missing the whole reply is returned unchanged.
    """
    first = raw.find("{")
    last = raw.rfind("}")
    if first != -1 and last != -1:
        return raw[first:last + 1]
    return raw


def strip_code_fences(candidate: str) -> str:
    """Remove markdown code-fence markers and surrounding whitespace."""
    return _CODE_FENCE_RE.sub("", candidate).strip()


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant {name}")


def extract_json_object(raw: str) -> Dict[str, Any]:
    """Isolate, clean and parse a JSON object from a raw model reply.

    Raises:
        ExtractionError: If the cleaned candidate is not valid JSON or the
            top-level value is not an object.
    """
    if not isinstance(raw, str):
        raise ExtractionError(f"Expected reply text, got {type(raw).__name__}")

    cleaned = strip_code_fences(isolate_json_candidate(raw))

    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        raise ExtractionError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ExtractionError(f"Expected a JSON object, got {type(parsed).__name__}")

    return parsed
