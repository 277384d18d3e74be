"""
Declared result shapes for tolerant generation.

A ResultSchema lists the fields a generated record must carry, the
primitive kind each one must have and the default used when the parsed
reply omits it or has the wrong kind.
"""
import copy
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class FieldKind(str, Enum):
    SEQUENCE = "sequence"
    NUMBER = "number"
    STRING = "string"
    CHOICE = "choice"


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric field
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    # 1e999 parses to inf; a huge integer overflows the float column
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True)
class FieldSpec:
    """One declared field.

    Attributes:
        name: Key in the parsed reply and in the result
        kind: Primitive kind the value must have
        default: Value used when absent or mistyped (deep-copied per use)
        choices: Allowed values for FieldKind.CHOICE
        item_check: For sequences, predicate each element must satisfy;
            failing elements are dropped
    """
    name: str
    kind: FieldKind
    default: Any
    choices: Tuple[str, ...] = ()
    item_check: Optional[Callable[[Any], bool]] = None

    def accepts(self, value: Any) -> bool:
        if self.kind == FieldKind.SEQUENCE:
            return isinstance(value, list)
        if self.kind == FieldKind.NUMBER:
            return is_number(value)
        if self.kind == FieldKind.STRING:
            return is_non_empty_string(value)
        if self.kind == FieldKind.CHOICE:
            return isinstance(value, str) and value in self.choices
        return False

    def coerce(self, value: Any) -> Any:
        """Return value if it has the declared kind, else a fresh default."""
        if not self.accepts(value):
            return copy.deepcopy(self.default)
        if self.kind == FieldKind.SEQUENCE and self.item_check is not None:
            kept = [item for item in value if self.item_check(item)]
            if len(kept) != len(value):
                logger.debug(f"Dropped {len(value) - len(kept)} malformed item(s) from '{self.name}'")
            return kept
        return value


@dataclass(frozen=True)
class ResultSchema:
    """A named record shape plus an optional acceptance check.

    The check runs on the defaulted record and raises ValueError when the
    record is structurally valid but unusable (e.g. a quiz with no
    questions). A failed check is handled like a parse failure.
    """
    name: str
    fields: Sequence[FieldSpec]
    check: Optional[Callable[[Dict[str, Any]], None]] = None

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def defaults(self) -> Dict[str, Any]:
        return {f.name: copy.deepcopy(f.default) for f in self.fields}

    def apply(self, parsed: Dict[str, Any]) -> Dict[str, Any]:
        """Build a fully populated record from a parsed reply.

        Unknown keys in the reply are ignored.

        Raises:
            ValueError: If the acceptance check rejects the record.
        """
        result = {f.name: f.coerce(parsed.get(f.name)) for f in self.fields}
        if self.check is not None:
            self.check(result)
        return result

    def conforms(self, record: Dict[str, Any]) -> bool:
        """True if every declared field is present with its declared kind."""
        return all(f.name in record and f.accepts(record[f.name]) for f in self.fields)
