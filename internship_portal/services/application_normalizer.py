"""
Validation and defaulting of raw internship application submissions.

The submission form posts an untyped JSON object. ``normalize_submission``
checks that every required field is present, then resolves each remaining
field through a named default-resolution function so that the lenient
policies (missing flags become ``False``, an unparseable fluency rating
becomes 5) are explicit and testable on their own.
"""
import logging
import re
from enum import Enum
from typing import Any, Dict, List

from internship_portal.schemas.internship_application import (
    ApplicationCreate,
    DEFAULT_ENGLISH_FLUENCY_RATING,
    FLAG_FIELDS,
    INTEGER_FIELDS,
    LIST_FIELDS,
    OPTIONAL_TEXT_FIELDS,
    REQUIRED_FIELDS,
    TEXT_FIELDS,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)

# english_fluency_rating is a 32-bit INTEGER column
RATING_MIN = -(2 ** 31)
RATING_MAX = 2 ** 31 - 1


class ValidationErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_PAYLOAD = "InvalidPayload"


class SubmissionValidationError(Exception):
    """Raised when a submission cannot be turned into a record; nothing is persisted"""

    def __init__(self, kind: ValidationErrorKind, missing_fields: List[str] = None):
        self.kind = kind
        self.missing_fields = list(missing_fields or [])
        if kind == ValidationErrorKind.MISSING_REQUIRED_FIELD:
            message = f"Missing required fields: {', '.join(self.missing_fields)}"
        else:
            message = "Submission payload must be a JSON object"
        super().__init__(message)


def is_present(value: Any) -> bool:
    """Presence check used for required fields: None, "", 0 and False count as missing"""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        # NaN is falsy as well
        return value != 0 and value == value
    if isinstance(value, str):
        return value != ""
    # Lists and objects are present even when empty
    return True


def resolve_flag(value: Any) -> bool:
    return is_present(value)


def resolve_skills(value: Any) -> List[str]:
    """Keeps string items in their given order, duplicates included"""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def resolve_optional_text(value: Any) -> str:
    if not is_present(value):
        return ""
    return value if isinstance(value, str) else str(value)


def resolve_required_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def parse_leading_int(value: Any):
    """
    Integer prefix of a value, or None when it has none.

    "7" -> 7, " 8 " -> 8, "9/10" -> 9, 7.9 -> 7, "abc" -> None.
    Floats are read from their shortest text form, so 1e300 -> 1.
    Booleans, lists and objects never parse.
    """
    if value is None or isinstance(value, (bool, list, dict)):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        value = repr(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def resolve_fluency_rating(value: Any) -> int:
    """
    Best-effort rating: anything that does not parse to a non-zero integer
    within the column range falls back to DEFAULT_ENGLISH_FLUENCY_RATING
    instead of failing.
    """
    parsed = parse_leading_int(value)
    if not parsed or not RATING_MIN <= parsed <= RATING_MAX:
        return DEFAULT_ENGLISH_FLUENCY_RATING
    return parsed


def find_missing_fields(payload: Dict[str, Any]) -> List[str]:
    return [field for field in REQUIRED_FIELDS if not is_present(payload.get(field))]


def normalize_submission(payload: Any) -> ApplicationCreate:
    if not isinstance(payload, dict):
        raise SubmissionValidationError(ValidationErrorKind.INVALID_PAYLOAD)

    missing = find_missing_fields(payload)
    if missing:
        raise SubmissionValidationError(ValidationErrorKind.MISSING_REQUIRED_FIELD, missing)

    data: Dict[str, Any] = {}
    for field in TEXT_FIELDS:
        data[field] = resolve_required_text(payload[field])
    for field in FLAG_FIELDS:
        data[field] = resolve_flag(payload.get(field))
    for field in OPTIONAL_TEXT_FIELDS:
        data[field] = resolve_optional_text(payload.get(field))
    for field in LIST_FIELDS:
        data[field] = resolve_skills(payload.get(field))
    for field in INTEGER_FIELDS:
        raw = payload.get(field)
        data[field] = resolve_fluency_rating(raw)
        if data[field] == DEFAULT_ENGLISH_FLUENCY_RATING and parse_leading_int(raw) != DEFAULT_ENGLISH_FLUENCY_RATING:
            logger.info(f"{field} {raw!r} is not a usable number, using {DEFAULT_ENGLISH_FLUENCY_RATING}")

    return ApplicationCreate.model_validate(data)
