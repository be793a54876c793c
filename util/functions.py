from typing import Optional
from util.enums import ErrorMessage
from util.errors import InvalidInput


def require_text(value: Optional[str], error: ErrorMessage) -> str:
    """
    - Return `value` stripped of surrounding whitespace.
    - Raise InvalidInput with `error` when it is missing or blank.
    """
    if value is None or not value.strip():
        raise InvalidInput.of(error)
    return value.strip()
