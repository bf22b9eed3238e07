import re

from ..config import MAX_DUE_LIMIT, MAX_QUALITY, MIN_QUALITY
from ..errors import InvalidArgument

IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9_.:\-]{1,64}$")


def validate_identifier(name: str, value) -> str:
    if not isinstance(value, str) or not IDENTIFIER_RE.match(value):
        raise InvalidArgument(f"{name} is malformed: {value!r}")
    return value


def validate_quality(quality) -> int:
    # bool is an int subclass; True must not sneak in as quality 1
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidArgument(f"quality must be an integer, got {quality!r}")
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidArgument(
            f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )
    return int(quality)


def validate_limit(limit) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidArgument(f"limit must be an integer, got {limit!r}")
    if not 1 <= limit <= MAX_DUE_LIMIT:
        raise InvalidArgument(f"limit must be between 1 and {MAX_DUE_LIMIT}, got {limit}")
    return limit
