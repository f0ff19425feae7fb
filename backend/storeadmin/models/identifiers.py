"""
Record identifiers and the value serializers the models share.

Products and collections are keyed by MongoDB ``ObjectId``. Callers hand us
strings (URL segments, JSON payloads); everything past the route layer
works with ``ObjectId`` values so that membership tests compare like with
like.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return ``value`` as an ObjectId, or None if it is not one."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value.strip())
    except InvalidId:
        return None


def unique_ids(values: Iterable[ObjectId]) -> List[ObjectId]:
    """Drop repeated ids, keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def id_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def iso_datetime(value: Any) -> Any:
    """ISO-8601 string for datetimes; anything else passes through."""
    return value.isoformat() if isinstance(value, datetime) else value
