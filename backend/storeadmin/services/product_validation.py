"""
Product payload validation - turns a raw JSON body into storable fields.
"""

import math
from typing import Any, Dict, List, Optional, Tuple

from ..models.identifiers import parse_object_id, unique_ids
from .errors import InvalidInput

REQUIRED_TEXT_FIELDS = ('title', 'description', 'category')
REQUIRED_NUMBER_FIELDS = ('price', 'expense')
LABEL_FIELDS = ('tags', 'sizes', 'colors')


def _clean_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _parse_amount(value: Any) -> Optional[float]:
    """Non-negative number from an int, float or numeric string."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        return None
    return amount


def _clean_labels(value: Any) -> Optional[List[str]]:
    """List of distinct non-empty strings; None when not a list."""
    if value is None:
        return []
    if not isinstance(value, list):
        return None
    labels = []
    seen = set()
    for item in value:
        text = _clean_text(item)
        if text is None or text in seen:
            continue
        seen.add(text)
        labels.append(text)
    return labels


def _clean_media(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    media = [text for text in (_clean_text(item) for item in value) if text]
    return media or None


def _clean_collection_ids(value: Any) -> Tuple[Optional[list], bool]:
    """Return (ids, ok). Missing means no collections."""
    if value is None:
        return [], True
    if not isinstance(value, list):
        return None, False
    ids = []
    for item in value:
        oid = parse_object_id(item)
        if oid is None:
            return None, False
        ids.append(oid)
    return unique_ids(ids), True


def validate_product_payload(payload: Any) -> Dict[str, Any]:
    """Validate an update body and return the fields to store.

    Raises ``InvalidInput`` naming every offending field.
    """
    if not isinstance(payload, dict):
        raise InvalidInput(['body'], 'Request body must be a JSON object')

    invalid: List[str] = []
    fields: Dict[str, Any] = {}

    for name in REQUIRED_TEXT_FIELDS:
        text = _clean_text(payload.get(name))
        if text is None:
            invalid.append(name)
        fields[name] = text

    media = _clean_media(payload.get('media'))
    if media is None:
        invalid.append('media')
    fields['media'] = media

    for name in REQUIRED_NUMBER_FIELDS:
        amount = _parse_amount(payload.get(name))
        if amount is None:
            invalid.append(name)
        fields[name] = amount

    collection_ids, ok = _clean_collection_ids(payload.get('collections'))
    if not ok:
        invalid.append('collections')
    fields['collections'] = collection_ids

    for name in LABEL_FIELDS:
        labels = _clean_labels(payload.get(name))
        if labels is None:
            invalid.append(name)
        fields[name] = labels

    if invalid:
        raise InvalidInput(invalid)
    return fields
