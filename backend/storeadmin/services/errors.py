"""
Errors raised by the product services.

Each error carries the machine-readable ``error`` code and HTTP ``status``
the routes answer with, and a ``message`` that is safe to show callers.
Anything that is not a ``CatalogError`` is treated as unexpected.
"""

from typing import Dict, Iterable, List, Optional


class CatalogError(Exception):
    error = 'CATALOG_ERROR'
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict:
        return {'success': False, 'error': self.error, 'message': self.message}


class NotFound(CatalogError):
    error = 'NOT_FOUND'
    status = 404


class Unauthorized(CatalogError):
    error = 'UNAUTHORIZED'
    status = 401

    def __init__(self, message: str = 'Unauthorized'):
        super().__init__(message)


class InvalidInput(CatalogError):
    error = 'INVALID_INPUT'
    status = 400

    def __init__(self, fields: Iterable[str], message: Optional[str] = None):
        self.fields = list(fields)
        super().__init__(message or 'Not enough data to update the product: ' + ', '.join(self.fields))

    def to_dict(self) -> Dict:
        payload = super().to_dict()
        payload['fields'] = self.fields
        return payload


class PartialSyncFailure(CatalogError):
    """Some collection membership updates failed; the others were applied."""

    error = 'PARTIAL_SYNC_FAILURE'
    status = 500

    def __init__(self, product_id, failures: Dict):
        # failures: collection id -> exception
        self.product_id = product_id
        self.failures = failures
        super().__init__(
            f'Failed to update {len(failures)} collection(s) for product {product_id}'
        )

    @property
    def failed_collection_ids(self) -> List[str]:
        return [str(cid) for cid in self.failures]

    def to_dict(self) -> Dict:
        payload = super().to_dict()
        payload['collections'] = self.failed_collection_ids
        return payload
