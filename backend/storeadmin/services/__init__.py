# Services package
#
# Module structure:
# - product_service.py: read / update / delete orchestration (main API)
# - product_repository.py, collection_repository.py: record access
# - record_store.py: the pymongo-backed store both repositories sit on
# - membership_diff.py: which collections to link / unlink
# - collection_sync.py: concurrent writes to the collection side
# - product_validation.py: update payload checks
# - errors.py: error taxonomy shared with the routes
# - auth.py: bearer-token caller lookup

from .collection_repository import CollectionRepository
from .collection_sync import CollectionSynchronizer
from .membership_diff import MembershipDiff, diff_memberships
from .product_repository import ProductRepository
from .product_service import ProductService
from .record_store import MongoRecordStore

__all__ = [
    'CollectionRepository',
    'CollectionSynchronizer',
    'MembershipDiff',
    'MongoRecordStore',
    'ProductRepository',
    'ProductService',
    'diff_memberships',
]
