"""
Product service - read / update / delete orchestration.

The heavy lifting is delegated to:
- product_repository / collection_repository: record access
- product_validation: payload checks
- membership_diff: which collections to link and unlink
- collection_sync: writing those changes to the collection side

Update order is validate -> diff -> sync collections -> write product. If the
collection sync reports a failure the product record is left untouched.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..models.collection import Collection
from ..models.identifiers import parse_object_id
from ..models.product import Product
from .collection_repository import CollectionRepository
from .collection_sync import CollectionSynchronizer
from .errors import NotFound, Unauthorized
from .membership_diff import diff_memberships
from .product_repository import ProductRepository
from .product_validation import validate_product_payload

logger = logging.getLogger(__name__)


@dataclass
class ExpandedProduct:
    """A product with its collection ids resolved to records"""

    product: Product
    collections: List[Collection]

    def to_dict(self) -> Dict[str, Any]:
        return self.product.to_dict(collections=self.collections)


@dataclass
class ProductUpdateResult:
    product: ExpandedProduct
    collections: List[Collection]  # every collection in the store

    def to_dict(self) -> Dict[str, Any]:
        return {
            'product': self.product.to_dict(),
            'collections': [c.to_dict() for c in self.collections],
        }


class ProductService:
    """Product business logic"""

    def __init__(self, products: ProductRepository, collections: CollectionRepository,
                 synchronizer: Optional[CollectionSynchronizer] = None):
        self.products = products
        self.collections = collections
        self.synchronizer = synchronizer or CollectionSynchronizer(collections)

    @classmethod
    def from_stores(cls, product_store, collection_store, max_workers: int = 8) -> 'ProductService':
        collections = CollectionRepository(collection_store)
        return cls(
            ProductRepository(product_store),
            collections,
            CollectionSynchronizer(collections, max_workers=max_workers),
        )

    # ========== helpers ==========

    def _load_product(self, product_id: Any) -> Product:
        oid = parse_object_id(product_id)
        product = self.products.get(oid) if oid is not None else None
        if product is None:
            raise NotFound('Product not found')
        return product

    @staticmethod
    def _require_caller(caller_id: Optional[str]) -> None:
        if not caller_id:
            raise Unauthorized()

    def expand(self, product: Product) -> ExpandedProduct:
        """Join product.collections against the collection store.

        Ids that no longer resolve are dropped; order follows the product.
        """
        found = self.collections.find_by_ids(product.collections)
        resolved = [found[cid] for cid in product.collections if cid in found]
        dangling = len(product.collections) - len(resolved)
        if dangling:
            logger.debug('Product %s references %d missing collection(s)', product.id, dangling)
        return ExpandedProduct(product=product, collections=resolved)

    # ========== operations ==========

    def get_product(self, product_id: Any) -> ExpandedProduct:
        """Fetch a product with its collections expanded"""
        return self.expand(self._load_product(product_id))

    def update_product(self, product_id: Any, payload: Any, caller_id: Optional[str]) -> ProductUpdateResult:
        """Replace a product's fields and resync its collection memberships.

        Raises Unauthorized, NotFound or InvalidInput before any write, and
        PartialSyncFailure if some collection writes failed (the product
        record is then not updated).
        """
        self._require_caller(caller_id)
        product = self._load_product(product_id)
        fields = validate_product_payload(payload)

        diff = diff_memberships(product.collections, fields['collections'])
        logger.info(
            'Updating product %s for %s: +%d/-%d collections',
            product.id, caller_id, len(diff.to_add), len(diff.to_remove),
        )
        self.synchronizer.apply(product.id, diff)

        updated = self.products.replace_fields(product.id, fields)
        if updated is None:
            # Deleted by another request between the load and the write.
            raise NotFound('Product not found')

        return ProductUpdateResult(
            product=self.expand(updated),
            collections=self.collections.list_all(),
        )

    def delete_product(self, product_id: Any, caller_id: Optional[str]) -> Product:
        """Delete a product, then unlink it from its collections.

        The delete is not undone if unlinking fails; PartialSyncFailure is
        raised in that case.
        """
        self._require_caller(caller_id)
        product = self._load_product(product_id)

        if not self.products.delete(product.id):
            raise NotFound('Product not found')
        logger.info('Deleted product %s for %s', product.id, caller_id)

        self.synchronizer.remove_product_from_collections(product.id, product.collections)
        return product
