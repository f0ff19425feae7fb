"""
Product repository - maps product documents to ``Product`` models.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from ..models.product import Product


class ProductRepository:
    """Product record store"""

    def __init__(self, store):
        self.store = store

    def get(self, product_id) -> Optional[Product]:
        """Return the product, or None if it does not exist"""
        doc = self.store.find_by_id(product_id)
        return Product.from_dict(doc) if doc else None

    def replace_fields(self, product_id, fields: Dict[str, Any]) -> Optional[Product]:
        """Overwrite the editable fields and return the stored product.

        Fields outside ``Product.EDITABLE_FIELDS`` are ignored.
        """
        doc = {k: v for k, v in fields.items() if k in Product.EDITABLE_FIELDS}
        doc['updated_at'] = datetime.utcnow()
        updated = self.store.update(product_id, doc)
        return Product.from_dict(updated) if updated else None

    def delete(self, product_id) -> bool:
        return self.store.delete(product_id)
