"""
Collection repository - the reverse side of the product/collection link.
"""

from typing import Dict, Iterable, List

from ..models.collection import Collection


class CollectionRepository:
    """Collection record store"""

    def __init__(self, store):
        self.store = store

    def list_all(self) -> List[Collection]:
        return [Collection.from_dict(doc) for doc in self.store.find_all()]

    def find_by_ids(self, collection_ids: Iterable) -> Dict[object, Collection]:
        """Map each existing id to its Collection; missing ids are absent."""
        return {
            doc['_id']: Collection.from_dict(doc)
            for doc in self.store.find_by_ids(collection_ids)
        }

    def add_product(self, collection_id, product_id) -> bool:
        """Add a member; False if the collection does not exist"""
        return self.store.append_to_set_field(collection_id, Collection.MEMBERS_FIELD, product_id)

    def remove_product(self, collection_id, product_id) -> bool:
        """Remove a member; False if the collection does not exist"""
        return self.store.remove_from_set_field(collection_id, Collection.MEMBERS_FIELD, product_id)
