"""
MongoDB record store - the only place that talks to pymongo.

One store wraps one pymongo collection. Every method is a single-document
operation (or a single query), so atomicity is whatever MongoDB gives per
document; nothing here spans records.
"""

from typing import Any, Dict, Iterable, List, Optional

from pymongo import ReturnDocument


class MongoRecordStore:
    """Per-record CRUD plus set-field helpers over a pymongo collection"""

    def __init__(self, collection):
        self.collection = collection

    def find_by_id(self, record_id) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({'_id': record_id})

    def find_by_ids(self, record_ids: Iterable) -> List[Dict[str, Any]]:
        """Fetch every existing record among ``record_ids`` (unordered)."""
        ids = list(record_ids)
        if not ids:
            return []
        return list(self.collection.find({'_id': {'$in': ids}}))

    def find_all(self) -> List[Dict[str, Any]]:
        return list(self.collection.find({}))

    def update(self, record_id, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """``$set`` the given fields and return the updated document."""
        return self.collection.find_one_and_update(
            {'_id': record_id},
            {'$set': fields},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, record_id) -> bool:
        result = self.collection.delete_one({'_id': record_id})
        return result.deleted_count > 0

    def append_to_set_field(self, record_id, field: str, value) -> bool:
        """Add ``value`` to an array field unless already there.

        Returns whether the record exists.
        """
        result = self.collection.update_one({'_id': record_id}, {'$addToSet': {field: value}})
        return result.matched_count > 0

    def remove_from_set_field(self, record_id, field: str, value) -> bool:
        """Pull every occurrence of ``value`` from an array field.

        Returns whether the record exists.
        """
        result = self.collection.update_one({'_id': record_id}, {'$pull': {field: value}})
        return result.matched_count > 0
