"""
In-memory stand-ins for the MongoDB record store, used by service and route
tests. They implement the same methods as ``MongoRecordStore``.
"""

from __future__ import annotations

import copy
import threading


class InMemoryRecordStore:
    def __init__(self, name: str = "records", docs=None):
        self.name = name
        self.docs: dict = {}
        self.failing_ids: set = set()  # ids whose set-field writes raise
        self.calls: list = []
        self._lock = threading.Lock()
        for doc in docs or []:
            self.insert(doc)

    def insert(self, doc: dict) -> None:
        self.docs[doc["_id"]] = copy.deepcopy(doc)

    def get(self, record_id):
        return self.docs.get(record_id)

    def _record(self, op: str, *args) -> None:
        with self._lock:
            self.calls.append((op,) + args)

    def find_by_id(self, record_id):
        self._record("find_by_id", record_id)
        doc = self.docs.get(record_id)
        return copy.deepcopy(doc) if doc else None

    def find_by_ids(self, record_ids):
        ids = list(record_ids)
        self._record("find_by_ids", ids)
        return [copy.deepcopy(self.docs[i]) for i in ids if i in self.docs]

    def find_all(self):
        self._record("find_all")
        return [copy.deepcopy(doc) for doc in self.docs.values()]

    def update(self, record_id, fields):
        self._record("update", record_id)
        with self._lock:
            doc = self.docs.get(record_id)
            if doc is None:
                return None
            doc.update(copy.deepcopy(fields))
            return copy.deepcopy(doc)

    def delete(self, record_id):
        self._record("delete", record_id)
        with self._lock:
            return self.docs.pop(record_id, None) is not None

    def append_to_set_field(self, record_id, field, value):
        self._record("append_to_set_field", record_id, field, value)
        if record_id in self.failing_ids:
            raise RuntimeError(f"write to {record_id} failed")
        with self._lock:
            doc = self.docs.get(record_id)
            if doc is None:
                return False
            values = doc.setdefault(field, [])
            if value not in values:
                values.append(value)
            return True

    def remove_from_set_field(self, record_id, field, value):
        self._record("remove_from_set_field", record_id, field, value)
        if record_id in self.failing_ids:
            raise RuntimeError(f"write to {record_id} failed")
        with self._lock:
            doc = self.docs.get(record_id)
            if doc is None:
                return False
            doc[field] = [v for v in doc.get(field, []) if v != value]
            return True

    def writes(self):
        return [c for c in self.calls if c[0] in ("update", "delete", "append_to_set_field", "remove_from_set_field")]
