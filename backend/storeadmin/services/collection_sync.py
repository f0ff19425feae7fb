"""
Keeps Collection.products in step with Product.collections.

Each per-collection write is independent, so a batch is fanned out on a
thread pool and joined with ``concurrent.futures.wait``. Every write in the
batch resolves before any failure is reported; nothing is cancelled and
nothing already written is rolled back.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Dict, Iterable, List, Tuple

from .errors import NotFound, PartialSyncFailure
from .membership_diff import MembershipDiff

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class CollectionSynchronizer:
    """Applies membership diffs to the collection side"""

    def __init__(self, collections, max_workers: int = DEFAULT_MAX_WORKERS):
        # collections: CollectionRepository
        self.collections = collections
        self.max_workers = max(1, max_workers)

    def add_product_to_collections(self, product_id, collection_ids: Iterable) -> None:
        self._run(product_id, [(cid, self._add) for cid in collection_ids])

    def remove_product_from_collections(self, product_id, collection_ids: Iterable) -> None:
        self._run(product_id, [(cid, self._remove) for cid in collection_ids])

    def apply(self, product_id, diff: MembershipDiff) -> None:
        """Apply both halves of ``diff`` as one batch."""
        tasks = [(cid, self._add) for cid in diff.to_add]
        tasks += [(cid, self._remove) for cid in diff.to_remove]
        self._run(product_id, tasks)

    def _add(self, collection_id, product_id) -> None:
        if not self.collections.add_product(collection_id, product_id):
            raise NotFound(f'Collection {collection_id} not found')

    def _remove(self, collection_id, product_id) -> None:
        # A collection that is gone no longer lists the product either.
        if not self.collections.remove_product(collection_id, product_id):
            logger.debug('Collection %s already gone, nothing to unlink', collection_id)

    def _run(self, product_id, tasks: List[Tuple[object, Callable]]) -> None:
        if not tasks:
            return

        failures: Dict = {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(tasks))) as executor:
            futures = {
                executor.submit(action, collection_id, product_id): collection_id
                for collection_id, action in tasks
            }
            wait(futures)

        for future, collection_id in futures.items():
            exc = future.exception()
            if exc is None:
                continue
            logger.warning(
                'Membership update failed: product=%s collection=%s error=%r',
                product_id, collection_id, exc,
            )
            failures[collection_id] = exc

        if failures:
            raise PartialSyncFailure(product_id, failures)
