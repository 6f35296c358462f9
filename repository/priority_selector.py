# filename: priority_selector.py

import heapq

from loguru import logger


class PrioritySelector:
    """
    Min-priority container for tree nodes.

    Ordering comes from the nodes' own ``__lt__``: the smallest weight is
    extracted first and, among equal weights, the lexicographically largest
    key. Extracting everything therefore yields the reverse of a
    (weight desc, key asc) sort.
    """

    def __init__(self, items=()):
        # Seeding is a batch operation; heapify restores the invariant in one pass.
        self._heap = list(items)
        heapq.heapify(self._heap)
        logger.debug(f"priority selector seeded with {len(self._heap)} items")

    @property
    def size(self):
        return len(self._heap)

    def __len__(self):
        return len(self._heap)

    def is_empty(self):
        return not self._heap

    def peek_min(self):
        return self._heap[0] if self._heap else None

    def extract_min(self):
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def insert(self, item):
        heapq.heappush(self._heap, item)
