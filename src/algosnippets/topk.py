# src/algosnippets/topk.py
# Top-K selection with a min-heap capped at k elements: O(n log k) time, O(k) space.

import heapq
from typing import Iterable, TypeVar

T = TypeVar("T")

class InvalidArgumentError(ValueError):
    """Raised when top_k is called with a negative k."""

def top_k(nums: Iterable[T], k: int) -> list[T]:
    """Return the k largest values of nums in ascending order.

    - k == 0 or empty input -> []
    - k >= len(nums) -> every element, sorted ascending
    - duplicates at the k-th boundary: any of them may be kept
    """
    if k < 0:
        raise InvalidArgumentError(f"k must be >= 0, got {k}")

    heap: list[T] = []
    for num in nums:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)  # drop the smallest

    # draining a min-heap yields ascending order
    return [heapq.heappop(heap) for _ in range(len(heap))]
