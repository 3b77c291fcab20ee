"""Classic comparison and distribution sorting algorithms.

Every function takes an iterable, leaves it untouched and returns a new
list holding the items in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate
from typing import Any, TypeVar

T = TypeVar("T")

_CHAR_RANGE = 256
_RADIX = 10


def _insertion_sort_in_place(items: list[Any]) -> None:
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(items)
    _insertion_sort_in_place(result)
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front each round."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[T]) -> list[T]:
    """Gapped insertion sort with the gap halved each pass."""
    result = list(items)
    size = len(result)
    gap = size // 2
    while gap > 0:
        for i in range(size):
            current = result[i]
            j = i - gap
            while j >= 0 and result[j] > current:
                result[j + gap] = result[j]
                j -= gap
            result[j + gap] = current
        gap //= 2
    return result


def _sift_down(heap: list[Any], root: int, size: int) -> None:
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, root, size)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            mid = _partition(result, low, high)
            pending.append((low, mid - 1))
            pending.append((mid + 1, high))
    return result


def _require_non_negative_ints(values: list[Any], algorithm: str) -> None:
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{algorithm} sorts integers, got {value!r}")
        if value < 0:
            raise ValueError(f"{algorithm} cannot sort negative value {value}")


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    values = list(items)
    if not values:
        return []
    _require_non_negative_ints(values, "counting sort")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def _drain(buckets: Iterable[list[T]]) -> list[T]:
    result: list[T] = []
    for bucket in buckets:
        _insertion_sort_in_place(bucket)
        result.extend(bucket)
    return result


def bucket_sort_int(items: Iterable[int]) -> list[int]:
    """Bucket sort of integers with one bucket per value in the range."""
    values = list(items)
    if not values:
        return []
    low, high = min(values), max(values)
    buckets: list[list[int]] = [[] for _ in range(high - low + 1)]
    for value in values:
        buckets[value - low].append(value)
    return _drain(buckets)


def bucket_sort_float(items: Iterable[float]) -> list[float]:
    """Bucket sort of numbers spread over as many buckets as there are items."""
    values = list(items)
    if not values:
        return []
    count = len(values)
    low, high = min(values), max(values)
    span = high - low
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in values:
        index = int((value - low) / span * count) if span else 0
        buckets[min(index, count - 1)].append(value)
    return _drain(buckets)


def bucket_sort_char(items: Iterable[str]) -> list[str]:
    """Bucket sort of single characters with code points below 256."""
    chars = list(items)
    buckets: list[list[str]] = [[] for _ in range(_CHAR_RANGE)]
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"expected a single character, got {char!r}")
        code = ord(char)
        if code >= _CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the 8-bit range")
        buckets[code].append(char)
    return _drain(buckets)


def radix_sort_int(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    result = list(items)
    if not result:
        return []
    _require_non_negative_ints(result, "radix sort")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        digits: list[list[int]] = [[] for _ in range(_RADIX)]
        for value in result:
            digits[(value // exp) % _RADIX].append(value)
        result = [value for bucket in digits for value in bucket]
        exp *= _RADIX
    return result


def radix_sort_str(items: Iterable[str]) -> list[str]:
    """Least-significant-character radix sort of strings.

    A string shorter than the current position sorts before any string
    that has a character there, so the result is in lexicographic order.
    """
    result = list(items)
    longest = max((len(text) for text in result), default=0)
    for pos in range(longest - 1, -1, -1):
        result.sort(key=lambda text: ord(text[pos]) + 1 if pos < len(text) else 0)
    return result