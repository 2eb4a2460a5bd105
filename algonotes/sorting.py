"""Elementary sorts, quicksort (recursive and stack based), selection and bit extraction.

The sorting functions return a new sorted list and leave their input alone.
``partition`` is the exception: it rearranges the list it is given in place.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any

_UINT32_MASK = 0xFFFFFFFF


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by swapping out-of-order neighbours; each pass settles the largest."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for pos in range(end):
            if result[pos + 1] < result[pos]:
                result[pos], result[pos + 1] = result[pos + 1], result[pos]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the already sorted prefix to its left."""
    result = list(items)
    for pos in range(1, len(result)):
        key = result[pos]
        slot = pos
        while slot > 0 and result[slot - 1] > key:
            result[slot] = result[slot - 1]
            slot -= 1
        result[slot] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by swapping the smallest remaining value into each position in turn."""
    result = list(items)
    for pos in range(len(result)):
        smallest = min(range(pos, len(result)), key=result.__getitem__)
        result[pos], result[smallest] = result[smallest], result[pos]
    return result


def _shell_gaps(length: int) -> list[int]:
    """Gaps 1, 4, 13, 40, ... up to the first exceeding length // 9, largest first."""
    gaps = [1]
    while gaps[-1] <= length // 9:
        gaps.append(3 * gaps[-1] + 1)
    return gaps[::-1]


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Insertion sort over interleaved runs with shrinking gaps (..., 40, 13, 4, 1)."""
    result = list(items)
    for gap in _shell_gaps(len(result)):
        for pos in range(gap, len(result)):
            key = result[pos]
            slot = pos
            while slot >= gap and result[slot - gap] > key:
                result[slot] = result[slot - gap]
                slot -= gap
            result[slot] = key
    return result


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``items[left:right + 1]`` in place around its last element.

    Afterwards the pivot sits at the returned index, nothing before it (within
    the range) is larger and nothing after it is smaller.
    """
    if not 0 <= left <= right < len(items):
        raise IndexError(f"range {left}..{right} out of bounds for length {len(items)}")
    pivot = items[right]
    i = left - 1
    j = right
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while j > left and items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[i], items[right] = items[right], items[i]
    return i


def _quick_sort_range(items: list[Any], left: int, right: int) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while right > left:
        part = partition(items, left, right)
        if part - left < right - part:
            _quick_sort_range(items, left, part - 1)
            left = part + 1
        else:
            _quick_sort_range(items, part + 1, right)
            right = part - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Recursive quicksort using the last element of each range as the pivot."""
    result = list(items)
    _quick_sort_range(result, 0, len(result) - 1)
    return result


def quick_sort_iterative(items: Iterable[Any]) -> list[Any]:
    """Quicksort without recursion: the larger subrange waits on an explicit stack."""
    result = list(items)
    pending: list[tuple[int, int]] = []
    left, right = 0, len(result) - 1
    while True:
        while right > left:
            part = partition(result, left, right)
            if part - left > right - part:
                pending.append((left, part - 1))
                left = part + 1
            else:
                pending.append((part + 1, right))
                right = part - 1
        if not pending:
            break
        left, right = pending.pop()
    return result


def kth_smallest(items: Iterable[Any], k: int) -> Any:
    """Return the value that would sit at 0-based position ``k`` once sorted.

    Uses repeated partitioning, narrowing to the side that holds ``k``.
    """
    work = list(items)
    if not 0 <= k < len(work):
        raise IndexError(f"k={k} out of range for {len(work)} items")
    left, right = 0, len(work) - 1
    while right > left:
        part = partition(work, left, right)
        if part >= k:
            right = part - 1
        if part <= k:
            left = part + 1
    return work[k]


def bits(key: int, start: int, count: int) -> int:
    """Return ``count`` bits of the 32-bit unsigned ``key``, starting at bit ``start``."""
    if start < 0 or count < 0:
        raise ValueError("start and count must not be negative")
    return ((key & _UINT32_MASK) >> start) & ((1 << count) - 1)