"""Classic comparison sorts and merging of sorted sequences."""

from collections.abc import Iterator, MutableSequence, Sequence


def bubble_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def selection_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by moving the smallest remaining element forward."""
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]


def _merge(left: Sequence[int], right: Sequence[int]) -> Iterator[int]:
    """Yield the merge of two ascending sequences."""
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def merge_sort(items: Sequence[int]) -> list[int]:
    """Return a new ascending list holding the elements of ``items``."""
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            mid += 1
            low += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1


def merge_sorted(a: list[int], m: int, b: Sequence[int], n: int) -> None:
    """Replace ``a`` with the merge of its first ``m`` and ``b``'s first ``n`` items."""
    a[:] = list(_merge(a[:m], b[:n]))