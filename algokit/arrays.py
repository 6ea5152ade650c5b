"""Algorithms over integer sequences."""

from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import accumulate


def max_frequency_elements(nums: Sequence[int]) -> int:
    """Return the total count of elements whose value has the highest frequency."""
    counts = Counter(nums)
    if not counts:
        return 0
    top = max(counts.values())
    return sum(count for count in counts.values() if count == top)


def repeating_elements(items: Sequence[int]) -> list[int]:
    """Return each value that occurs more than once, in order of first appearance."""
    return [value for value, count in Counter(items).items() if count > 1]


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the distinct values present in both sequences, in ``nums1`` order."""
    present = set(nums2)
    return [value for value in dict.fromkeys(nums1) if value in present]


def majority_element(nums: Sequence[int]) -> int:
    """Return the most frequent value; ties go to the value seen first."""
    if not nums:
        raise ValueError("majority_element() needs at least one element")
    return Counter(nums).most_common(1)[0][0]


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product() needs at least one element")
    high = low = best = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, value * high)
        low = min(value, value * low)
        best = max(best, high)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray() needs at least one element")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact an ascending sequence so its first k items are distinct; return k."""
    k = 0
    for value in nums:
        if k == 0 or nums[k - 1] != value:
            nums[k] = value
            k += 1
    return k


def reverse_after(items: MutableSequence[int], m: int) -> None:
    """Reverse, in place, the part of ``items`` after index ``m``."""
    items[m + 1:] = items[m + 1:][::-1]


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    shift = k % len(nums)
    if shift:
        nums[:] = list(nums[-shift:]) + list(nums[:-shift])


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def minimum_deletions(nums: Sequence[int]) -> int:
    """Return the fewest deletions from either end that remove both min and max."""
    if not nums:
        raise ValueError("minimum_deletions() needs at least one element")
    size = len(nums)
    lowest = min(range(size), key=nums.__getitem__)
    highest = max(range(size), key=nums.__getitem__)
    left, right = sorted((lowest, highest))
    from_front = right + 1
    from_back = size - left
    both_ends = left + 1 + size - right
    return min(from_front, from_back, both_ends)


def pivot_index(nums: Sequence[int]) -> int:
    """Return the first index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if total - left - value == left:
            return index
        left += value
    return -1


def array_sum(items: Sequence[int]) -> int:
    """Return the sum of ``items``."""
    return sum(items)


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the given vertical lines."""
    start, end = 0, len(heights) - 1
    best = 0
    while start < end:
        best = max(best, (end - start) * min(heights[start], heights[end]))
        if heights[start] <= heights[end]:
            start += 1
        else:
            end -= 1
    return best