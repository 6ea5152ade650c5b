"""Searching in sorted sequences and sorted matrices."""

from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix whose rows and columns ascend.

    The search starts in the top-right corner and moves left or down.
    """
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    last_row = len(matrix) - 1
    while col >= 0 and row <= last_row:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False