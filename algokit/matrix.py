"""Operations on rectangular integer matrices."""

from collections.abc import Sequence


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_image() needs a square matrix")
    for i in range(size):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def row_with_max_ones(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the first row holding the most 1s, and how many 1s it holds."""
    if not mat or not mat[0]:
        raise ValueError("row_with_max_ones() needs a non-empty matrix")
    counts = [sum(1 for cell in row if cell == 1) for row in mat]
    best = max(counts)
    return counts.index(best), best


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result