"""Matrix and grid problems: shortest paths, determinants, queens and more."""

from __future__ import annotations

from typing import Optional, Sequence

INF = 99999
"""Distance that marks two vertices as not connected."""

_DISTANCE_HEADER = (
    "The following matrix shows the shortest distances between every pair of vertices \n"
)


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return shortest distances between every pair of vertices; INF means unreachable."""
    size = _check_square(graph)
    dist = [list(row) for row in graph]
    for k in range(size):
        for i in range(size):
            for j in range(size):
                if dist[i][k] == INF or dist[k][j] == INF:
                    continue
                through = dist[i][k] + dist[k][j]
                if through < dist[i][j]:
                    dist[i][j] = through
    return dist


def format_distances(dist: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as text, writing INF for unreachable pairs."""
    lines = [_DISTANCE_HEADER]
    for row in dist:
        cells = ("INF" if value == INF else str(value) for value in row)
        lines.append("".join(f"{cell}     " for cell in cells) + "\n")
    return "".join(lines)


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Return the determinant of a square matrix by cofactor expansion along the first row."""
    size = _check_square(matrix)
    if size == 0:
        return 1
    if size == 1:
        return matrix[0][0]
    if size == 2:
        return matrix[0][0] * matrix[1][1] - matrix[1][0] * matrix[0][1]
    total = 0
    for column, value in enumerate(matrix[0]):
        minor = [row[:column] + row[column + 1:] for row in (list(r) for r in matrix[1:])]
        sign = -1 if column % 2 else 1
        total += sign * value * determinant(minor)
    return total


def celebrity(matrix: Sequence[Sequence[int]]) -> Optional[int]:
    """Return the person everyone knows and who knows no one, or None.

    ``matrix[a][b] == 1`` means that ``a`` knows ``b``.
    """
    size = _check_square(matrix)
    if size == 0:
        return None
    candidates = list(range(size))
    while len(candidates) > 1:
        first = candidates.pop()
        second = candidates.pop()
        candidates.append(second if matrix[first][second] == 1 else first)
    candidate = candidates[0]
    knows_nobody = all(value == 0 for value in matrix[candidate])
    known_by_all = sum(matrix[person][candidate] == 1 for person in range(size)) == size - 1
    return candidate if knows_nobody and known_by_all else None


def min_path_cost(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Cheapest cost to reach cell (m, n) from (0, 0) moving right, down or diagonally."""
    if not cost or not 0 <= m < len(cost) or not 0 <= n < len(cost[0]):
        raise IndexError(f"cell ({m}, {n}) is outside the grid")
    total = [[0] * (n + 1) for _ in range(m + 1)]
    total[0][0] = cost[0][0]
    for i in range(1, m + 1):
        total[i][0] = total[i - 1][0] + cost[i][0]
    for j in range(1, n + 1):
        total[0][j] = total[0][j - 1] + cost[0][j]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            total[i][j] = min(total[i - 1][j], total[i][j - 1], total[i - 1][j - 1]) + cost[i][j]
    return total[m][n]


def n_queens(n: int) -> Optional[list[int]]:
    """Return the first placement of ``n`` non-attacking queens found by backtracking.

    The result gives the column of the queen in each row, or None when no
    placement exists.
    """
    if n < 0:
        raise ValueError("number of queens must not be negative")
    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for column in range(n):
            if (
                column in used_columns
                or row - column in used_diagonals
                or row + column in used_antidiagonals
            ):
                continue
            columns.append(column)
            used_columns.add(column)
            used_diagonals.add(row - column)
            used_antidiagonals.add(row + column)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(column)
            used_diagonals.discard(row - column)
            used_antidiagonals.discard(row + column)
        return False

    return columns if place(0) else None


def longest_common_subsequence(a: Sequence[object], b: Sequence[object]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for item in a:
        current = [0]
        for j, other in enumerate(b):
            if item == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]