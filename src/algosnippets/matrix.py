# src/algosnippets/matrix.py
# Dense matrix multiply over lists of rows (textbook triple loop).

from typing import Sequence

Matrix = list[list[int]]

class DimensionMismatchError(ValueError):
    """Raised when matrices are ragged or their shapes cannot be multiplied."""

def _columns(m: Sequence[Sequence[int]], name: str) -> int:
    """Column count of m; every row must have it."""
    if not m:
        return 0
    width = len(m[0])
    for i, row in enumerate(m):
        if len(row) != width:
            raise DimensionMismatchError(
                f"{name} is ragged: row 0 has {width} columns, row {i} has {len(row)}"
            )
    return width

def matrix_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """C[i][j] = sum(A[i][k] * B[k][j]) for an (m x n) A and an (n x p) B."""
    n = _columns(a, "A")
    p = _columns(b, "B")
    if a and n != len(b):
        raise DimensionMismatchError(
            f"A has {n} columns but B has {len(b)} rows"
        )

    c: Matrix = [[0] * p for _ in range(len(a))]
    for i in range(len(a)):
        for j in range(p):
            acc = 0
            for k in range(n):
                acc += a[i][k] * b[k][j]
            c[i][j] = acc
    return c

def identity(n: int) -> Matrix:
    if n < 0:
        raise ValueError(f"identity size must be >= 0, got {n}")
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]

def format_rows(m: Sequence[Sequence[int]]) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in m)
