"""Dense linear algebra helpers: matrix inversion and Newton-Raphson steps."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

PIVOT_TOLERANCE = 1e-14

VectorFunction = Callable[[Sequence[float]], Sequence[float]]


def _pivot_row(rows: list[list[float]], col: int) -> int:
    """Row at or below ``col`` with the largest magnitude in ``col``.

    Ties go to the lowest such row.
    """
    return max(range(col, len(rows)), key=lambda i: (abs(rows[i][col]), i))


def invert_matrix(a: Sequence[float], dim: int) -> Optional[list[float]]:
    """Invert a ``dim``×``dim`` matrix given as a flat row-major sequence.

    Uses Gauss-Jordan elimination with partial pivoting. Returns ``None``
    when a pivot smaller than 1e-14 in magnitude shows the matrix is singular.
    """
    if len(a) != dim * dim:
        raise ValueError(f"expected {dim * dim} entries for a {dim}x{dim} matrix, got {len(a)}")

    aug = [
        [float(v) for v in a[i * dim : (i + 1) * dim]]
        + [1.0 if i == j else 0.0 for j in range(dim)]
        for i in range(dim)
    ]

    for col in range(dim):
        pivot_row = _pivot_row(aug, col)
        aug[col], aug[pivot_row] = aug[pivot_row], aug[col]

        pivot = aug[col][col]
        if abs(pivot) < PIVOT_TOLERANCE:
            return None

        inv = 1.0 / pivot
        aug[col] = [v * inv for v in aug[col]]
        pivot_values = aug[col]

        for row, values in enumerate(aug):
            if row == col:
                continue
            factor = values[col]
            aug[row] = [v - factor * p for v, p in zip(values, pivot_values)]

    return [v for row in aug for v in row[dim:]]


def _solve_linear(a: list[list[float]], b: list[float]) -> list[float]:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting.

    Columns whose pivot is below 1e-14 are skipped and their unknown left at 0.
    """
    n = len(b)
    for col in range(n):
        pivot_row = _pivot_row(a, col)
        a[col], a[pivot_row] = a[pivot_row], a[col]
        b[col], b[pivot_row] = b[pivot_row], b[col]

        pivot = a[col][col]
        if abs(pivot) < PIVOT_TOLERANCE:
            continue

        for row in range(col + 1, n):
            factor = a[row][col] / pivot
            a[row][col:] = [v - factor * p for v, p in zip(a[row][col:], a[col][col:])]
            b[row] -= factor * b[col]

    x = [0.0] * n
    for i in reversed(range(n)):
        diag = a[i][i]
        if abs(diag) < PIVOT_TOLERANCE:
            continue
        tail = sum(a[i][j] * x[j] for j in range(i + 1, n))
        x[i] = (b[i] - tail) / diag
    return x


def newton_step(f: VectorFunction, x: Sequence[float], eps: float) -> list[float]:
    """One Newton-Raphson step for the system ``f(x) = 0``.

    The Jacobian is built by central differences with step ``eps``; the
    update solves ``J δx = −f(x)`` and returns ``x + δx``. Directions in which
    the Jacobian is singular receive no update.
    """
    point = [float(v) for v in x]
    n = len(point)
    fx = list(f(point))
    if len(fx) != n:
        raise ValueError(f"F must map R^n to R^n (got {len(fx)} outputs for {n} inputs)")

    inv_two_eps = 1.0 / (2.0 * eps)
    columns = []
    for col in range(n):
        xp = list(point)
        xp[col] += eps
        xm = list(point)
        xm[col] -= eps
        fp, fm = list(f(xp)), list(f(xm))
        if len(fp) != n or len(fm) != n:
            raise ValueError("F must return the same number of outputs as inputs")
        columns.append([(p - m) * inv_two_eps for p, m in zip(fp, fm)])

    jacobian = [list(row) for row in zip(*columns)] if n else []
    delta = _solve_linear(jacobian, [-r for r in fx])
    return [xi + di for xi, di in zip(point, delta)]