"""Electromagnetic field tensors and their stress-energy."""

from __future__ import annotations

from math import isqrt
from typing import Callable, Sequence

from .calculus import partial_deriv
from .linalg import invert_matrix
from .tensor import Tensor, decode_flat_index

Potential = Callable[[Sequence[float]], Sequence[float]]


def faraday(partial_a: Tensor) -> Tensor:
    """Faraday tensor F_{μν} = ∂_μ A_ν − ∂_ν A_μ.

    ``partial_a`` holds ∂_μ A_ν at index [ν, μ], the derivative index last.
    """
    if (partial_a.upper, partial_a.lower) != (0, 2):
        raise ValueError("potential derivatives must be a rank (0, 2) tensor")
    dim = partial_a.dim
    components = []
    for flat_out in range(dim**2):
        mu, nu = decode_flat_index(flat_out, dim, 2)
        components.append(
            partial_a.component((nu, mu)) - partial_a.component((mu, nu))
        )
    return Tensor(0, 2, dim, components)


def em_stress_energy(f: Tensor, g: Tensor, g_inv: Tensor, mu_0: float) -> Tensor:
    """Electromagnetic stress-energy T_{μν} for the (−,+,+,+) signature.

    T_{μν} = (F_{μλ} g^{λρ} F_{νρ} − ¼ g_{μν} F_{λρ} F^{λρ}) / μ₀
    """
    if (f.upper, f.lower) != (0, 2) or (g.upper, g.lower) != (0, 2):
        raise ValueError("Faraday tensor and metric must be rank (0, 2) tensors")
    if (g_inv.upper, g_inv.lower) != (2, 0):
        raise ValueError("inverse metric must be a rank (2, 0) tensor")
    if f.dim != g.dim:
        raise ValueError(f"Dimension mismatch: f ({f.dim}) vs g ({g.dim})")
    if f.dim != g_inv.dim:
        raise ValueError(f"Dimension mismatch: f ({f.dim}) vs g_inv ({g_inv.dim})")

    dim = f.dim
    invariant = sum(
        f.component((lam, rho))
        * g_inv.component((lam, alpha))
        * g_inv.component((rho, beta))
        * f.component((alpha, beta))
        for lam, rho, alpha, beta in (
            decode_flat_index(flat, dim, 4) for flat in range(dim**4)
        )
    )

    scale = 1.0 / mu_0
    components = []
    for flat_out in range(dim**2):
        mu, nu = decode_flat_index(flat_out, dim, 2)
        a_mn = sum(
            f.component((mu, lam)) * g_inv.component((lam, rho)) * f.component((nu, rho))
            for lam, rho in (decode_flat_index(flat, dim, 2) for flat in range(dim**2))
        )
        components.append((a_mn - g.component((mu, nu)) * invariant * 0.25) * scale)
    return Tensor(0, 2, dim, components)


def em_t_grid(
    a_fn: Potential,
    g_grid: Sequence[Sequence[float]],
    nx: int,
    ny: int,
    nz: int,
    h: float,
    mu_0: float,
    eps: float,
) -> list[Tensor]:
    """EM stress-energy T_{μν} at every point of an ``nx``×``ny``×``nz`` grid.

    Point ``(ix, iy, iz)`` sits at flat index ``ix*ny*nz + iy*nz + iz`` and at
    coordinates ``(ix*h, iy*h, iz*h, 0, …)``. ∂_μ A_ν is taken by central
    differences with step ``eps``. A singular metric falls back to the
    identity as its inverse.
    """
    n_points = nx * ny * nz
    if len(g_grid) != n_points:
        raise ValueError("g_grid must have nx*ny*nz entries")
    if n_points == 0:
        return []

    dim2 = len(g_grid[0])
    dim = isqrt(dim2)
    if dim * dim != dim2:
        raise ValueError("Metric must have dim² components")
    if dim < 3:
        raise ValueError("dim must be >= 3 for the 3-D EM source")

    identity = [1.0 if k // dim == k % dim else 0.0 for k in range(dim2)]

    def potential(x: Sequence[float]) -> Tensor:
        return Tensor(0, 1, dim, list(a_fn(x)))

    result = []
    for flat, g_vals in enumerate(g_grid):
        ix, iy, iz = flat // (ny * nz), (flat // nz) % ny, flat % nz
        g = Tensor(0, 2, dim, g_vals)
        g_inv_vals = invert_matrix(g_vals, dim)
        g_inv = Tensor(2, 0, dim, g_inv_vals if g_inv_vals is not None else identity)

        point = [0.0] * dim
        point[0], point[1], point[2] = ix * h, iy * h, iz * h

        partial_a = partial_deriv(potential, point, eps)
        result.append(em_stress_energy(faraday(partial_a), g, g_inv, mu_0))
    return result