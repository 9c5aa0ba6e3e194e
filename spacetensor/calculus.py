"""Finite-difference partial derivatives and covariant derivatives."""

from __future__ import annotations

from typing import Callable, Sequence

from .tensor import Tensor, decode_flat_index

TensorField = Callable[[Sequence[float]], Tensor]


def partial_deriv(f: TensorField, point: Sequence[float], h: float) -> Tensor:
    """Central-difference derivative of a tensor field at ``point``.

    The derivative direction is appended as the last lower index.
    """
    dim = len(point)
    if dim < 1:
        raise ValueError("Point must have at least one coordinate")
    inv_two_h = 1.0 / (2.0 * h)

    perturbed = []
    for mu in range(dim):
        xp = list(point)
        xp[mu] += h
        xm = list(point)
        xm[mu] -= h
        fp, fm = f(xp), f(xm)
        if fp.dim != dim or fm.dim != dim:
            raise ValueError(
                f"f must return tensors with dim == len(point) (got {fp.dim} vs {dim})"
            )
        perturbed.append((fp, fm))

    upper, lower = perturbed[0][0].upper, perturbed[0][0].lower
    for fp, fm in perturbed:
        if (fp.upper, fp.lower) != (upper, lower) or (fm.upper, fm.lower) != (upper, lower):
            raise ValueError("f must return tensors of a single rank")

    by_direction = [
        [(p - m) * inv_two_h for p, m in zip(fp.components, fm.components)]
        for fp, fm in perturbed
    ]
    components = [value for column in zip(*by_direction) for value in column]
    return Tensor(upper, lower + 1, dim, components)


def christoffel_partial_deriv(f: TensorField, point: Sequence[float], h: float) -> Tensor:
    """Central-difference derivative of Christoffel symbols.

    ``f`` returns Γ^ρ_{κμ} as a rank (1, 2) tensor; the result has layout
    [ρ, κ, μ, ν] holding ∂_ν Γ^ρ_{κμ}.
    """

    def symbols(x: Sequence[float]) -> Tensor:
        gamma = f(x)
        if (gamma.upper, gamma.lower) != (1, 2):
            raise ValueError("Christoffel symbols must be a rank (1, 2) tensor")
        return gamma

    return partial_deriv(symbols, point, h)


def covariant_derivative(tensor: Tensor, partial: Tensor, christoffel: Tensor) -> Tensor:
    """Covariant derivative ∇_k T from T, its partial derivative and Γ^i_{jk}."""
    m, n = tensor.upper, tensor.lower
    if (partial.upper, partial.lower) != (m, n + 1):
        raise ValueError(f"partial derivative must have rank ({m}, {n + 1})")
    if (christoffel.upper, christoffel.lower) != (1, 2):
        raise ValueError("Christoffel symbols must be a rank (1, 2) tensor")
    if tensor.dim != partial.dim:
        raise ValueError(
            f"Dimension mismatch between tensor and partial: {tensor.dim} vs {partial.dim}"
        )
    if tensor.dim != christoffel.dim:
        raise ValueError(
            f"Dimension mismatch between tensor and christoffel: "
            f"{tensor.dim} vs {christoffel.dim}"
        )

    dim = tensor.dim
    rank_out = m + n + 1
    components = []
    for flat_out, result in enumerate(partial.components):
        out = decode_flat_index(flat_out, dim, rank_out)
        upper, lower, k = out[:m], out[m : m + n], out[-1]

        for p, ip in enumerate(upper):
            result += sum(
                christoffel.component((ip, k, l))
                * tensor.component(upper[:p] + [l] + upper[p + 1 :] + lower)
                for l in range(dim)
            )
        for q, jq in enumerate(lower):
            result -= sum(
                christoffel.component((l, k, jq))
                * tensor.component(upper + lower[:q] + [l] + lower[q + 1 :])
                for l in range(dim)
            )
        components.append(result)

    return Tensor(m, n + 1, dim, components)