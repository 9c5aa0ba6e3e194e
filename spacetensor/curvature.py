"""Riemann, Ricci and Einstein curvature tensors."""

from __future__ import annotations

from .algebra import contract
from .tensor import Tensor, decode_flat_index


def riemann(gamma: Tensor, partial_gamma: Tensor) -> Tensor:
    """Riemann tensor R^ρ_{σμν} from Γ^ρ_{κμ} and ∂_ν Γ^ρ_{κμ}.

    R^ρ_{σμν} = ∂_μ Γ^ρ_{νσ} − ∂_ν Γ^ρ_{μσ} + Γ^ρ_{μλ} Γ^λ_{νσ} − Γ^ρ_{νλ} Γ^λ_{μσ}
    """
    if (gamma.upper, gamma.lower) != (1, 2):
        raise ValueError("Christoffel symbols must be a rank (1, 2) tensor")
    if (partial_gamma.upper, partial_gamma.lower) != (1, 3):
        raise ValueError("Christoffel derivatives must be a rank (1, 3) tensor")
    if gamma.dim != partial_gamma.dim:
        raise ValueError(
            f"Dimension mismatch: gamma ({gamma.dim}) vs partial_gamma ({partial_gamma.dim})"
        )

    dim = gamma.dim
    components = []
    for flat_out in range(dim**4):
        rho, sigma, mu, nu = decode_flat_index(flat_out, dim, 4)
        term1 = partial_gamma.component((rho, nu, sigma, mu))
        term2 = partial_gamma.component((rho, mu, sigma, nu))
        term3 = sum(
            gamma.component((rho, mu, lam)) * gamma.component((lam, nu, sigma))
            for lam in range(dim)
        )
        term4 = sum(
            gamma.component((rho, nu, lam)) * gamma.component((lam, mu, sigma))
            for lam in range(dim)
        )
        components.append(term1 - term2 + term3 - term4)
    return Tensor(1, 3, dim, components)


def ricci_tensor(r: Tensor) -> Tensor:
    """Ricci tensor R_{σν} = Σ_ρ R^ρ_{σρν}."""
    if (r.upper, r.lower) != (1, 3):
        raise ValueError("Riemann tensor must be a rank (1, 3) tensor")
    return contract(r, 0, 1)


def ricci_scalar(g_inv: Tensor, ric: Tensor) -> Tensor:
    """Ricci scalar R = g^{μν} R_{μν}, returned as a rank (0, 0) tensor."""
    if (g_inv.upper, g_inv.lower) != (2, 0):
        raise ValueError("inverse metric must be a rank (2, 0) tensor")
    if (ric.upper, ric.lower) != (0, 2):
        raise ValueError("Ricci tensor must be a rank (0, 2) tensor")
    if g_inv.dim != ric.dim:
        raise ValueError(f"Dimension mismatch: g_inv ({g_inv.dim}) vs ric ({ric.dim})")
    total = sum(a * b for a, b in zip(g_inv.components, ric.components))
    return Tensor(0, 0, g_inv.dim, [total])


def einstein_tensor(ric: Tensor, g: Tensor, scalar: Tensor) -> Tensor:
    """Einstein tensor G_{μν} = R_{μν} − ½ g_{μν} R."""
    if (ric.upper, ric.lower) != (0, 2) or (g.upper, g.lower) != (0, 2):
        raise ValueError("Ricci tensor and metric must be rank (0, 2) tensors")
    if scalar.rank != 0:
        raise ValueError("Ricci scalar must be a rank (0, 0) tensor")
    if ric.dim != g.dim:
        raise ValueError(f"Dimension mismatch: ric ({ric.dim}) vs g ({g.dim})")
    r = scalar.components[0]
    return Tensor(
        0,
        2,
        ric.dim,
        [r_mn - g_mn * r * 0.5 for r_mn, g_mn in zip(ric.components, g.components)],
    )