"""Index contraction and outer products."""

from __future__ import annotations

from .tensor import Tensor, decode_flat_index, flat_index


def contract(tensor: Tensor, upper_idx: int, lower_idx: int) -> Tensor:
    """Contract upper index ``upper_idx`` with lower index ``lower_idx``."""
    m, n = tensor.upper, tensor.lower
    if m < 1 or n < 1:
        raise ValueError("contraction needs at least one upper and one lower index")
    if not 0 <= upper_idx < m:
        raise ValueError(f"upper_idx {upper_idx} out of range for M={m}")
    if not 0 <= lower_idx < n:
        raise ValueError(f"lower_idx {lower_idx} out of range for N={n}")

    dim = tensor.dim
    rank_out = m + n - 2
    components = []
    for flat_out in range(dim**rank_out):
        out = decode_flat_index(flat_out, dim, rank_out)
        upper_out, lower_out = out[: m - 1], out[m - 1 :]
        components.append(
            sum(
                tensor.component(
                    upper_out[:upper_idx]
                    + [k]
                    + upper_out[upper_idx:]
                    + lower_out[:lower_idx]
                    + [k]
                    + lower_out[lower_idx:]
                )
                for k in range(dim)
            )
        )
    return Tensor(m - 1, n - 1, dim, components)


def outer(a: Tensor, b: Tensor) -> Tensor:
    """Outer product with index layout [upper_a, upper_b, lower_a, lower_b]."""
    if a.dim != b.dim:
        raise ValueError(f"Dimension mismatch in outer product: {a.dim} vs {b.dim}")
    dim = a.dim
    m1, n1, m2, n2 = a.upper, a.lower, b.upper, b.lower
    rank_out = m1 + m2 + n1 + n2
    components = []
    for flat_out in range(dim**rank_out):
        out = decode_flat_index(flat_out, dim, rank_out)
        upper_a = out[:m1]
        upper_b = out[m1 : m1 + m2]
        lower_a = out[m1 + m2 : m1 + m2 + n1]
        lower_b = out[m1 + m2 + n1 :]
        components.append(
            a.components[flat_index(upper_a + lower_a, dim)]
            * b.components[flat_index(upper_b + lower_b, dim)]
        )
    return Tensor(m1 + m2, n1 + n2, dim, components)