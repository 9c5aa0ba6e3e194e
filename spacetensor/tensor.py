"""Mixed-rank tensors with flat row-major component storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


def flat_index(indices: Iterable[int], dim: int) -> int:
    """Encode a multi-index into a flat row-major position."""
    position = 0
    for index in indices:
        position = position * dim + index
    return position


def decode_flat_index(flat: int, dim: int, rank: int) -> list[int]:
    """Decode a flat row-major position into a multi-index of ``rank`` entries."""
    indices = [0] * rank
    for slot in reversed(range(rank)):
        flat, indices[slot] = divmod(flat, dim)
    return indices


@dataclass(frozen=True)
class Tensor:
    """A tensor with ``upper`` contravariant and ``lower`` covariant indices.

    Components are stored flattened in row-major order, upper indices first.
    """

    upper: int
    lower: int
    dim: int
    components: tuple[float, ...]

    def __post_init__(self) -> None:
        if self.upper < 0 or self.lower < 0:
            raise ValueError("tensor ranks must be non-negative")
        if self.dim < 1:
            raise ValueError("tensor dimension must be at least 1")
        values = tuple(float(c) for c in self.components)
        expected = self.dim ** self.rank
        if len(values) != expected:
            raise ValueError(
                f"Expected {expected} components for Tensor<{self.upper},{self.lower}> "
                f"in dim {self.dim}, got {len(values)}"
            )
        object.__setattr__(self, "components", values)

    @property
    def rank(self) -> int:
        """Total number of indices."""
        return self.upper + self.lower

    def component(self, indices: Sequence[int]) -> float:
        """Return the component at a multi-index (upper indices first)."""
        if len(indices) != self.rank:
            raise ValueError(
                f"Expected {self.rank} indices for Tensor<{self.upper},{self.lower}>, "
                f"got {len(indices)}"
            )
        if any(not 0 <= i < self.dim for i in indices):
            raise IndexError(f"index {tuple(indices)} out of range for dim {self.dim}")
        return self.components[flat_index(indices, self.dim)]

    def __add__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        if (self.upper, self.lower) != (other.upper, other.lower):
            raise ValueError(
                f"Rank mismatch in tensor addition: "
                f"({self.upper},{self.lower}) vs ({other.upper},{other.lower})"
            )
        if self.dim != other.dim:
            raise ValueError(
                f"Dimension mismatch in tensor addition: {self.dim} vs {other.dim}"
            )
        return Tensor(
            self.upper,
            self.lower,
            self.dim,
            tuple(a + b for a, b in zip(self.components, other.components)),
        )

    def __str__(self) -> str:
        body = ", ".join(f"{c:.4f}" for c in self.components)
        return f"Tensor<{self.upper},{self.lower}>(dim={self.dim}, [{body}])"