"""Rings of magnetic vortex sources that rotate in time."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class EmSource:
    """A single magnetic vortex source centred at ``(cx, cy, cz)``.

    Its 4-potential is A₀ = −½ B (y − cy) e^{−r²/2σ²},
    A₁ = ½ B (x − cx) e^{−r²/2σ²}, A₂ = A₃ = 0, with r² measured in the xy-plane.
    """

    cx: float
    cy: float
    cz: float
    amplitude: float
    sigma: float

    def potential_at(self, x: Sequence[float]) -> tuple[float, float, float, float]:
        """The 4-potential A_μ at spatial position ``x``."""
        dx = x[0] - self.cx
        dy = x[1] - self.cy
        r2 = dx * dx + dy * dy
        gauss = math.exp(-r2 / (2.0 * self.sigma * self.sigma))
        b = self.amplitude
        return (-0.5 * b * dy * gauss, 0.5 * b * dx * gauss, 0.0, 0.0)


@dataclass(frozen=True)
class TornadoArray:
    """Sources on a ring, one active at a time, cycling once per ``period``."""

    sources: tuple[EmSource, ...]
    period: float

    @classmethod
    def ring(
        cls,
        n: int,
        radius: float,
        cx: float,
        cy: float,
        cz: float,
        sigma: float,
        amplitude: float,
        period: float,
    ) -> TornadoArray:
        """A ring of ``n`` equally spaced sources about ``(cx, cy, cz)`` in the xy-plane."""
        if n < 2:
            raise ValueError("Need at least 2 sources for a meaningful ring")
        sources = tuple(
            EmSource(
                cx=cx + radius * math.cos(2.0 * math.pi * k / n),
                cy=cy + radius * math.sin(2.0 * math.pi * k / n),
                cz=cz,
                amplitude=amplitude,
                sigma=sigma,
            )
            for k in range(n)
        )
        return cls(sources, period)

    def active_index(self, t: float) -> int:
        """Index of the source that is on at time ``t``."""
        n = len(self.sources)
        phase = math.modf(t / self.period)[0]
        if phase < 0.0:
            phase += 1.0
        return int(phase * n) % n

    def potential_at(self, x: Sequence[float], t: float) -> list[float]:
        """The 4-potential of the source active at time ``t``, at position ``x``."""
        return list(self.sources[self.active_index(t)].potential_at(x))