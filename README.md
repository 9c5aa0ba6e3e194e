# spacetensor

Numerical tensor calculus in arbitrary dimension, aimed at general relativity
and electromagnetism on curved backgrounds. Pure Python, no dependencies.

## Modules

- `spacetensor.tensor`
  - `Tensor(upper, lower, dim, components)`: an immutable tensor of
    contravariant rank `upper` and covariant rank `lower`. Components are
    stored as floats, flat in row-major order with upper indices first; the
    count must be `dim ** (upper + lower)`. `rank` gives the total number of
    indices, `component(indices)` reads one entry, `+` adds two tensors of the
    same ranks and dimension, and `str()` prints the components to four
    decimals.
  - `flat_index(indices, dim)` and `decode_flat_index(flat, dim, rank)`
    convert between multi-indices and flat positions.
- `spacetensor.algebra`
  - `contract(tensor, upper_idx, lower_idx)`: sum one upper index against one
    lower index, giving rank `(upper - 1, lower - 1)`.
  - `outer(a, b)`: outer product with index layout
    `[upper_a, upper_b, lower_a, lower_b]`.
- `spacetensor.calculus`
  - `partial_deriv(f, point, h)`: central-difference derivative of a tensor
    field; the derivative direction is appended as the last lower index.
  - `christoffel_partial_deriv(f, point, h)`: the same for a field returning
    Christoffel symbols Γ^ρ_{κμ} as a rank (1, 2) tensor; the result holds
    ∂_ν Γ^ρ_{κμ} at `[ρ, κ, μ, ν]`.
  - `covariant_derivative(tensor, partial, christoffel)`: ∇_k T from T, its
    partial derivative and Γ^i_{jk}.
- `spacetensor.curvature`
  - `riemann(gamma, partial_gamma)`, `ricci_tensor(r)`,
    `ricci_scalar(g_inv, ric)` and `einstein_tensor(ric, g, scalar)`.
- `spacetensor.linalg`
  - `invert_matrix(a, dim)`: Gauss-Jordan inverse of a flat row-major matrix;
    returns `None` when a pivot below 1e-14 shows it is singular.
  - `newton_step(f, x, eps)`: one Newton-Raphson step for `f(x) = 0` with a
    central-difference Jacobian; singular directions receive no update.
- `spacetensor.electromagnetism`
  - `faraday(partial_a)`: F_{μν} = ∂_μ A_ν − ∂_ν A_μ.
  - `em_stress_energy(f, g, g_inv, mu_0)`: electromagnetic T_{μν} for the
    (−,+,+,+) signature.
  - `em_t_grid(a_fn, g_grid, nx, ny, nz, h, mu_0, eps)`: T_{μν} at every point
    of a 3-D grid from a 4-potential; point `(ix, iy, iz)` has flat index
    `ix*ny*nz + iy*nz + iz` and coordinates `(ix*h, iy*h, iz*h, 0, …)`. A
    singular metric falls back to the identity as its inverse.
- `spacetensor.tornado`
  - `EmSource`: a Gaussian magnetic vortex; `potential_at(x)` gives its
    4-potential.
  - `TornadoArray.ring(n, radius, cx, cy, cz, sigma, amplitude, period)`: `n`
    equally spaced sources on a circle in the xy-plane. `active_index(t)` says
    which one is on at time `t` (each in turn, one full cycle per `period`),
    and `potential_at(x, t)` gives that source's potential.

Shape and dimension mismatches raise `ValueError`.

## Installation

```
pip install .
```

## Example

```python
from spacetensor.tensor import Tensor
from spacetensor.electromagnetism import em_stress_energy

eta = [-1.0, 0, 0, 0,
        0, 1.0, 0, 0,
        0, 0, 1.0, 0,
        0, 0, 0, 1.0]
g = Tensor(0, 2, 4, eta)
g_inv = Tensor(2, 0, 4, eta)

# Static electric field E = 2 along x.
f_vals = [0.0] * 16
f_vals[1], f_vals[4] = 2.0, -2.0
f = Tensor(0, 2, 4, f_vals)

t = em_stress_energy(f, g, g_inv, 1.0)
print(t.component([0, 0]))  # energy density E²/2 = 2.0
```

A Newton-Raphson step on a small system:

```python
from spacetensor.linalg import newton_step

x = newton_step(lambda v: [2 * v[0] + v[1] - 5, v[0] - v[1] - 1], [0.0, 0.0], 1e-5)
# x ≈ [2.0, 1.0]
```

## What it does not do

- It does not compute Christoffel symbols from a metric: `riemann` and
  `covariant_derivative` take Γ as a tensor you supply.
- It does not assemble the Einstein field-equation residual, nor solve for a
  metric on a grid; `newton_step` is a single step on a system you provide.
- It does not evolve a spacetime in time or turn a `TornadoArray` into a grid
  of matter terms; the ring only supplies potentials.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```