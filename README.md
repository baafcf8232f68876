# pmekit

Numerical helpers for particle mesh Ewald (PME) reciprocal-space work, written
in Python on top of NumPy.

## Modules

| Module | Purpose |
| --- | --- |
| `pmekit.gamma` | Gamma and upper incomplete gamma functions for half-integral arguments, and the exponential integral Ei |
| `pmekit.cartesian` | Rotation matrices for the unique Cartesian components of a shell, and rotation of per-atom multipole lists |
| `pmekit.jacobi` | Cyclic Jacobi eigen-decomposition of real symmetric matrices |
| `pmekit.matrix` | A small dense `Matrix` type with inversion, symmetric diagonalisation and spectral functions |
| `pmekit.tensor_utils` | Reordering (ABC → CBA, ABC → ACB) and contraction of tensors stored flat |
| `pmekit.string_utils` | Fixed-width formatting of numbers and flat tensors |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Gamma functions

Every function takes `two_s`, twice the `s` argument, so half-integral values
are exact:

```python
from pmekit.gamma import gamma_half, incomplete_gamma, incomplete_gamma_pair, exponential_integral

gamma_half(3)                  # Γ(3/2) ≈ 0.8862269255
gamma_half(-1)                 # Γ(-1/2) ≈ -3.544907702
incomplete_gamma(1, 3.0)       # Γ(1/2, 3) ≈ 0.02535650932
incomplete_gamma(0, 3.0)       # Γ(0, 3) ≈ 0.01304838109
incomplete_gamma_pair(2, 3.0)  # (Γ(1, 3), Γ(2, 3))
exponential_integral(-3.0)     # Ei(-3)
```

Poles of the gamma function (`two_s` = 0, -2, -4, …) and `incomplete_gamma(0, 0.0)`
return the largest finite float rather than raising; `exponential_integral(0.0)`
returns its negative.

### Rotating Cartesian multipoles

`transformer` is the 3×3 matrix R that maps a dipole as μ_new = R · μ_old.
Components within a shell are ordered by `cartesian_address(lx, ly, lz)`.

```python
import numpy as np
from pmekit.cartesian import cartesian_transform, make_cartesian_rotation_matrix

rotation = np.array([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])

# One row per atom: charge followed by the dipole.
multipoles = np.array([[1.0, 0.1, 0.2, 0.3]])
rotated = cartesian_transform(1, False, rotation, multipoles)

# Rotation matrix for the six quadrupole components.
quad = make_cartesian_rotation_matrix(2, rotation)
```

With `transform_only_this_shell=True`, each row holds only the shell of the
given angular momentum; otherwise it holds every shell from 0 upwards and the
scalar is copied unchanged.

### Matrices

```python
from pmekit.matrix import Matrix, SortOrder

m = Matrix([[2.0, 1.0], [1.0, 3.0]])
values, vectors = m.diagonalize(SortOrder.ASCENDING)  # eigenvalues as a column, eigenvectors by column
inv = m.inverse()             # 3x3 in closed form; other sizes through the spectral decomposition
root = m.apply_operation(lambda v: v ** 0.5)
print(m * inv)
m.n_rows, m.n_cols            # (2, 2)
```

Flat input makes a column vector: `Matrix([1.0, 2.0, 3.0])` is 3×1.
`Matrix.zeros(r, c)`, `clone`, `transpose`, `cast`, `dot`, `almost_equals`,
`is_near_zero`, `increment_with` (and `+=`) and indexing are also available.

The raw eigen-solver returns the eigenvalues unsorted:

```python
from pmekit.jacobi import jacobi_cyclic_diagonalization

eigenvalues, eigenvectors = jacobi_cyclic_diagonalization([[2.0, 1.0], [1.0, 3.0]])
```

### Tensors and formatting

```python
from pmekit.tensor_utils import permute_abc_to_cba, contract_abxc_with_dxc
from pmekit.string_utils import stringify

cba = permute_abc_to_cba(range(24), 2, 3, 4)          # flat array in CBA order
abd = contract_abxc_with_dxc(range(6), range(6), 2, 3, 2)
print(stringify(cba, 4, width=8, precision=2))
```

## Errors

Problems are reported by raising `ValueError`: mismatched matrix dimensions,
non-square or non-symmetric input where a symmetric matrix is needed,
inconsistent row lengths, tensors whose size does not match the given
dimensions, a negative angular momentum or too few components to rotate, and a
non-positive row dimension in `stringify`.

## What this package does not do

It provides building blocks only. It does not compute reciprocal-space
energies, forces, virials or potentials, and it has no B-spline evaluation, no
FFT routines, no grid-size selection, no checksums and no reading or writing of
matrices to files. There is no command-line program.