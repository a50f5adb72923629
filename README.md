# chipsum

Building blocks for numerical linear algebra in Python: dense vectors with
level-1 BLAS operations, a mutable scalar, sparse matrices in CSR and COO
form, and iterative Krylov solvers for sparse linear systems. Arithmetic is
done in double precision with numpy.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `chipsum.vector`     | `Vector`: `dot`, `norm1`, `norm2`, `norminf`, `scal`, `axpby`, `slice`, `copy`, `deep_copy`, `+`, `*` |
| `chipsum.vector_ops` | `fill`, `iamax` (1-based, 0 for an empty vector), `total`, `reciprocal`   |
| `chipsum.scalar`     | `Scalar`: one mutable integer or float value with `deep_copy`             |
| `chipsum.csr`        | `CsrMatrix`: `spmv` (with `alpha`, `beta` and transpose), `matmat` against a dense matrix given as rows, `to_dense`, `pattern` |
| `chipsum.coo`        | `CooMatrix`: entries kept sorted by row and column, `insert`, `to_csr`    |
| `chipsum.solvers`    | `cg`, `bicg`, `bicgstab`, `gmres`                                         |

## Example

```python
from chipsum.vector import Vector
from chipsum.vector_ops import iamax, total
from chipsum.coo import CooMatrix
from chipsum.solvers import cg

v = Vector([1.0, 2.0, -6.0, 6.0, 4.0])
print(v.norm2(), iamax(v), total(v))   # iamax gives 3

# A small symmetric positive definite system
a = CooMatrix(
    3, 3,
    [0, 0, 1, 1, 1, 2, 2],
    [0, 1, 0, 1, 2, 1, 2],
    [4.0, 1.0, 1.0, 3.0, 1.0, 1.0, 2.0],
).to_csr()

b = Vector([1.0, 2.0, 3.0])
x = Vector(3)
cg(a, b, x, 1e-10, 100)
print(x)
```

Every solver takes the system matrix as a `CsrMatrix`, the right-hand side
and the initial guess as `Vector`s, a tolerance and an iteration limit. The
guess `x` is updated in place and also returned. Each step's number and
residual are reported through the `chipsum.solvers` logger at DEBUG level;
enable it with `logging.basicConfig(level=logging.DEBUG)` to watch the
convergence.

`CooMatrix.insert` raises `ValueError` if an entry already exists at the
given position and `IndexError` if it lies outside the matrix.

## What it does not do

- There is no dense matrix class and no dense factorizations or
  triangular solves; `CsrMatrix.to_dense` and `CsrMatrix.matmat` return plain
  lists of rows.
- There are no sparse-sparse operations (sums, products, incomplete
  factorizations, sparse triangular solves) and no batched tensor kernels.
- The solvers take no preconditioner, and `gmres` does not restart.
- There is no command-line program.