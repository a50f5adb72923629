"""Krylov solvers for sparse linear systems: CG, BiCG, BiCGSTAB and GMRES."""

from __future__ import annotations

import logging
import math

import numpy as np

from .csr import CsrMatrix
from .vector import Vector

__all__ = ["cg", "bicg", "bicgstab", "gmres"]

logger = logging.getLogger(__name__)


def _check(a: CsrMatrix, b: Vector, x: Vector) -> int:
    if not isinstance(a, CsrMatrix):
        raise TypeError(f"expected a CsrMatrix, got {type(a).__name__}")
    if a.nrows != a.ncols:
        raise ValueError(f"the system matrix must be square, got {a.nrows}x{a.ncols}")
    for name, vector in (("b", b), ("x", x)):
        if not isinstance(vector, Vector):
            raise TypeError(f"{name} must be a Vector, got {type(vector).__name__}")
        if len(vector) != a.nrows:
            raise ValueError(f"{name} must have {a.nrows} elements, got {len(vector)}")
    return a.nrows


def _residual(a: CsrMatrix, b: Vector, x: Vector) -> Vector:
    r = a.spmv(x)
    b.axpby(r, 1.0, -1.0)
    return r


def _log_step(step: int, error: float) -> None:
    logger.debug("step # %d residual : %.7f", step, error)


def cg(a: CsrMatrix, b: Vector, x: Vector, tol: float = 1e-8, max_it: int = 100) -> Vector:
    """Solve ``A x = b`` for symmetric positive definite ``A`` by conjugate gradients.

    ``x`` holds the initial guess and is updated in place. Iteration stops
    once the residual 2-norm falls below ``tol``. Returns ``x``.
    """
    _check(a, b, x)
    r = _residual(a, b, x)
    p = r.copy()
    rsold = r.dot(r)
    if rsold == 0.0:
        return x
    for i in range(max_it):
        ap = a.spmv(p)
        curvature = p.dot(ap)
        if curvature == 0.0:
            break
        alpha = rsold / curvature
        p.axpby(x, alpha, 1.0)
        ap.axpby(r, -alpha, 1.0)
        rsnew = r.dot(r)
        error = math.sqrt(rsnew)
        if error < tol:
            _log_step(i + 1, error)
            break
        r.axpby(p, 1.0, rsnew / rsold)
        rsold = rsnew
    return x


def bicg(a: CsrMatrix, b: Vector, x: Vector, tol: float = 1e-8, max_it: int = 100) -> Vector:
    """Solve ``A x = b`` by the biconjugate gradient method without preconditioning.

    ``x`` is updated in place; iteration stops once the residual relative to
    ``||b||`` is at most ``tol``. Returns ``x``.
    """
    _check(a, b, x)
    bnrm2 = b.norm2() or 1.0
    r = _residual(a, b, x)
    if r.norm2() / bnrm2 < tol:
        return x

    r_tld = r.copy()
    p = Vector(len(x))
    p_tld = Vector(len(x))
    rho_1 = 1.0
    for i in range(max_it):
        z = r.copy()
        z_tld = r_tld.copy()
        rho = r.dot(z_tld)
        if rho == 0.0:
            break
        if i > 0:
            beta = rho / rho_1
            z.axpby(p, 1.0, beta)
            z_tld.axpby(p_tld, 1.0, beta)
        else:
            p = z.copy()
            p_tld = z_tld.copy()

        q = a.spmv(p)
        q_tld = a.spmv(p_tld, trans="T")
        denom = p_tld.dot(q)
        if denom == 0.0:
            break
        alpha = rho / denom

        p.axpby(x, alpha, 1.0)
        q.axpby(r, -alpha, 1.0)
        q_tld.axpby(r_tld, -alpha, 1.0)

        error = r.norm2() / bnrm2
        _log_step(i + 1, error)
        if error <= tol:
            break
        rho_1 = rho
    return x


def bicgstab(a: CsrMatrix, b: Vector, x: Vector, tol: float = 1e-8, max_it: int = 100) -> Vector:
    """Solve ``A x = b`` by the stabilised biconjugate gradient method.

    ``x`` is updated in place. Iteration stops once the relative residual is
    at most ``tol`` or the intermediate residual's norm drops below ``tol``.
    Returns ``x``.
    """
    n = _check(a, b, x)
    bnrm2 = b.norm2() or 1.0
    r = _residual(a, b, x)
    if r.norm2() / bnrm2 < tol:
        return x

    r_tld = r.copy()
    p = Vector(n)
    v = Vector(n)
    omega = 1.0
    alpha = 0.0
    rho_1 = 1.0
    for i in range(max_it):
        rho = r.dot(r_tld)
        if rho == 0.0:
            break
        if i > 0:
            beta = (rho / rho_1) * (alpha / omega)
            v.axpby(p, -omega, 1.0)
            r.axpby(p, 1.0, beta)
        else:
            p = r.copy()

        p_hat = p.copy()
        v = a.spmv(p_hat)
        denom = r_tld.dot(v)
        if denom == 0.0:
            break
        alpha = rho / denom

        s = v.copy()
        r.axpby(s, 1.0, -alpha)
        if s.norm2() < tol:
            p_hat.axpby(x, alpha, 1.0)
            break

        s_hat = s.copy()
        t = a.spmv(s_hat)
        tt = t.dot(t)
        if tt == 0.0:
            p_hat.axpby(x, alpha, 1.0)
            break
        omega = t.dot(s) / tt
        p_hat.axpby(x, alpha, 1.0)
        s_hat.axpby(x, omega, 1.0)

        r = s.copy()
        t.axpby(r, -omega, 1.0)

        error = r.norm2() / bnrm2
        _log_step(i + 1, error)
        if error <= tol or omega == 0.0:
            break
        rho_1 = rho
    return x


def _matvec(a: CsrMatrix, data: np.ndarray) -> np.ndarray:
    return np.array(a.spmv(data.tolist()).tolist(), dtype=np.float64)


def gmres(a: CsrMatrix, b: Vector, x: Vector, tol: float = 1e-8, max_it: int = 100) -> Vector:
    """Solve ``A x = b`` by GMRES without restarts or preconditioning.

    At most ``max_it`` Arnoldi steps are taken; the Krylov basis is built
    with modified Gram-Schmidt and the least-squares problem is kept
    triangular with Givens rotations. ``x`` is updated in place and returned.
    """
    n = _check(a, b, x)
    bnrm2 = b.norm2() or 1.0
    r = _residual(a, b, x)
    r_norm = r.norm2()
    if r_norm / bnrm2 < tol or max_it <= 0:
        return x

    m = int(max_it)
    q = np.zeros((n, m + 1))
    h = np.zeros((m + 1, m))
    cs = np.zeros(m)
    sn = np.zeros(m)
    beta = np.zeros(m + 1)
    beta[0] = r_norm
    q[:, 0] = np.array(r.tolist(), dtype=np.float64) / r_norm

    steps = 0
    for j in range(m):
        w = _matvec(a, q[:, j])
        for i in range(j + 1):
            h[i, j] = q[:, i] @ w
            w -= h[i, j] * q[:, i]
        h[j + 1, j] = float(np.linalg.norm(w))
        if h[j + 1, j] != 0.0:
            q[:, j + 1] = w / h[j + 1, j]

        for i in range(j):
            temp = cs[i] * h[i, j] + sn[i] * h[i + 1, j]
            h[i + 1, j] = -sn[i] * h[i, j] + cs[i] * h[i + 1, j]
            h[i, j] = temp

        denom = math.hypot(h[j, j], h[j + 1, j])
        if denom == 0.0:
            break
        cs[j] = h[j, j] / denom
        sn[j] = h[j + 1, j] / denom
        h[j, j] = cs[j] * h[j, j] + sn[j] * h[j + 1, j]
        h[j + 1, j] = 0.0

        beta[j + 1] = -sn[j] * beta[j]
        beta[j] = cs[j] * beta[j]

        error = abs(beta[j + 1]) / bnrm2
        steps = j + 1
        _log_step(steps, error)
        if error <= tol:
            break

    if steps:
        y = np.linalg.solve(np.triu(h[:steps, :steps]), beta[:steps])
        x_data = np.array(x.tolist(), dtype=np.float64) + q[:, :steps] @ y
        x[:] = x_data.tolist()
    return x