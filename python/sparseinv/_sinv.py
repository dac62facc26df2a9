#!/usr/bin/env python3
# =============================================================================
#     File: _sinv.py
#  Created: 2025-06-19 09:21
#   Author: Bernie Roesler
#
"""
Sparse inverse of a symmetric positive definite matrix.

The sparse inverse `Z` holds the entries of ``inv(A)`` at every position of
the pattern of ``L + L.T``, where `L` is the Cholesky factor of `A`
(including fill-in). It is computed from the LDL' factor with the Takahashi
recursion [0]_, without forming the dense inverse.

References
----------
.. [0] Takahashi, K., Fagan, J., and Chen, M. "Formation of a sparse bus
    impedance matrix and its application to short circuit study",
    8th PICA Conference Proceedings, 1973.
.. [1] Vanhatalo, J., and Vehtari, A. "Modelling local and global phenomena
    with sparse Gaussian processes", UAI, 2008.
"""
# =============================================================================

import warnings

import numpy as np

from scipy import sparse
from scipy.linalg import blas

from ._csc import CSCMatrix, cumsum
from ._ldl import CholOptions, Status, analyze, factorize
from .errors import (
    ComplexUnsupportedError,
    InvalidDimensionError,
    NotPositiveDefiniteError,
    NotSparseInputError
)
from .utils import _format_matrix, is_symmetric, to_scipy_sparse


def takahashi(L):
    r"""Compute the sparse inverse values from a packed LDL' factor.

    Columns are processed from last to first. Every row of column `j` below
    the diagonal belongs to a column `> j`, which has already been finalized,
    so column `j` only depends on known values of the inverse:

    .. math::
        Z_{R_j, j} = -Z_{R_j, R_j} L_{R_j, j}, \quad
        Z_{jj} = 1 / d_j - L_{R_j, j}^T Z_{R_j, j}

    where :math:`R_j` is the set of row indices below the diagonal in column
    `j` of `L`.

    Parameters
    ----------
    L : (N, N) CSCMatrix
        Packed LDL' factor with ``D[j]`` as the first entry of column `j`,
        followed by the multipliers in ascending row order.

    Returns
    -------
    Zx : (L.nnz,) ndarray
        The values of the lower triangle of the inverse, on the pattern of
        `L` (``L.indices``, ``L.indptr``).
    """
    N = L.shape[1]
    Lp, Li, Lx = L.indptr, L.indices, L.data

    Zx = np.array(Lx, dtype=np.float64, copy=True)
    Z = CSCMatrix(Zx, Li, Lp, L.shape)  # shares Zx

    for j in range(N - 1, -1, -1):
        a, b = Lp[j], Lp[j+1]
        d = Lx[a]            # the pivot
        rows = Li[a+1:b]     # R_j
        f = np.asarray(Lx[a+1:b], dtype=np.float64)  # multipliers L[R_j, j]
        lfi = rows.size

        if lfi == 0:
            Zx[a] = 1 / d
            continue

        # Gather the lower triangle of Z[R_j, R_j] from finalized columns
        G = np.zeros((lfi, lfi), order='F')
        for q in range(lfi):
            G[q:, q] = Z.column(rows[q]).take(rows[q:])

        w = blas.dsymv(1.0, G, f, lower=1)

        # Commit column j
        Zx[a+1:b] = -w
        Zx[a] = 1 / d + np.dot(f, w)

    return Zx


def permute_lower(Z, p=None):
    """Renumber a lower triangular matrix from internal to original order.

    Entry ``(i, j)`` of `Z` moves to ``(max(p[i], p[j]), min(p[i], p[j]))``.
    The entries are first scattered into the upper triangular matrix ``B``
    (column ``max``, row ``min``), which is then transposed. Both steps are
    counting sorts, so the rows of the result come out sorted.

    Parameters
    ----------
    Z : (N, N) CSCMatrix
        Lower triangular matrix in the internal order.
    p : (N,) ndarray of int, optional
        The permutation. Internal index `k` is original index ``p[k]``. If
        None, the identity is used.

    Returns
    -------
    result : (N, N) CSCMatrix
        The lower triangular matrix in the original order, with sorted rows.
    """
    N = Z.shape[1]
    Zp, Zi, Zx = Z.indptr, Z.indices, Z.data
    nz = Z.nnz

    Bp = np.zeros(N + 1, dtype=np.intp)
    Bi = np.zeros(nz, dtype=np.intp)
    Bx = np.zeros(nz, dtype=Zx.dtype)

    # Count the entries in each column of B
    w = np.zeros(N, dtype=np.intp)
    for j in range(N):
        k = p[j] if p is not None else j
        for q in range(Zp[j], Zp[j+1]):
            i = Zi[q]
            ik = p[i] if p is not None else i
            w[max(ik, k)] += 1

    cumsum(Bp, w)

    for j in range(N):
        k = p[j] if p is not None else j
        for q in range(Zp[j], Zp[j+1]):
            i = Zi[q]
            ik = p[i] if p is not None else i
            t = max(ik, k)
            r = w[t]
            w[t] += 1
            Bi[r] = min(ik, k)
            Bx[r] = Zx[q]

    B = CSCMatrix(Bx, Bi, Bp, (N, N))

    return B.transpose()


def symmetric_fill(Z):
    """Expand the lower triangle of a symmetric matrix into the full matrix.

    Parameters
    ----------
    Z : (N, N) CSCMatrix
        Lower triangular matrix with sorted rows and a stored diagonal entry
        at the top of every column.

    Returns
    -------
    result : (N, N) CSCMatrix
        The symmetric matrix ``Z + tril(Z, -1).T``, with ``2 * Z.nnz - N``
        entries and sorted rows.
    """
    N = Z.shape[1]
    Zp, Zi, Zx = Z.indptr, Z.indices, Z.data
    nz = Z.nnz

    # Column counts: the mirrored entries of row j, plus the entries of
    # column j below the diagonal
    w = np.bincount(Zi[:nz], minlength=N).astype(np.intp)
    w += np.diff(Zp) - 1

    Cp = np.zeros(N + 1, dtype=np.intp)
    Ci = np.zeros(2 * nz - N, dtype=np.intp)
    Cx = np.zeros(2 * nz - N, dtype=Zx.dtype)

    cumsum(Cp, w)

    # Upper triangle and diagonal: Z[i, j] -> C[j, i]
    for j in range(N):
        for q in range(Zp[j], Zp[j+1]):
            i = Zi[q]
            r = w[i]
            w[i] += 1
            Ci[r] = j
            Cx[r] = Zx[q]

    # Lower triangle
    for j in range(N):
        for q in range(Zp[j] + 1, Zp[j+1]):
            r = w[j]
            w[j] += 1
            Ci[r] = Zi[q]
            Cx[r] = Zx[q]

    return CSCMatrix(Cx, Ci, Cp, (N, N))


def sinv_factor(F, format='csc'):
    """Compute the sparse inverse from an existing LDL' factorization.

    Parameters
    ----------
    F : LDLFactor
        The output of `sparseinv.factorize`.
    format : str, optional
        The format of the result. See `sinv`.

    Returns
    -------
    Z : (N, N) sparse array
        The sparse inverse, in the original ordering.
    """
    L = F.L

    if L is None or F.minor < L.shape[1]:
        raise NotPositiveDefiniteError(F.minor + 1)

    if np.iscomplexobj(L.data):
        raise ComplexUnsupportedError("Matrix is complex.")

    Z = CSCMatrix(takahashi(L), L.indices, L.indptr, L.shape)
    Z = permute_lower(Z, F.p)
    Z = symmetric_fill(Z)

    return _format_matrix(Z, format)


def sinv(
    A,
    order=None,
    beta=None,
    options=None,
    return_minor=False,
    return_perm=False,
    check_symmetry=False,
    format='csc'
):
    r"""Compute the sparse inverse of a symmetric positive definite matrix.

    Returns the entries of ``inv(A)`` at each nonzero of the Cholesky factor
    of `A` and its transpose, including fill-in. Only the lower triangle of
    `A` is used, and the matrix is assumed to be symmetric.

    Parameters
    ----------
    A : (N, N) sparse array or CSCMatrix
        A sparse, real, symmetric positive definite matrix.
    order : str or (N,) array_like of int, optional
        The fill-reducing ordering. Overrides ``options.order``.
        See `CholOptions`.
    beta : float, optional
        Compute the sparse inverse of ``A + beta * I``. Overrides
        ``options.beta``.
    options : CholOptions, optional
        Options for the factorization.
    return_minor : bool, optional
        If True, also return the factorization minor: 0 on success. In this
        case the factorization runs past a non-positive pivot, so that the
        error reports the first column at which it failed.
    return_perm : bool, optional
        If True, also return the fill-reducing permutation.
    check_symmetry : bool, optional
        If True, warn when `A` is not symmetric.
    format : str, optional
        The format of `Z`. One of 'csc' (default), any other
        ``scipy.sparse`` format name, 'CSCMatrix' for a `CSCMatrix`, or
        'ndarray'.

    Returns
    -------
    Z : (N, N) sparse array
        The sparse inverse of `A`.
    minor : int
        Only if `return_minor` is True. Always 0, since failures raise.
    p : (N,) ndarray of int
        Only if `return_perm` is True. The permutation used, such that the
        factored matrix is ``A[p][:, p]``.

    Raises
    ------
    NotSparseInputError
        If `A` is not a sparse matrix.
    InvalidDimensionError
        If `A` is not square.
    ComplexUnsupportedError
        If `A` is complex.
    NotPositiveDefiniteError
        If `A` is not positive definite.

    See Also
    --------
    sinv_factor : Compute the sparse inverse from an existing factorization.

    Examples
    --------
    >>> from scipy import sparse
    >>> A = sparse.csc_array([[2., -1, 0], [-1, 2, -1], [0, -1, 2]])
    >>> sinv(A).toarray()
    array([[0.75, 0.5 , 0.  ],
           [0.5 , 1.  , 0.5 ],
           [0.  , 0.5 , 0.75]])
    """
    if isinstance(A, CSCMatrix):
        A = to_scipy_sparse(A)
    elif not sparse.issparse(A):
        raise NotSparseInputError("A must be sparse.")

    M, N = A.shape

    if M != N:
        raise InvalidDimensionError("A must be square.")

    if np.issubdtype(A.dtype, np.complexfloating):
        raise ComplexUnsupportedError("Matrix is complex.")

    A = sparse.csc_array(A)

    if check_symmetry and not is_symmetric(A):
        warnings.warn(
            "Matrix is not symmetric; only the lower triangle is used.",
            UserWarning,
            stacklevel=2
        )

    if options is None:
        options = CholOptions()

    if order is not None:
        options = options._replace(order=order)

    if beta is not None:
        options = options._replace(beta=beta)

    if return_minor:
        options = options._replace(quick_return_if_not_posdef=False)

    S = analyze(A, options)
    F, status = factorize(A, S, options)

    if status != Status.OK:
        raise NotPositiveDefiniteError(F.minor + 1)

    Z = sinv_factor(F, format=format)

    if not (return_minor or return_perm):
        return Z

    out = (Z,)

    if return_minor:
        out += (0,)

    if return_perm:
        p = np.arange(N) if F.p is None else F.p.copy()
        out += (p,)

    return out

# =============================================================================
# =============================================================================
