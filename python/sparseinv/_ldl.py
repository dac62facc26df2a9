#!/usr/bin/env python3
# =============================================================================
#     File: _ldl.py
#  Created: 2025-06-18 13:05
#   Author: Bernie Roesler
#
"""
Sparse LDL' factorization of a symmetric matrix with CHOLMOD.

Only the lower triangle of the input is used. The factor is returned in
"packed LDL'" form: a lower triangular CSC matrix with the diagonal of D
stored in place of the unit diagonal of L.
"""
# =============================================================================

import numpy as np

from collections import namedtuple
from enum import IntEnum

from scipy import sparse
from scipy.sparse import csgraph
from sksparse import cholmod

from .errors import ComplexUnsupportedError
from .utils import from_scipy_sparse


ORDERS = ('Natural', 'RCM', 'MinDegree')

# CHOLMOD ordering methods, or None to permute before the analysis
_CHOLMOD_ORDERS = {
    'Natural': 'natural',
    'RCM': None,
    'MinDegree': 'amd',
}


CholOptions = namedtuple(
    'CholOptions',
    ['order', 'beta', 'quick_return_if_not_posdef'],
    defaults=['MinDegree', 0.0, True]
)
CholOptions.__doc__ = """\
Options passed to `analyze` and `factorize`.

Parameters
----------
order : str or (N,) array_like of int, optional
    The fill-reducing ordering, one of 'Natural', 'RCM', 'MinDegree' (AMD),
    or an explicit permutation vector. Default is 'MinDegree'.
beta : float, optional
    Factorize ``A + beta * I`` instead of `A`. Default is 0.
quick_return_if_not_posdef : bool, optional
    If True (default), a factorization that finds a non-positive pivot
    returns no factor. Otherwise the complete LDL' factor is kept, unless a
    pivot is exactly zero.
"""


SymbolicFactor = namedtuple('SymbolicFactor', ['p', 'q', 'factor'])
SymbolicFactor.__doc__ = """\
Symbolic analysis of a sparse LDL' factorization.

Attributes
----------
p : (N,) ndarray of int, or None
    Fill-reducing permutation. Row/column `k` of the permuted matrix is
    row/column ``p[k]`` of `A`. None if it is the identity.
q : (N,) ndarray of int, or None
    Permutation applied to `A` before it is passed to CHOLMOD, for orderings
    that CHOLMOD does not compute itself.
factor : sksparse.cholmod.Factor
    The CHOLMOD symbolic factor.
"""


LDLFactor = namedtuple('LDLFactor', ['L', 'p', 'minor'])
LDLFactor.__doc__ = """\
Numeric LDL' factor of ``P A P^T``.

Attributes
----------
L : (N, N) CSCMatrix, or None
    Packed LDL' factor: column `j` starts with ``D[j]`` at row `j`, followed
    by the entries of the unit lower triangular ``L[j+1:, j]``, with
    ascending row indices. None if the factorization failed without a
    usable factor.
p : (N,) ndarray of int, or None
    The permutation, as in `SymbolicFactor`.
minor : int
    Equal to `N` on success, otherwise the 0-based index of the first
    non-positive pivot.
"""


class Status(IntEnum):
    """Result of a numeric factorization."""
    OK = 0
    NOT_POSDEF = 1


# -----------------------------------------------------------------------------
#         Orderings
# -----------------------------------------------------------------------------
def _sym_coo(A):
    """Return the entries of ``tril(A) + tril(A, -1).T`` as (row, col, val)."""
    T = sparse.tril(A, format='coo')
    off = T.row != T.col
    rows = np.r_[T.row, T.col[off]].astype(np.intp)
    cols = np.r_[T.col, T.row[off]].astype(np.intp)
    vals = np.r_[T.data, T.data[off]]
    return rows, cols, vals


def _symmetric(A, q=None):
    """Return ``C = Q S Q^T`` as a CSC matrix, with ``S`` built from
    ``tril(A)``. Explicit zeros are kept.
    """
    N = A.shape[0]
    rows, cols, vals = _sym_coo(A)

    if q is not None:
        qinv = np.empty(N, dtype=np.intp)
        qinv[q] = np.arange(N)
        rows, cols = qinv[rows], qinv[cols]

    C = sparse.csc_matrix(
        (vals.astype(np.float64), (rows, cols)),
        shape=(N, N)
    )
    C.sum_duplicates()  # also sorts the indices
    return C


def rcm(A):
    """Compute the reverse Cuthill-McKee ordering of a symmetric matrix.

    Parameters
    ----------
    A : (N, N) sparse array
        A square matrix. Only the lower triangle is used.

    Returns
    -------
    p : (N,) ndarray of int
        The permutation vector.
    """
    S = _symmetric(A)
    p = csgraph.reverse_cuthill_mckee(S, symmetric_mode=True)
    return np.asarray(p, dtype=np.intp)


def _get_permutation(A, order):
    """Evaluate the `order` option.

    Returns the CHOLMOD ordering method, and the permutation to apply
    beforehand (or None).
    """
    N = A.shape[0]

    if isinstance(order, str):
        if order not in _CHOLMOD_ORDERS:
            raise ValueError(
                f"Invalid order '{order}'. Expected one of {ORDERS} "
                "or a permutation vector."
            )
        method = _CHOLMOD_ORDERS[order]
        if method is None:
            return 'natural', rcm(A)
        return method, None

    q = np.asarray(order)

    if (q.ndim != 1
            or not np.issubdtype(q.dtype, np.integer)
            or not np.array_equal(np.sort(q), np.arange(N))):
        raise ValueError(f"order must be a permutation of range({N}).")

    return 'natural', q.astype(np.intp)


# -----------------------------------------------------------------------------
#         Factorization
# -----------------------------------------------------------------------------
def analyze(A, options=None):
    """Compute the symbolic LDL' factorization of a symmetric matrix.

    Chooses the fill-reducing ordering and runs the CHOLMOD symbolic
    analysis in simplicial mode.

    Parameters
    ----------
    A : (N, N) sparse array
        A square matrix. Only the lower triangle is used.
    options : CholOptions, optional
        The ordering is taken from ``options.order``.

    Returns
    -------
    S : SymbolicFactor
        The symbolic factorization.
    """
    if options is None:
        options = CholOptions()

    M, N = A.shape

    if M != N:
        raise ValueError("Matrix must be square.")

    method, q = _get_permutation(A, options.order)

    factor = cholmod.analyze(
        _symmetric(A, q),
        mode='simplicial',
        ordering_method=method
    )

    p = np.asarray(factor.P(), dtype=np.intp)

    if q is not None:
        p = q[p]
    elif np.array_equal(p, np.arange(N)):
        p = None

    return SymbolicFactor(p, q, factor)


def factorize(A, S, options=None):
    r"""Compute the numeric LDL' factorization of a symmetric matrix.

    Computes :math:`P (A + \beta I) P^T = L D L^T` with the CHOLMOD
    simplicial LDL' factorization, using the symbolic analysis `S`.

    Parameters
    ----------
    A : (N, N) sparse array
        A square, real matrix. Only the lower triangle is used.
    S : SymbolicFactor
        The output of `analyze` for the same matrix.
    options : CholOptions, optional
        Uses ``options.beta`` and ``options.quick_return_if_not_posdef``.

    Returns
    -------
    F : LDLFactor
        The packed factor.
    status : Status
        ``Status.OK``, or ``Status.NOT_POSDEF`` if a pivot was not positive.
    """
    if options is None:
        options = CholOptions()

    if np.iscomplexobj(A.data):
        raise ComplexUnsupportedError("Matrix is complex.")

    N = A.shape[0]

    try:
        numeric = S.factor.cholesky(_symmetric(A, S.q), beta=options.beta)
    except cholmod.CholmodNotPositiveDefiniteError as e:
        return LDLFactor(None, S.p, int(e.column)), Status.NOT_POSDEF

    L = from_scipy_sparse(numeric.LD())

    # The LDL' factorization only stops at a zero pivot
    d = L.data[L.indptr[:-1]]
    bad = np.flatnonzero(d <= 0)

    if bad.size == 0:
        return LDLFactor(L, S.p, N), Status.OK

    if options.quick_return_if_not_posdef:
        L = None

    return LDLFactor(L, S.p, int(bad[0])), Status.NOT_POSDEF

# =============================================================================
# =============================================================================
