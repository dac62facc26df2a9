#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2025-06-18 10:55
#   Author: Bernie Roesler
#
"""
Utility functions for the sparseinv module.
"""
# =============================================================================

import numpy as np

from scipy import sparse

from ._csc import CSCMatrix


def davis_example_chol(format='csc'):
    """Create an 11x11 symmetric positive definite example matrix from Davis,
    Figure 4.2 [0].

    .. code-block:: python
        array([[10.,  0.,  0.,  0.,  0.,  1.,  1.,  0.,  0.,  0.,  0.],
               [ 0., 11.,  1.,  0.,  0.,  0.,  0.,  1.,  0.,  0.,  0.],
               [ 0.,  1., 12.,  0.,  0.,  0.,  0.,  0.,  0.,  1.,  1.],
               [ 0.,  0.,  0., 13.,  0.,  1.,  0.,  0.,  0.,  1.,  0.],
               [ 0.,  0.,  0.,  0., 14.,  0.,  0.,  1.,  0.,  0.,  1.],
               [ 1.,  0.,  0.,  1.,  0., 15.,  0.,  0.,  1.,  1.,  0.],
               [ 1.,  0.,  0.,  0.,  0.,  0., 16.,  0.,  0.,  0.,  1.],
               [ 0.,  1.,  0.,  0.,  1.,  0.,  0., 17.,  0.,  1.,  1.],
               [ 0.,  0.,  0.,  0.,  0.,  1.,  0.,  0., 18.,  0.,  0.],
               [ 0.,  0.,  1.,  1.,  0.,  1.,  0.,  1.,  0., 19.,  1.],
               [ 0.,  0.,  1.,  0.,  1.,  0.,  1.,  1.,  0.,  1., 20.]])

    Parameters
    ----------
    format : str, optional
        The format of the result. See `_format_matrix`.

    Returns
    -------
    A : (11, 11) matrix in the specified format
        The example matrix from Davis.

    References
    ----------
    .. [0] Davis, Timothy A. "Direct Methods for Sparse Linear Systems",
        Figure 4.2, p 39.
    """
    N = 11
    # strictly lower triangle, 0-indexed
    rows = np.r_[5, 6, 2, 7, 9, 10, 5, 9, 7, 10, 8, 9, 10, 9, 10, 10]
    cols = np.r_[0, 0, 1, 1, 2,  2, 3, 3, 4,  4, 5, 5,  6, 7,  7,  9]
    vals = np.ones(rows.size)
    L = sparse.coo_array((vals, (rows, cols)), shape=(N, N))
    A = L + L.T + sparse.diags_array(np.arange(10.0, 10.0 + N))
    return _format_matrix(from_scipy_sparse(A), format)


def _format_matrix(A, format):
    """Convert a matrix to the specified format."""
    assert isinstance(A, CSCMatrix), "A must be a CSCMatrix"
    match format:
        case 'CSCMatrix':
            return A
        case 'bsr' | 'coo' | 'csc' | 'csr' | 'dia' | 'dok' | 'lil':
            return to_scipy_sparse(A, format=format)
        case 'ndarray':
            return A.toarray()
        case _:
            raise ValueError(f"Invalid format '{format}'")


def from_ndarray(A):
    """Convert a numpy ndarray to a CSCMatrix.

    Parameters
    ----------
    A : (M, N) ndarray
        The matrix to convert. Zeros are not stored.

    Returns
    -------
    result : (M, N) CSCMatrix
        The matrix in CSC format.
    """
    return from_scipy_sparse(sparse.csc_array(A))


def to_scipy_sparse(A, format='csc'):
    r"""Convert a CSCMatrix to a scipy.sparse array.

    Parameters
    ----------
    A : (M, N) CSCMatrix
        The matrix to convert.
    format : str, optional in {'bsr', 'coo', 'csc', 'csr', 'dia', 'dok', 'lil'}
        The format of the output matrix.

    Returns
    -------
    result : (M, N) sparse array
        The matrix in the specified format.
    """
    A_sparse = sparse.csc_array((A.data, A.indices, A.indptr), shape=A.shape)
    format_method_name = f"to{format}"
    try:
        format_method = getattr(A_sparse, format_method_name)
    except AttributeError:
        raise ValueError(f"Invalid format '{format}'")
    return format_method()


def from_scipy_sparse(A):
    r"""Convert a scipy.sparse matrix or array to a CSCMatrix.

    Parameters
    ----------
    A : (M, N) sparse array
        The matrix to convert.

    Returns
    -------
    result : (M, N) CSCMatrix
        The matrix in CSC format, with duplicates summed and sorted rows.
    """
    A = sparse.csc_array(A)
    A.sum_duplicates()
    return CSCMatrix(A.data, A.indices, A.indptr, A.shape)


def is_symmetric(A):
    """Check if a sparse matrix is exactly symmetric.

    Parameters
    ----------
    A : (N, N) sparse array or CSCMatrix
        The matrix to check.

    Returns
    -------
    bool
        True if ``A == A.T``, False otherwise.
    """
    if isinstance(A, CSCMatrix):
        A = to_scipy_sparse(A)

    M, N = A.shape

    if M != N:
        return False

    A = sparse.csc_array(A)
    return (A != A.T).nnz == 0

# =============================================================================
# =============================================================================
