#!/usr/bin/env python3
# =============================================================================
#     File: _csc.py
#  Created: 2025-06-18 10:12
#   Author: Bernie Roesler
#
"""
Compressed sparse column storage and the counting-sort primitives used to
(re)build it.
"""
# =============================================================================

import numpy as np


def cumsum(p, c):
    """Compute the column pointers of a matrix from its column counts.

    On return, ``p[i] = sum(c[:i])`` for ``i`` in ``[0, n]``, and ``c`` is
    overwritten with ``p[:n]`` so that it can serve as the insertion cursor of
    a subsequent scatter pass (``c[i]`` is the next free slot of bucket
    ``i``).

    .. note:: See Davis, p 13, `cs_cumsum`.

    Parameters
    ----------
    p : (N+1,) ndarray of int
        Output array of column pointers.
    c : (N,) ndarray of int
        Column counts. Modified in place.

    Returns
    -------
    nz : int
        The total count, ``sum(c)`` on input. Zero if either array is missing
        or their sizes do not match, in which case neither array is touched.
    """
    if p is None or c is None:
        return 0

    N = len(c)

    if len(p) != N + 1:
        return 0

    nz = 0
    for i in range(N):
        p[i] = nz
        nz += c[i]
        c[i] = p[i]
    p[N] = nz

    return int(nz)


class SparseColumn:
    """A read-only view of one column of a `CSCMatrix`.

    Parameters
    ----------
    rows : (K,) ndarray of int
        Row indices of the column, sorted ascending.
    values : (K,) ndarray
        The corresponding values.
    """
    __slots__ = ('rows', 'values')

    def __init__(self, rows, values):
        self.rows = rows
        self.values = values

    def find(self, row):
        """Return the value stored at `row`, or None if it is not stored."""
        k = np.searchsorted(self.rows, row)
        if k < self.rows.size and self.rows[k] == row:
            return self.values[k]
        return None

    def take(self, rows):
        """Return the values stored at each of `rows`.

        Parameters
        ----------
        rows : (K,) array_like of int
            Sorted row indices, all of which must be stored in the column.

        Returns
        -------
        values : (K,) ndarray
            The values of the column at `rows`.
        """
        k = np.searchsorted(self.rows, rows)
        k = np.minimum(k, self.rows.size - 1)
        if np.any(self.rows[k] != rows):
            raise KeyError("Not all rows are stored in the column.")
        return self.values[k]

    def __iter__(self):
        return zip(self.rows.tolist(), self.values.tolist())

    def __len__(self):
        return self.rows.size

    def __repr__(self):
        return f"SparseColumn(rows={self.rows!r}, values={self.values!r})"


class CSCMatrix:
    """A matrix in compressed sparse column format.

    The arguments follow the ``scipy.sparse.csc_array((data, indices,
    indptr), shape)`` convention.

    Parameters
    ----------
    data : (nnz,) array_like
        The numerical values.
    indices : (nnz,) array_like of int
        The row index of each value.
    indptr : (N+1,) array_like of int
        Column pointers. Column `j` is stored in ``indptr[j]:indptr[j+1]``.
    shape : 2-tuple of int
        The matrix dimensions ``(M, N)``.
    """

    def __init__(self, data, indices, indptr, shape):
        self.data = np.asarray(data)
        self.indices = np.asarray(indices, dtype=np.intp)
        self.indptr = np.asarray(indptr, dtype=np.intp)
        self.shape = (int(shape[0]), int(shape[1]))

        if self.indptr.size != self.shape[1] + 1:
            raise ValueError(
                f"indptr has size {self.indptr.size}, "
                f"expected {self.shape[1] + 1}."
            )

        if self.indices.size != self.data.size:
            raise ValueError("indices and data must have the same size.")

    @property
    def nnz(self):
        """Number of stored entries."""
        return int(self.indptr[-1])

    @property
    def dtype(self):
        return self.data.dtype

    def column(self, j):
        """Return a `SparseColumn` view of column `j`."""
        a, b = self.indptr[j], self.indptr[j+1]
        return SparseColumn(self.indices[a:b], self.data[a:b])

    def copy(self):
        return CSCMatrix(
            self.data.copy(),
            self.indices.copy(),
            self.indptr.copy(),
            self.shape
        )

    def tocsc(self):
        return self

    def transpose(self):
        """Compute the transpose by a counting sort over the rows.

        The row indices of the result are sorted within each column, whether
        or not the rows of `self` are sorted.

        .. note:: See Davis, p 14, `cs_transpose`.
        """
        M, N = self.shape
        Ap, Ai, Ax = self.indptr, self.indices, self.data

        Cp = np.zeros(M + 1, dtype=np.intp)
        Ci = np.zeros(self.nnz, dtype=np.intp)
        Cx = np.zeros(self.nnz, dtype=self.dtype)

        w = np.bincount(Ai[:self.nnz], minlength=M).astype(np.intp)
        cumsum(Cp, w)

        for j in range(N):
            for p in range(Ap[j], Ap[j+1]):
                q = w[Ai[p]]
                w[Ai[p]] += 1
                Ci[q] = j
                Cx[q] = Ax[p]

        return CSCMatrix(Cx, Ci, Cp, (N, M))

    @property
    def T(self):
        return self.transpose()

    def has_sorted_indices(self):
        """Check that the row indices are strictly increasing in each column."""
        for j in range(self.shape[1]):
            rows = self.indices[self.indptr[j]:self.indptr[j+1]]
            if np.any(np.diff(rows) <= 0):
                return False
        return True

    def toarray(self):
        """Return a dense copy of the matrix."""
        A = np.zeros(self.shape, dtype=self.dtype)
        for j in range(self.shape[1]):
            for p in range(self.indptr[j], self.indptr[j+1]):
                A[self.indices[p], j] += self.data[p]
        return A

    def __repr__(self):
        M, N = self.shape
        return (f"<CSCMatrix {M}-by-{N}, nnz: {self.nnz}, "
                f"dtype: {self.dtype}>")

# =============================================================================
# =============================================================================
