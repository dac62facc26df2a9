#!/usr/bin/env python3
# =============================================================================
#     File: plot.py
#  Created: 2025-06-20 16:02
#   Author: Bernie Roesler
#
"""
Functions for plotting sparse matrices and their sparse inverses.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

from matplotlib.colors import ListedColormap
from matplotlib.ticker import MaxNLocator
from scipy import sparse

from ._csc import CSCMatrix
from .utils import to_scipy_sparse


def _to_dense(A):
    """Return a dense float copy of `A`, or raise a TypeError."""
    if isinstance(A, CSCMatrix):
        A = to_scipy_sparse(A)

    if sparse.issparse(A):
        return A.toarray().astype(np.float64)

    try:
        return np.array(A, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TypeError(
            "Input matrix must be a NumPy array, SciPy sparse matrix, "
            f"or CSCMatrix. Error: {e}"
        )


def _setup_axes(ax, M, N):
    """Set limits and ticks like `matplotlib.pyplot.spy`."""
    ax.set_xlim(-0.75, N - 0.25 if N > 0 else 0.75)
    ax.set_ylim(M - 0.25 if M > 0 else 0.75, -0.75)  # inverted y-axis
    ax.xaxis.tick_top()
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))


def cspy(A, cmap='viridis_r', colorbar=True, ax=None, **kwargs):
    """Visualize a sparse or dense matrix with colored markers.

    Similar to `matplotlib.pyplot.spy`, but the markers are colored by the
    value of each non-zero.

    Parameters
    ----------
    A : (M, N) array_like, sparse array, or CSCMatrix
        The matrix to visualize.
    cmap : str or matplotlib.colors.Colormap, optional
        The colormap, by default 'viridis_r'.
    colorbar : bool, optional
        Whether to display a colorbar, by default True.
    ax : matplotlib.axes.Axes, optional
        An existing Axes object to plot on. If None (default), the current axes
        are used.
    **kwargs
        Additional keyword arguments passed to `matplotlib.pyplot.imshow`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    cb : matplotlib.colorbar.Colorbar
        The colorbar object, or None.
    """
    if ax is None:
        ax = plt.gca()

    dense_matrix = _to_dense(A)

    if dense_matrix.ndim != 2:
        raise ValueError("Input matrix must be 2-dimensional.")

    M, N = dense_matrix.shape
    nnz = np.count_nonzero(dense_matrix)

    _setup_axes(ax, M, N)

    if nnz == 0:
        ax.set_xlabel(f"{(M, N)}, nnz = 0, density = 0")
        return ax, None

    ax.set_xlabel(f"{(M, N)}, nnz = {nnz}, density = {nnz / (M * N):.2%}")

    dense_matrix[dense_matrix == 0] = np.nan

    im = ax.imshow(dense_matrix, cmap=cmap, origin='upper', aspect='equal',
                   **kwargs)

    cb = ax.figure.colorbar(im, ax=ax, shrink=0.8) if colorbar else None

    return ax, cb


def sinvspy(A, Z, ax=None, **kwargs):
    """Plot the pattern of a sparse inverse, highlighting the fill-in.

    Positions stored in both `A` and `Z` are drawn in one color, positions
    stored only in `Z` (fill-in from the factorization) in another.

    Parameters
    ----------
    A : (N, N) sparse array or CSCMatrix
        The original matrix.
    Z : (N, N) sparse array or CSCMatrix
        The sparse inverse of `A`, as returned by `sparseinv.sinv`.
    ax : matplotlib.axes.Axes, optional
        Axes object to plot on. If `None`, the current axes are used.
    **kwargs
        Additional keyword arguments passed to `matplotlib.pyplot.imshow`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    fill : int
        The number of fill-in entries in `Z`.
    """
    if ax is None:
        ax = plt.gca()

    if isinstance(A, CSCMatrix):
        A = to_scipy_sparse(A)

    if isinstance(Z, CSCMatrix):
        Z = to_scipy_sparse(Z)

    if A.shape != Z.shape:
        raise ValueError(f"Shapes do not match: {A.shape} != {Z.shape}.")

    # Use the stored pattern, not the values, since entries of Z may be 0
    Ab = sparse.csc_array(A).astype(bool).astype(np.int8)
    Zb = sparse.csc_array(Z)
    Zb = sparse.csc_array(
        (np.ones(Zb.nnz, dtype=np.int8), Zb.indices, Zb.indptr),
        shape=Zb.shape
    )

    S = (Zb + Ab).toarray().astype(np.float64)  # 1 = fill-in, 2 = in A
    S[S == 0] = np.nan

    M, N = Z.shape
    _setup_axes(ax, M, N)

    cmap = ListedColormap(['C3', 'C0'])
    ax.imshow(S, cmap=cmap, vmin=1, vmax=2, origin='upper', aspect='equal',
              interpolation='none', **kwargs)

    fill = int(Zb.nnz - Zb.multiply(Ab).count_nonzero())

    ax.set_xlabel(f"{(M, N)}, nnz(A) = {A.nnz}, nnz(Z) = {Zb.nnz}, "
                  f"fill-in = {fill}")

    return ax, fill

# =============================================================================
# =============================================================================
