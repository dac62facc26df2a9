#!/usr/bin/env python3
# =============================================================================
#     File: helpers.py
#  Created: 2025-06-19 14:31
#   Author: Bernie Roesler
#
"""Helper functions for the sparseinv python tests."""
# =============================================================================

import pytest

import numpy as np

from scipy import sparse


# -----------------------------------------------------------------------------
#         Matrix Generators
# -----------------------------------------------------------------------------
def random_spd(N, density, rng):
    """Create a random, sparse, symmetric positive definite matrix.

    The off-diagonal entries are normally distributed, and the diagonal is
    chosen to make the matrix strictly diagonally dominant.
    """
    A = sparse.random_array(
        (N, N),
        density=density,
        format='csc',
        rng=rng,
        data_sampler=rng.normal
    )
    A = sparse.tril(A, -1)
    A = A + A.T
    d = np.abs(A).sum(axis=0) + 1 + rng.random(N)
    return sparse.csc_array(A + sparse.diags_array(d))


def generate_random_spd_matrices(seed=565656, N_trials=50, N_max=25,
                                 d_scale=0.3):
    """Generate a list of random SPD matrices of maximum size N x N."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = d_scale * rng.random()  # density ∈ [0, d_scale]

        A = random_spd(N, d, rng)

        yield pytest.param(
            A,
            id=f"random_{trial:02d}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def generate_pvec_params(seed=565656, N_trials=20, N_max=25):
    """Generate random SPD matrices with random permutation vectors."""
    rng = np.random.default_rng(seed)
    for i in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        A = random_spd(N, 0.2 * rng.random(), rng)
        p = rng.permutation(N)
        yield pytest.param(
            A, p,
            id=f"trial_{i+1}_seed_{seed}",
            marks=pytest.mark.random
        )


def laplacian_2d(n):
    """Create the 5-point Laplacian on an `n`-by-`n` grid (SPD)."""
    T = sparse.diags_array(
        [-1.0, 2.0, -1.0],
        offsets=[-1, 0, 1],
        shape=(n, n)
    )
    I = sparse.eye_array(n)
    return sparse.csc_array(sparse.kron(T, I) + sparse.kron(I, T))


# -----------------------------------------------------------------------------
#         Reference Values
# -----------------------------------------------------------------------------
def selected_inverse(A, Z):
    """Return the entries of ``inv(A)`` at the stored positions of `Z`.

    Parameters
    ----------
    A : (N, N) sparse array
        A symmetric positive definite matrix.
    Z : (N, N) sparse array
        The pattern to select.

    Returns
    -------
    result : (Z.nnz,) ndarray
        The values of the dense inverse, in the storage order of `Z`.
    """
    Ainv = np.linalg.inv(A.toarray())
    Z = sparse.csc_array(Z)
    cols = np.repeat(np.arange(Z.shape[1]), np.diff(Z.indptr))
    return Ainv[Z.indices, cols]


def stored_pattern(A):
    """Return the set of stored ``(i, j)`` positions of a sparse matrix."""
    A = sparse.coo_array(A)
    return set(zip(A.row.tolist(), A.col.tolist()))


def is_valid_permutation(p):
    """Check if a vector is a valid permutation."""
    return np.array_equal(np.sort(p), np.arange(len(p)))


def is_sorted_csc(A):
    """Check that the row indices are strictly increasing in every column."""
    return all(
        np.all(np.diff(A.indices[A.indptr[j]:A.indptr[j+1]]) > 0)
        for j in range(A.shape[1])
    )

# =============================================================================
# =============================================================================
