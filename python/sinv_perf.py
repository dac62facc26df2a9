#!/usr/bin/env python3
# =============================================================================
#     File: sinv_perf.py
#  Created: 2025-06-21 10:04
#   Author: Bernie Roesler
#
"""
Compare the performance of the sparse inverse to the dense inverse.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np
import timeit

from collections import defaultdict
from functools import partial
from pathlib import Path

from scipy.sparse.linalg import LaplacianNd

import sparseinv


SAVE_FIG = True

filestem = 'sinv_perf_laplace'

# -----------------------------------------------------------------------------
#         Create the data
# -----------------------------------------------------------------------------
# for Laplacian, define sqrtN and N = sqrtN^2
Ns = [3, 4, 7, 10, 14, 22, 31]
N_cols = [N**2 for N in Ns]

N_repeats = 3  # number of "runs" in %timeit (7 is default)
N_samples = 1  # number of samples in each run (100,000 is default)

times = defaultdict(list)
density = []


def dense_inv(A):
    """Invert the dense matrix."""
    return np.linalg.inv(A.toarray())


for N in Ns:
    # The 2D Laplacian with Dirichlet boundaries is SPD after negation
    lap = LaplacianNd((N, N), boundary_conditions='dirichlet')
    A = -lap.tosparse().tocsc().astype(np.float64)

    print(f"---------- N = {A.shape[1]:6,d} ----------")

    funcs = {
        'sinv (MinDegree)': partial(sparseinv.sinv, A, order='MinDegree'),
        'sinv (RCM)': partial(sparseinv.sinv, A, order='RCM'),
        'numpy.linalg.inv': partial(dense_inv, A),
    }

    for name, func in funcs.items():
        # Time the function
        ts = timeit.repeat(func, repeat=N_repeats, number=N_samples)

        ts = np.array(ts) / N_samples  # time per loop
        ts_min = np.min(ts)

        times[name].append(ts_min)

        print(f"{name}: {ts_min:.4g} s per loop, "
              f"({N_repeats} runs, {N_samples} loops each)")

    Z = sparseinv.sinv(A)
    density.append(Z.nnz / A.shape[0]**2)


print(np.c_[N_cols, density])

# -----------------------------------------------------------------------------
#         Plot the data
# -----------------------------------------------------------------------------
fig, ax = plt.subplots(num=1, clear=True)
fig.set_size_inches(6.4, 4.8, forward=True)
for key, val in times.items():
    ax.plot(N_cols, val, '.-', label=key)

ax.set_xscale('log')
ax.set_yscale('log')
ax.grid(which='both')
ax.legend()

ax.set_xlabel('Number of Columns')
ax.set_ylabel('Time (s)')
ax.set_title('sparse inverse, 2D Laplacian')

if SAVE_FIG:
    fig_fullpath = Path(f"../plots/{filestem}.png")
    fig_fullpath.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(fig_fullpath)
    print(f"Saved figure to {fig_fullpath}.")

plt.show()

# =============================================================================
# =============================================================================
