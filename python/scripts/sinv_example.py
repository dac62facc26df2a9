#!/usr/bin/env python3
# =============================================================================
#     File: sinv_example.py
#  Created: 2025-06-20 18:12
#   Author: Bernie Roesler
#
"""
Example of computing the sparse inverse of a matrix with sparseinv, and
comparing it to the dense inverse from numpy.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

from scipy import sparse

import sparseinv
from sparseinv.plot import sinvspy

# Define the example matrix from Davis, Figure 4.2, p. 39
A = sparseinv.davis_example_chol()
N = A.shape[0]

# Step through the pipeline by hand
S = sparseinv.analyze(A)
F, status = sparseinv.factorize(A, S)
assert status == sparseinv.Status.OK

print(f"permutation: {S.p}")
print(f"nnz(L) = {F.L.nnz} (including the diagonal)")

Z = sparseinv.sinv_factor(F)

# The same result in one call
Z1, p = sparseinv.sinv(A, return_perm=True)
np.testing.assert_allclose(Z.toarray(), Z1.toarray())
np.testing.assert_array_equal(p, S.p)

# Compare to the dense inverse at the stored positions
Ainv = np.linalg.inv(A.toarray())
Zc = sparse.coo_array(Z)
err = np.max(np.abs(Zc.data - Ainv[Zc.row, Zc.col]))
print(f"nnz(Z) = {Z.nnz}, nnz(inv(A)) = {np.count_nonzero(Ainv)}")
print(f"max |Z - inv(A)| on the pattern of Z: {err:.2e}")

# Compare the orderings
for order in sparseinv.ORDERS:
    Z_order = sparseinv.sinv(A, order=order)
    print(f"{order:>10s}: nnz(Z) = {Z_order.nnz}")

# -----------------------------------------------------------------------------
#         Plot the patterns
# -----------------------------------------------------------------------------
fig, axs = plt.subplots(num=1, ncols=2, clear=True)
fig.set_size_inches(9, 4.8, forward=True)

sinvspy(A, sparseinv.sinv(A, order='Natural'), ax=axs[0])
sinvspy(A, Z, ax=axs[1])

axs[0].set_title('Natural')
axs[1].set_title('MinDegree')

plt.show()

# =============================================================================
# =============================================================================
